from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ConfigEntry:
    """One key/value system setting."""

    key: str
    value: str
    description: Optional[str] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "clave": self.key,
            "valor": self.value,
            "descripcion": self.description,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
