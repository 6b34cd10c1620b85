from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a staff account.

    Note: plain data object, no database access.
    """

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Role
    active: bool = True
    created_at: Optional[datetime] = None

    def to_public_dict(self) -> dict:
        return {
            "id": self.user_id,
            "nombre": self.name,
            "email": self.email,
            "rol": self.role.value,
            "activo": self.active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
