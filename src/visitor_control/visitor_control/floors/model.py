from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Floor:
    """Domain entity: a building floor entries are recorded against.

    Floors are never removed; "deleting" one clears ``active``.
    """

    floor_id: int
    name: str
    description: Optional[str]
    active: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.floor_id,
            "nombre": self.name,
            "descripcion": self.description,
            "activo": self.active,
        }
