from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, select

from ..database.connection import DatabaseConnection, session_scope
from ..database.orm import FloorRow
from .model import Floor
from .repository import FloorRepository


def _to_floor(row: FloorRow) -> Floor:
    return Floor(
        floor_id=int(row.id),
        name=row.name,
        description=row.description,
        active=bool(row.active),
    )


class SqlFloorRepository(FloorRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def get_by_id(self, floor_id: int) -> Optional[Floor]:
        with session_scope(self._conn) as session:
            row = session.get(FloorRow, int(floor_id))
            return _to_floor(row) if row else None

    def get_by_name(self, name: str) -> Optional[Floor]:
        with session_scope(self._conn) as session:
            row = session.scalars(select(FloorRow).where(FloorRow.name == name)).first()
            return _to_floor(row) if row else None

    def list_floors(self, *, include_inactive: bool = False) -> Sequence[Floor]:
        stmt = select(FloorRow).order_by(FloorRow.id.asc())
        if not include_inactive:
            stmt = stmt.where(FloorRow.active.is_(True))
        with session_scope(self._conn) as session:
            return [_to_floor(r) for r in session.scalars(stmt)]

    def create_floor(self, *, name: str, description: Optional[str]) -> int:
        with session_scope(self._conn) as session:
            row = FloorRow(name=name, description=description, active=True)
            session.add(row)
            session.flush()
            return int(row.id)

    def update_floor(
        self,
        *,
        floor_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        active: Optional[bool] = None,
        clear_description: bool = False,
    ) -> bool:
        with session_scope(self._conn) as session:
            row = session.get(FloorRow, int(floor_id))
            if not row:
                return False
            if name is not None:
                row.name = name
            if description is not None or clear_description:
                row.description = description
            if active is not None:
                row.active = bool(active)
            return True

    def count_floors(self) -> tuple[int, int]:
        with session_scope(self._conn) as session:
            total = session.scalar(select(func.count(FloorRow.id)))
            active = session.scalar(select(func.count(FloorRow.id)).where(FloorRow.active.is_(True)))
            return int(total or 0), int(active or 0)
