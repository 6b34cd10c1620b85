from __future__ import annotations

from typing import Iterable, Optional, Sequence

from sqlalchemy import select

from ..database.connection import DatabaseConnection, session_scope
from ..database.orm import ConfigRow
from .model import ConfigEntry
from .repository import ConfigRepository


def _to_entry(row: ConfigRow) -> ConfigEntry:
    return ConfigEntry(key=row.key, value=row.value, description=row.description, updated_at=row.updated_at)


class SqlConfigRepository(ConfigRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def get_many(self, keys: Iterable[str]) -> Sequence[ConfigEntry]:
        stmt = select(ConfigRow).where(ConfigRow.key.in_(list(keys))).order_by(ConfigRow.key.asc())
        with session_scope(self._conn) as session:
            return [_to_entry(r) for r in session.scalars(stmt)]

    def list_all(self) -> Sequence[ConfigEntry]:
        with session_scope(self._conn) as session:
            return [_to_entry(r) for r in session.scalars(select(ConfigRow).order_by(ConfigRow.key.asc()))]

    def upsert(self, *, key: str, value: str, description: Optional[str]) -> ConfigEntry:
        with session_scope(self._conn) as session:
            row = session.scalars(select(ConfigRow).where(ConfigRow.key == key)).first()
            if row is None:
                row = ConfigRow(key=key, value=value, description=description)
                session.add(row)
            else:
                row.value = value
                if description is not None:
                    row.description = description
            session.flush()
            return _to_entry(row)
