from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select

from ..core.enums import Role
from ..database.connection import DatabaseConnection, session_scope
from ..database.orm import UserRow
from .model import User
from .repository import UserRepository


def _to_user(row: UserRow) -> User:
    return User(
        user_id=int(row.id),
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        role=Role(row.role),
        active=bool(row.active),
        created_at=row.created_at,
    )


class SqlUserRepository(UserRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    def get_by_id(self, user_id: int) -> Optional[User]:
        with session_scope(self._conn) as session:
            row = session.get(UserRow, int(user_id))
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with session_scope(self._conn) as session:
            row = session.scalars(select(UserRow).where(func.lower(UserRow.email) == email.lower())).first()
            return _to_user(row) if row else None

    def create_user(self, *, name: str, email: str, password_hash: str, role: Role) -> int:
        with session_scope(self._conn) as session:
            row = UserRow(name=name, email=email, password_hash=password_hash, role=role.value, active=True)
            session.add(row)
            session.flush()
            return int(row.id)

    def update_profile(self, user_id: int, *, name: Optional[str] = None, email: Optional[str] = None) -> bool:
        with session_scope(self._conn) as session:
            row = session.get(UserRow, int(user_id))
            if not row:
                return False
            if name is not None:
                row.name = name
            if email is not None:
                row.email = email
            return True

    def update_password(self, user_id: int, *, password_hash: str) -> bool:
        with session_scope(self._conn) as session:
            row = session.get(UserRow, int(user_id))
            if not row:
                return False
            row.password_hash = password_hash
            return True
