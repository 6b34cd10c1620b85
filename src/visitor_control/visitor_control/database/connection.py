from __future__ import annotations

import urllib.parse
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @property
    def url(self) -> str:
        password = urllib.parse.quote_plus(self.password)
        return f"mysql+mysqlconnector://{self.user}:{password}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Owns the SQLAlchemy engine and hands out short-lived sessions.

    Note: One session per repository operation (same as one connection per
    operation for simple Flask apps).
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self._engine = self._build_engine(url, echo=echo)
        self._sessions = sessionmaker(bind=self._engine, autoflush=False, expire_on_commit=False)

    @staticmethod
    def _build_engine(url: str, *, echo: bool) -> Engine:
        if url.startswith("sqlite"):
            # In-memory SQLite only exists inside a single connection.
            return create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url, echo=echo, pool_pre_ping=True)

    @property
    def engine(self) -> Engine:
        return self._engine

    def session(self) -> Session:
        return self._sessions()

    def dispose(self) -> None:
        self._engine.dispose()


@contextmanager
def session_scope(conn: DatabaseConnection) -> Iterator[Session]:
    session = conn.session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
