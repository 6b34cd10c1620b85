from __future__ import annotations

from datetime import date, time

import pytest
from werkzeug.security import generate_password_hash

from src.visitor_control.visitor_control.container import build_container
from src.visitor_control.visitor_control.core.enums import Role
from src.visitor_control.visitor_control.database.bootstrap import apply_schema
from src.visitor_control.visitor_control.database.connection import DatabaseConnection
from src.visitor_control.visitor_control.visitors.model import NewVisitorEntry


@pytest.fixture
def conn():
    connection = DatabaseConnection("sqlite://")
    apply_schema(connection)
    yield connection
    connection.dispose()


@pytest.fixture
def container(conn):
    return build_container(conn)


@pytest.fixture
def users(container):
    """Admin and two operators, returned as ``{"admin": id, "op": id, "op2": id}``."""
    repo = container.users_repo
    return {
        "admin": repo.create_user(
            name="Admin", email="admin@test.local", password_hash=generate_password_hash("admin123"), role=Role.ADMIN
        ),
        "op": repo.create_user(
            name="Operador Uno", email="op@test.local", password_hash=generate_password_hash("op12345"), role=Role.OPERATOR
        ),
        "op2": repo.create_user(
            name="Operador Dos", email="op2@test.local", password_hash=generate_password_hash("op12345"), role=Role.OPERATOR
        ),
    }


@pytest.fixture
def floors(container):
    """Two active floors and an inactive one: ``{"p1": id, "p2": id, "old": id}``."""
    repo = container.floors_repo
    ids = {
        "p1": repo.create_floor(name="Piso 1", description="Oficinas"),
        "p2": repo.create_floor(name="Piso 2", description=None),
        "old": repo.create_floor(name="Sótano", description="Archivo"),
    }
    repo.update_floor(floor_id=ids["old"], active=False)
    return ids


@pytest.fixture
def add_entry(container):
    def _add(floor_id, day, count, *, user_id, at=time(10, 0), notes=None):
        return container.entries_repo.create_entry(
            NewVisitorEntry.build(
                floor_id=floor_id,
                count=count,
                date=day,
                time=at,
                recorded_by_user_id=user_id,
                notes=notes,
            )
        )

    return _add


@pytest.fixture
def sample_entries(floors, users, add_entry):
    """Three entries on two floors over 2024-01-01 .. 2024-01-02."""
    op = users["op"]
    return [
        add_entry(floors["p1"], date(2024, 1, 1), 5, user_id=op, at=time(9, 0)),
        add_entry(floors["p1"], date(2024, 1, 2), 3, user_id=op, at=time(11, 30)),
        add_entry(floors["p2"], date(2024, 1, 1), 7, user_id=users["admin"], at=time(15, 45)),
    ]
