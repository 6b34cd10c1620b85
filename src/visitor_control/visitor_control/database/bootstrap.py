from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import inspect, select
from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DatabaseConnection, session_scope
from .orm import Base, ConfigRow, FloorRow, UserRow

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = (
    ("nombre_institucion", "Institución", "Nombre de la institución"),
    ("area_responsable", "Administración", "Área responsable del control de visitantes"),
    ("version_sistema", "1.0.0", "Versión del sistema"),
    ("backup_automatico", "false", "Respaldo automático habilitado"),
)

DEMO_FLOORS = (
    ("Planta Baja", "Recepción y atención al público"),
    ("Piso 1", "Oficinas administrativas"),
    ("Piso 2", "Dirección"),
)

DEMO_USERS = (
    ("Administrador", "admin@example.com", "admin123", Role.ADMIN),
    ("Operador", "operador@example.com", "operador123", Role.OPERATOR),
)


def apply_schema(conn: DatabaseConnection) -> None:
    """Create missing tables (idempotent)."""
    Base.metadata.create_all(conn.engine)


def list_tables(conn: DatabaseConnection) -> Sequence[str]:
    return sorted(inspect(conn.engine).get_table_names())


def ensure_default_config(conn: DatabaseConnection) -> int:
    created = 0
    with session_scope(conn) as session:
        existing = set(session.scalars(select(ConfigRow.key)))
        for key, value, description in DEFAULT_CONFIG:
            if key in existing:
                continue
            session.add(ConfigRow(key=key, value=value, description=description))
            created += 1
    return created


def ensure_demo_floors(conn: DatabaseConnection) -> int:
    created = 0
    with session_scope(conn) as session:
        existing = set(session.scalars(select(FloorRow.name)))
        for name, description in DEMO_FLOORS:
            if name in existing:
                continue
            session.add(FloorRow(name=name, description=description, active=True))
            created += 1
    return created


def ensure_demo_users(conn: DatabaseConnection) -> int:
    """Create the demo admin/operator accounts if their emails are free."""
    created = 0
    with session_scope(conn) as session:
        existing = set(session.scalars(select(UserRow.email)))
        for name, email, password, role in DEMO_USERS:
            if email in existing:
                continue
            session.add(
                UserRow(
                    name=name,
                    email=email,
                    password_hash=generate_password_hash(password),
                    role=role.value,
                    active=True,
                )
            )
            created += 1
    return created


def seed_demo_data(conn: DatabaseConnection) -> None:
    config = ensure_default_config(conn)
    floors = ensure_demo_floors(conn)
    users = ensure_demo_users(conn)
    logger.info("Demo seed applied (config=%d, floors=%d, users=%d)", config, floors, users)
