from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles used by the authorization policy."""

    ADMIN = "admin"
    OPERATOR = "operador"


class Weekday(str, Enum):
    """Day of week as stored on each entry (Spanish names, Monday first)."""

    MONDAY = "Lunes"
    TUESDAY = "Martes"
    WEDNESDAY = "Miércoles"
    THURSDAY = "Jueves"
    FRIDAY = "Viernes"
    SATURDAY = "Sábado"
    SUNDAY = "Domingo"

    @property
    def position(self) -> int:
        """1 for Monday through 7 for Sunday."""
        return list(Weekday).index(self) + 1


class ExportMode(str, Enum):
    FULL = "full"
    SUMMARY = "summary"


class Action(str, Enum):
    """Operations checked by ``core.policy``."""

    VIEW_REPORTS = "view_reports"
    CREATE_ENTRY = "create_entry"
    UPDATE_ENTRY = "update_entry"
    DELETE_ENTRY = "delete_entry"
    MANAGE_FLOORS = "manage_floors"
    MANAGE_CONFIG = "manage_config"
    VIEW_ALL_CONFIG = "view_all_config"
    MANAGE_USERS = "manage_users"
