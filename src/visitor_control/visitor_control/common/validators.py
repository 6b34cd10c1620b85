from __future__ import annotations

import re
from datetime import date, time
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_hhmm, parse_iso_date

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} es obligatorio")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} debe tener al menos {min_len} caracteres")
    return value


def require_length_between(value: Optional[str], field_name: str, min_len: int, max_len: int) -> str:
    value = require_non_empty(value, field_name)
    if len(value) < min_len or len(value) > max_len:
        raise ValidationError(f"{field_name} debe tener entre {min_len} y {max_len} caracteres")
    return value


def require_max_length(value: Optional[str], field_name: str, max_len: int) -> Optional[str]:
    if value is not None and len(value) > max_len:
        raise ValidationError(f"{field_name} no puede tener más de {max_len} caracteres")
    return value


def require_email(value: Optional[str]) -> str:
    value = require_non_empty(value, "El email")
    if not _EMAIL_RE.match(value):
        raise ValidationError("El email no tiene un formato válido")
    return value.lower()


def require_int_between(value, field_name: str, low: int, high: int) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} debe ser un número entero")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} debe ser un número entero")
    if isinstance(value, float) and value != number:
        raise ValidationError(f"{field_name} debe ser un número entero")
    if number < low or number > high:
        raise ValidationError(f"{field_name} debe estar entre {low} y {high}")
    return number


def require_positive_int(value, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} debe ser un número entero positivo")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} debe ser un número entero positivo")
    if number < 1:
        raise ValidationError(f"{field_name} debe ser un número entero positivo")
    return number


def require_iso_date(value, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} no tiene un formato válido (YYYY-MM-DD)")


def optional_iso_date(value, field_name: str) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_iso_date(value, field_name)


def require_hhmm(value, field_name: str) -> time:
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    try:
        return parse_hhmm(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} no tiene un formato válido (HH:MM)")
