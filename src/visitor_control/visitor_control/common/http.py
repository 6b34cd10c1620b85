"""JSON helpers, session guards and error handlers shared by the controllers."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, current_app, g, jsonify, request, session
from sqlalchemy.exc import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

from ..core.enums import Action, Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InactiveFloorError,
    InvalidRangeError,
    NotFoundError,
    ValidationError,
)
from ..core.policy import authorize
from .validators import optional_iso_date, require_positive_int

logger = logging.getLogger(__name__)

EXTENSION_KEY = "visitor_control"

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (InactiveFloorError, 409),
    (ValidationError, 400),
)


def container():
    return current_app.extensions[EXTENSION_KEY]


def ok(data=None, *, message: Optional[str] = None, status: int = 200):
    body: dict = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def fail(message: str, status: int, *, code: Optional[str] = None):
    body: dict = {"success": False, "message": message}
    if code:
        body["code"] = code
    return jsonify(body), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def query_date(name: str):
    """Date range bound from the query string; malformed bounds are range errors."""
    try:
        return optional_iso_date(request.args.get(name), name)
    except ValidationError as e:
        raise InvalidRangeError(str(e)) from e


def query_int(name: str) -> Optional[int]:
    value = request.args.get(name)
    if value is None or not value.strip():
        return None
    return require_positive_int(value, name)


def current_role() -> Role:
    return g.current_user.role


def current_user_id() -> int:
    return g.current_user.user_id


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Acceso denegado. Inicie sesión para continuar", 401)
        try:
            g.current_user = container().auth_service.load_active(int(session["user_id"]))
        except AuthenticationError as e:
            session.clear()
            return fail(str(e), 401, code=e.code)
        return view(*args, **kwargs)

    return wrapper


def permission_required(action: Action):
    """Logged-in user allowed to perform ``action`` by the authorization policy."""

    def decorator(view):
        @wraps(view)
        @login_required
        def wrapper(*args, **kwargs):
            authorize(current_role(), current_user_id(), action)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((s for cls, s in _STATUS_BY_ERROR if isinstance(e, cls)), 400)
        return fail(str(e), status, code=e.code)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(e: IntegrityError):
        logger.warning("Integrity error on %s %s: %s", request.method, request.path, e.orig)
        return fail("Ya existe un registro con estos datos o la referencia es inválida", 400)

    @app.errorhandler(OperationalError)
    def handle_operational_error(e: OperationalError):
        logger.error("Database unavailable on %s %s: %s", request.method, request.path, e.orig)
        return fail("Error de conexión con la base de datos", 503)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        if e.code == 404:
            return fail(f"Ruta no encontrada - {request.path}", 404)
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return fail("Error interno del servidor", 500)


def register_request_logging(app: Flask) -> None:
    @app.after_request
    def log_request(response):
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response
