from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_length_between, require_min_length, require_non_empty
from ..core.constants import PASSWORD_MIN_LENGTH, USER_NAME_MAX_LENGTH, USER_NAME_MIN_LENGTH
from ..core.enums import Action, Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..core.policy import authorize
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    name: str
    email: str
    role: Role


def _password_matches(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = require_non_empty(email, "El email")
        require_non_empty(password, "La contraseña")

        user = self._users.get_by_email(email)
        if not user or not user.active:
            raise AuthenticationError("Credenciales inválidas")
        if not _password_matches(user.password_hash, password):
            raise AuthenticationError("Credenciales inválidas")

        logger.info("User %s logged in", user.user_id)
        return SessionUser(user_id=user.user_id, name=user.name, email=user.email, role=user.role)

    def load_active(self, user_id: int) -> User:
        """User behind a session; inactive or removed accounts are rejected."""
        user = self._users.get_by_id(int(user_id))
        if not user or not user.active:
            raise AuthenticationError("Usuario no encontrado o inactivo")
        return user


class UserService:
    """Use case: manage accounts and profiles."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(
        self,
        *,
        current_role: Role,
        current_user_id: int,
        name: str,
        email: str,
        password: str,
        role: Role = Role.OPERATOR,
    ) -> User:
        authorize(current_role, current_user_id, Action.MANAGE_USERS)

        name = require_length_between(name, "El nombre", USER_NAME_MIN_LENGTH, USER_NAME_MAX_LENGTH)
        email = require_email(email)
        require_min_length(password, "La contraseña", PASSWORD_MIN_LENGTH)
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("El rol debe ser admin u operador")

        if self._users.get_by_email(email):
            raise ValidationError("Este email ya está registrado")

        user_id = self._users.create_user(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
        )
        logger.info("User %s registered by %s", user_id, current_user_id)
        return self.get_profile(user_id)

    def get_profile(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("Usuario no encontrado")
        return user

    def update_profile(self, user_id: int, *, name: Optional[str] = None, email: Optional[str] = None) -> User:
        user = self.get_profile(user_id)

        if name is not None:
            name = require_length_between(name, "El nombre", USER_NAME_MIN_LENGTH, USER_NAME_MAX_LENGTH)
        if email is not None:
            email = require_email(email)
            other = self._users.get_by_email(email)
            if other and other.user_id != user.user_id:
                raise ValidationError("Este email ya está registrado")

        self._users.update_profile(user.user_id, name=name, email=email)
        return self.get_profile(user.user_id)

    def change_password(self, user_id: int, *, current_password: str, new_password: str) -> None:
        if not current_password or not new_password:
            raise ValidationError("Contraseña actual y nueva contraseña son obligatorias")
        require_min_length(new_password, "La nueva contraseña", PASSWORD_MIN_LENGTH)

        user = self.get_profile(user_id)
        if not _password_matches(user.password_hash, current_password):
            raise ValidationError("La contraseña actual es incorrecta")

        self._users.update_password(user.user_id, password_hash=generate_password_hash(new_password))
        logger.info("User %s changed password", user.user_id)
