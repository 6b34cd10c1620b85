"""Authorization policy.

Every use case that needs a permission check calls :func:`authorize` with the
acting user's role and id, the owner of the resource (when there is one) and
the action being attempted.
"""

from __future__ import annotations

from typing import Optional

from .enums import Action, Role
from .exceptions import AuthorizationError

_ANY_AUTHENTICATED = {Action.VIEW_REPORTS, Action.CREATE_ENTRY}
_ADMIN_OR_OWNER = {Action.UPDATE_ENTRY, Action.DELETE_ENTRY}
_ADMIN_ONLY = {Action.MANAGE_FLOORS, Action.MANAGE_CONFIG, Action.VIEW_ALL_CONFIG, Action.MANAGE_USERS}

_DENIED_MESSAGES = {
    Action.UPDATE_ENTRY: "No tienes permisos para editar este registro",
    Action.DELETE_ENTRY: "No tienes permisos para eliminar este registro",
    Action.MANAGE_FLOORS: "Solo los administradores pueden gestionar pisos",
    Action.MANAGE_CONFIG: "Solo los administradores pueden modificar configuraciones",
    Action.VIEW_ALL_CONFIG: "Solo los administradores pueden ver todas las configuraciones",
    Action.MANAGE_USERS: "Solo los administradores pueden crear usuarios",
}


def is_allowed(
    role: Role,
    actor_id: int,
    action: Action,
    *,
    owner_id: Optional[int] = None,
) -> bool:
    if role == Role.ADMIN:
        return True
    if action in _ADMIN_ONLY:
        return False
    if action in _ANY_AUTHENTICATED:
        return True
    if action in _ADMIN_OR_OWNER:
        return owner_id is not None and int(owner_id) == int(actor_id)
    return False


def authorize(
    role: Role,
    actor_id: int,
    action: Action,
    *,
    owner_id: Optional[int] = None,
) -> None:
    if not is_allowed(role, actor_id, action, owner_id=owner_id):
        raise AuthorizationError(_DENIED_MESSAGES.get(action, "Permisos insuficientes"))
