from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_length_between, require_max_length, require_positive_int
from ..core.constants import FLOOR_DESCRIPTION_MAX_LENGTH, FLOOR_NAME_MAX_LENGTH, FLOOR_NAME_MIN_LENGTH
from ..core.enums import Action, Role
from ..core.exceptions import InactiveFloorError, NotFoundError, ValidationError
from ..core.policy import authorize
from .model import Floor
from .repository import FloorRepository

logger = logging.getLogger(__name__)

_UNSET = object()


class FloorService:
    """Use cases: floor directory (admin managed, soft delete)."""

    def __init__(self, floors: FloorRepository):
        self._floors = floors

    def list_floors(self, *, include_inactive: bool = False) -> Sequence[Floor]:
        return self._floors.list_floors(include_inactive=include_inactive)

    def get_floor(self, floor_id: int) -> Floor:
        floor = self._floors.get_by_id(require_positive_int(floor_id, "El piso"))
        if not floor:
            raise NotFoundError("Piso no encontrado")
        return floor

    def require_active_floor(self, floor_id: int) -> Floor:
        """Floor that can receive new or moved entries."""
        floor = self.get_floor(floor_id)
        if not floor.active:
            raise InactiveFloorError("El piso está inactivo")
        return floor

    def create_floor(
        self,
        *,
        current_role: Role,
        current_user_id: int,
        name: str,
        description: Optional[str] = None,
    ) -> Floor:
        authorize(current_role, current_user_id, Action.MANAGE_FLOORS)

        name = self._clean_name(name)
        description = self._clean_description(description)

        if self._floors.get_by_name(name):
            raise ValidationError("Ya existe un piso con ese nombre")

        floor_id = self._floors.create_floor(name=name, description=description)
        logger.info("Floor %s created by user %s", floor_id, current_user_id)
        return self.get_floor(floor_id)

    def update_floor(
        self,
        *,
        current_role: Role,
        current_user_id: int,
        floor_id: int,
        name: Optional[str] = None,
        description=_UNSET,
        active: Optional[bool] = None,
    ) -> Floor:
        authorize(current_role, current_user_id, Action.MANAGE_FLOORS)
        floor = self.get_floor(floor_id)

        if name is not None:
            name = self._clean_name(name)
            other = self._floors.get_by_name(name)
            if other and other.floor_id != floor.floor_id:
                raise ValidationError("Ya existe un piso con ese nombre")

        clear_description = False
        if description is _UNSET:
            description = None
        else:
            description = self._clean_description(description)
            clear_description = description is None

        self._floors.update_floor(
            floor_id=floor.floor_id,
            name=name,
            description=description,
            active=active,
            clear_description=clear_description,
        )
        return self.get_floor(floor.floor_id)

    def deactivate_floor(self, *, current_role: Role, current_user_id: int, floor_id: int) -> None:
        authorize(current_role, current_user_id, Action.MANAGE_FLOORS)
        floor = self.get_floor(floor_id)
        self._floors.update_floor(floor_id=floor.floor_id, active=False)
        logger.info("Floor %s deactivated by user %s", floor.floor_id, current_user_id)

    def floor_counts(self) -> dict:
        total, active = self._floors.count_floors()
        return {"total": total, "activos": active, "inactivos": total - active}

    @staticmethod
    def _clean_name(name: Optional[str]) -> str:
        return require_length_between(name, "El nombre del piso", FLOOR_NAME_MIN_LENGTH, FLOOR_NAME_MAX_LENGTH)

    @staticmethod
    def _clean_description(description: Optional[str]) -> Optional[str]:
        if description is None:
            return None
        description = description.strip() or None
        return require_max_length(description, "La descripción", FLOOR_DESCRIPTION_MAX_LENGTH)
