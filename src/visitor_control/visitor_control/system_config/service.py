from __future__ import annotations

import logging
import platform
import time
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_length_between
from ..core.constants import CONFIG_KEY_MAX_LENGTH, SYSTEM_CONFIG_KEYS
from ..core.enums import Action, Role
from ..core.exceptions import ValidationError
from ..core.policy import authorize
from ..floors.service import FloorService
from .model import ConfigEntry
from .repository import ConfigRepository

logger = logging.getLogger(__name__)


class ConfigService:
    """Use cases: institution metadata and admin-managed settings."""

    def __init__(self, config: ConfigRepository, floors: FloorService, *, started_at: Optional[float] = None):
        self._config = config
        self._floors = floors
        self._started_at = time.monotonic() if started_at is None else started_at

    def get_system_config(self) -> dict:
        """Known institution keys as a flat ``{key: value}`` mapping."""
        return {e.key: e.value for e in self._config.get_many(SYSTEM_CONFIG_KEYS)}

    def list_all_config(self, *, current_role: Role, current_user_id: int) -> Sequence[ConfigEntry]:
        authorize(current_role, current_user_id, Action.VIEW_ALL_CONFIG)
        return self._config.list_all()

    def set_config(
        self,
        *,
        current_role: Role,
        current_user_id: int,
        key: str,
        value,
        description: Optional[str] = None,
    ) -> ConfigEntry:
        authorize(current_role, current_user_id, Action.MANAGE_CONFIG)

        key = require_length_between(key, "La clave", 1, CONFIG_KEY_MAX_LENGTH)
        if value is None:
            raise ValidationError("El valor es obligatorio")

        entry = self._config.upsert(key=key, value=str(value), description=description)
        logger.info("Config %r updated by user %s", key, current_user_id)
        return entry

    def system_info(self) -> dict:
        return {
            "configuracion": self.get_system_config(),
            "estadisticas": {"pisos": self._floors.floor_counts()},
            "servidor": {
                "python_version": platform.python_version(),
                "plataforma": platform.platform(),
                "uptime": int(time.monotonic() - self._started_at),
                "timestamp": now_local().isoformat(timespec="seconds"),
            },
        }
