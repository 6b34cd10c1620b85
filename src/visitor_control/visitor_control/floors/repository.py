from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Floor


class FloorRepository(Protocol):
    def get_by_id(self, floor_id: int) -> Optional[Floor]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Floor]:
        raise NotImplementedError

    def list_floors(self, *, include_inactive: bool = False) -> Sequence[Floor]:
        raise NotImplementedError

    def create_floor(self, *, name: str, description: Optional[str]) -> int:
        raise NotImplementedError

    def update_floor(
        self,
        *,
        floor_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        active: Optional[bool] = None,
        clear_description: bool = False,
    ) -> bool:
        raise NotImplementedError

    def count_floors(self) -> tuple[int, int]:
        """Return ``(total, active)``."""

        raise NotImplementedError
