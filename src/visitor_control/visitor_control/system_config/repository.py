from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import ConfigEntry


class ConfigRepository(Protocol):
    def get_many(self, keys: Iterable[str]) -> Sequence[ConfigEntry]:
        raise NotImplementedError

    def list_all(self) -> Sequence[ConfigEntry]:
        """All settings ordered by key."""

        raise NotImplementedError

    def upsert(self, *, key: str, value: str, description: Optional[str]) -> ConfigEntry:
        raise NotImplementedError
