"""In-memory implementation of the PlayStore over a play id mapping."""

from collections.abc import Mapping
from types import MappingProxyType

from theater.domain import Play
from theater.stores.interfaces import PlayStore


class InMemoryPlayStore(PlayStore):
    """Read-only play catalog backed by a mapping supplied by the caller."""

    def __init__(self, plays_by_id: Mapping[str, Play]) -> None:
        self._plays = MappingProxyType(dict(plays_by_id))

    def get_play(self, play_id: str) -> Play | None:
        return self._plays.get(play_id)
