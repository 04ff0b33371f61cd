"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from theater.domain import Play


class PlayStore(ABC):
    """Interface for looking up plays by id."""

    @abstractmethod
    def get_play(self, play_id: str) -> Play | None:
        """Return a play by id, or None if not found."""
        ...
