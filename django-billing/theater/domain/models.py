"""Domain models for plays, performances and invoices.

These are pure, immutable records. Pricing and rendering live in
theater/services.
"""

from dataclasses import dataclass
from typing import Self

from theater.domain.value_objects import Audience, PlayType


@dataclass(frozen=True)
class Play:
    """A theatrical work with a pricing category.

    ``type`` may be given as text; it is parsed into a PlayType and an
    unrecognized value raises UnknownPlayTypeError.
    """

    name: str
    type: PlayType

    def __post_init__(self) -> None:
        if not isinstance(self.type, PlayType):
            object.__setattr__(self, "type", PlayType.from_string(self.type))


@dataclass(frozen=True)
class Performance:
    """One staging of a play before an audience."""

    play_id: str
    audience: Audience

    def __post_init__(self) -> None:
        if isinstance(self.audience, int) and not isinstance(self.audience, bool):
            object.__setattr__(self, "audience", Audience(self.audience))
        elif not isinstance(self.audience, Audience):
            raise TypeError("Audience must be an int or Audience")

    @classmethod
    def of(cls, play_id: str, audience: int) -> Self:
        return cls(play_id=play_id, audience=Audience(audience))


@dataclass(frozen=True)
class Invoice:
    """A customer's bill; performance order is the report line order."""

    customer: str
    performances: tuple[Performance, ...] = ()
