"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from theater.domain.errors import UnknownPlayTypeError


class PlayType(Enum):
    """Pricing category of a play."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value)
        except ValueError:
            raise UnknownPlayTypeError(value) from None


@dataclass(frozen=True)
class Audience:
    """Non-negative seat count for a performance."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Audience cannot be negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
