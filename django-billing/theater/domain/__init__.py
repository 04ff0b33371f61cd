from theater.domain.errors import (
    DomainError,
    ErrorCode,
    PlayNotFoundError,
    UnknownPlayTypeError,
)
from theater.domain.models import Invoice, Performance, Play
from theater.domain.value_objects import Audience, PlayType

__all__ = [
    "Play",
    "Performance",
    "Invoice",
    "PlayType",
    "Audience",
    "ErrorCode",
    "DomainError",
    "UnknownPlayTypeError",
    "PlayNotFoundError",
]
