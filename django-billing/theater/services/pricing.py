"""Pricing rules for performances.

Charges are integer amounts in cents. The numeric policy is held in an
immutable PricingPolicy so it can be swapped through settings or in tests.
"""

import os
from dataclasses import dataclass, fields
from typing import Any, Self

from django.conf import ENVIRONMENT_VARIABLE, settings
from django.core.exceptions import ImproperlyConfigured

from theater.domain import Performance, Play, PlayType, UnknownPlayTypeError


@dataclass(frozen=True)
class PricingPolicy:
    """Numeric constants used to price performances and award credits."""

    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    tragedy_over_capacity_per_person: int = 1000
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_capacity_amount: int = 10000
    comedy_over_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = 5
    currency_minor_unit_divisor: int = 100

    @classmethod
    def from_settings(cls) -> Self:
        """Build a policy from the THEATER_PRICING setting.

        Keys are upper-cased field names, e.g. ``{"COMEDY_BASE_AMOUNT": 25000}``.
        Missing keys keep their default values. Without configured Django settings
        the default policy is returned.

        Raises:
            ImproperlyConfigured: If a key does not name a policy field.
        """
        if not settings.configured and not os.environ.get(ENVIRONMENT_VARIABLE):
            return cls()
        overrides: dict[str, Any] = getattr(settings, "THEATER_PRICING", None) or {}
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in overrides.items():
            name = key.lower()
            if name not in known:
                raise ImproperlyConfigured(f"Unknown THEATER_PRICING key: {key}")
            values[name] = int(value)
        return cls(**values)


DEFAULT_POLICY = PricingPolicy()


def compute_charge(
    performance: Performance, play: Play, policy: PricingPolicy = DEFAULT_POLICY
) -> int:
    """Return the charge for one performance in cents.

    Raises:
        UnknownPlayTypeError: If the play type is not tragedy or comedy.
    """
    audience = int(performance.audience)

    if play.type is PlayType.TRAGEDY:
        result = policy.tragedy_base_amount
        if audience > policy.tragedy_audience_threshold:
            result += policy.tragedy_over_capacity_per_person * (
                audience - policy.tragedy_audience_threshold
            )
    elif play.type is PlayType.COMEDY:
        result = policy.comedy_base_amount
        if audience > policy.comedy_audience_threshold:
            result += policy.comedy_over_capacity_amount + (
                policy.comedy_over_capacity_per_person
                * (audience - policy.comedy_audience_threshold)
            )
        result += policy.comedy_amount_per_audience * audience
    else:
        raise UnknownPlayTypeError(getattr(play.type, "value", str(play.type)))

    return result


def compute_volume_credits(
    performance: Performance, play: Play, policy: PricingPolicy = DEFAULT_POLICY
) -> int:
    """Return the volume credits earned by one performance."""
    audience = int(performance.audience)
    result = max(audience - policy.base_volume_credit_threshold, 0)

    # extra credit for every group of comedy attendees
    if play.type is PlayType.COMEDY:
        result += audience // policy.comedy_extra_volume_factor

    return result
