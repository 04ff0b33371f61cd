"""Statement service - builds and renders billing statements.

Services:
- Depend only on interfaces (stores)
- Resolve plays and raise domain errors for missing ones
- Accumulate totals in a single pass over the invoice
- Return domain results or plain text
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from theater.domain import Invoice, Performance, Play, PlayNotFoundError
from theater.services.formatting import usd
from theater.services.pricing import (
    PricingPolicy,
    compute_charge,
    compute_volume_credits,
)
from theater.stores import InMemoryPlayStore, PlayStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatementLine:
    """Priced entry for a single performance."""

    play_name: str
    amount: int
    audience: int


@dataclass(frozen=True)
class Statement:
    """Computed statement for an invoice, amounts in cents."""

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: int
    volume_credits: int


class StatementService:
    """Service for generating invoice statements."""

    def __init__(self, store: PlayStore, policy: PricingPolicy | None = None) -> None:
        self._store = store
        self._policy = policy if policy is not None else PricingPolicy.from_settings()

    @property
    def policy(self) -> PricingPolicy:
        return self._policy

    def resolve_play(self, performance: Performance) -> Play:
        """Return the play a performance refers to.

        Raises:
            PlayNotFoundError: If the store has no play with that id.
        """
        play = self._store.get_play(performance.play_id)
        if play is None:
            logger.warning("No play found for id %r", performance.play_id)
            raise PlayNotFoundError(performance.play_id)
        return play

    def build_statement(self, invoice: Invoice) -> Statement:
        """Price every performance of the invoice and total the results.

        Raises:
            PlayNotFoundError: If a performance references an unknown play id.
            UnknownPlayTypeError: If a play has an unrecognized type.
        """
        lines = []
        total_amount = 0
        volume_credits = 0

        for performance in invoice.performances:
            play = self.resolve_play(performance)
            amount = compute_charge(performance, play, self._policy)
            volume_credits += compute_volume_credits(performance, play, self._policy)
            total_amount += amount
            lines.append(
                StatementLine(
                    play_name=play.name,
                    amount=amount,
                    audience=int(performance.audience),
                )
            )

        logger.debug(
            "Built statement for %s: %d performances, total=%d, credits=%d",
            invoice.customer,
            len(lines),
            total_amount,
            volume_credits,
        )
        return Statement(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount=total_amount,
            volume_credits=volume_credits,
        )

    def format_amount(self, amount: int) -> str:
        return usd(amount, self._policy.currency_minor_unit_divisor)

    def render_text(self, statement: Statement) -> str:
        """Render a statement as the plain-text report."""
        result = [f"Statement for {statement.customer}\n"]
        for line in statement.lines:
            result.append(
                f"  {line.play_name}: {self.format_amount(line.amount)} "
                f"({line.audience} seats)\n"
            )
        result.append(f"Amount owed is {self.format_amount(statement.total_amount)}\n")
        result.append(f"You earned {statement.volume_credits} credits\n")
        return "".join(result)

    def generate_statement(self, invoice: Invoice) -> str:
        return self.render_text(self.build_statement(invoice))


def generate_statement(
    invoice: Invoice,
    plays_by_id: Mapping[str, Play],
    policy: PricingPolicy | None = None,
) -> str:
    """Return the text statement for an invoice given an id -> play mapping."""
    service = StatementService(InMemoryPlayStore(plays_by_id), policy)
    return service.generate_statement(invoice)
