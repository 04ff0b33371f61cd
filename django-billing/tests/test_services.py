"""Unit tests for StatementService and generate_statement.

These test statement rendering and domain error propagation.
Run with: pytest tests/test_services.py -v
"""

import logging

import pytest

from theater.domain import Invoice, Performance, PlayNotFoundError
from theater.services import (
    DEFAULT_POLICY,
    PricingPolicy,
    StatementLine,
    StatementService,
    generate_statement,
)
from theater.stores import InMemoryPlayStore

EXPECTED_STATEMENT = (
    "Statement for BigCo\n"
    "  Hamlet: $650.00 (55 seats)\n"
    "  As You Like It: $580.00 (35 seats)\n"
    "  Othello: $500.00 (40 seats)\n"
    "Amount owed is $1,730.00\n"
    "You earned 47 credits\n"
)


class TestGenerateStatement:
    """Tests for the generate_statement entry point."""

    def test_renders_full_statement(self, invoice, plays):
        """Renders one line per performance plus totals."""
        assert generate_statement(invoice, plays) == EXPECTED_STATEMENT

    def test_empty_invoice(self, plays):
        """An invoice without performances renders header and zero totals."""
        result = generate_statement(Invoice(customer="Nobody"), plays)
        assert result == (
            "Statement for Nobody\n"
            "Amount owed is $0.00\n"
            "You earned 0 credits\n"
        )

    def test_line_order_follows_invoice(self, invoice, plays):
        """Report lines keep the invoice's performance order."""
        reordered = Invoice(
            customer=invoice.customer,
            performances=tuple(reversed(invoice.performances)),
        )
        lines = generate_statement(reordered, plays).splitlines()
        assert lines[1].startswith("  Othello")
        assert lines[3].startswith("  Hamlet")

    def test_totals_do_not_depend_on_order(self, invoice, plays):
        """Total amount and credits are the same for any performance order."""
        reordered = Invoice(
            customer=invoice.customer,
            performances=tuple(reversed(invoice.performances)),
        )
        original = generate_statement(invoice, plays).splitlines()[-2:]
        assert generate_statement(reordered, plays).splitlines()[-2:] == original

    def test_custom_policy(self, plays):
        """A supplied policy replaces the default rates."""
        policy = PricingPolicy(tragedy_base_amount=10000)
        invoice = Invoice(customer="BigCo", performances=(Performance.of("hamlet", 10),))
        assert "  Hamlet: $100.00 (10 seats)\n" in generate_statement(invoice, plays, policy)

    def test_missing_play_raises_error(self, plays):
        """A performance of an unknown play id fails the whole statement."""
        invoice = Invoice(
            customer="BigCo",
            performances=(Performance.of("hamlet", 55), Performance.of("macbeth", 20)),
        )
        with pytest.raises(PlayNotFoundError) as exc_info:
            generate_statement(invoice, plays)
        assert exc_info.value.play_id == "macbeth"


class TestStatementService:
    """Tests for StatementService."""

    def test_build_statement_totals(self, invoice, plays):
        """build_statement sums per-performance amounts and credits."""
        service = StatementService(InMemoryPlayStore(plays), DEFAULT_POLICY)
        statement = service.build_statement(invoice)
        assert statement.customer == "BigCo"
        assert statement.lines[0] == StatementLine(play_name="Hamlet", amount=65000, audience=55)
        assert statement.total_amount == sum(line.amount for line in statement.lines)
        assert statement.total_amount == 173000
        assert statement.volume_credits == 47

    def test_policy_defaults_to_settings(self, plays):
        """Without an explicit policy the service reads settings."""
        service = StatementService(InMemoryPlayStore(plays))
        assert service.policy == DEFAULT_POLICY

    def test_resolve_play_not_found_logs_warning(self, plays, caplog):
        """resolve_play logs and raises PlayNotFoundError for unknown ids."""
        service = StatementService(InMemoryPlayStore(plays), DEFAULT_POLICY)
        with caplog.at_level(logging.WARNING, logger="theater"):
            with pytest.raises(PlayNotFoundError):
                service.resolve_play(Performance.of("macbeth", 1))
        assert "macbeth" in caplog.text

    def test_resolve_play(self, plays):
        """resolve_play returns the catalog entry."""
        service = StatementService(InMemoryPlayStore(plays), DEFAULT_POLICY)
        assert service.resolve_play(Performance.of("othello", 1)) is plays["othello"]


class TestInMemoryPlayStore:
    """Tests for InMemoryPlayStore."""

    def test_get_play(self, plays):
        """get_play returns a play or None."""
        store = InMemoryPlayStore(plays)
        assert store.get_play("hamlet") is plays["hamlet"]
        assert store.get_play("macbeth") is None

    def test_later_changes_to_source_mapping_are_not_seen(self, plays):
        """The store keeps its own read-only copy of the mapping."""
        store = InMemoryPlayStore(plays)
        plays.pop("hamlet")
        assert store.get_play("hamlet") is not None
