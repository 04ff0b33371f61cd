"""Pytest configuration and shared fixtures."""

import pytest

from theater.domain import Invoice, Performance, Play, PlayType


@pytest.fixture
def plays() -> dict[str, Play]:
    return {
        "hamlet": Play(name="Hamlet", type=PlayType.TRAGEDY),
        "as-like": Play(name="As You Like It", type=PlayType.COMEDY),
        "othello": Play(name="Othello", type=PlayType.TRAGEDY),
    }


@pytest.fixture
def invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance.of("hamlet", 55),
            Performance.of("as-like", 35),
            Performance.of("othello", 40),
        ),
    )


@pytest.fixture
def raw_plays() -> dict:
    return {
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "as-like": {"name": "As You Like It", "type": "comedy"},
        "othello": {"name": "Othello", "type": "tragedy"},
    }


@pytest.fixture
def raw_invoice() -> dict:
    return {
        "customer": "BigCo",
        "performances": [
            {"playID": "hamlet", "audience": 55},
            {"playID": "as-like", "audience": 35},
            {"playID": "othello", "audience": 40},
        ],
    }
