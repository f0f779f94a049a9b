"""
Pytest configuration for the Monarchs test suite.

Every test gets a fresh event bus so subscriptions never leak between tests.
"""

import random

import pytest

from monarchs.common.card import Card
from monarchs.events import EventBus


@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before and after each test."""
    EventBus.reset()
    yield
    EventBus.reset()


@pytest.fixture
def rng():
    """Seeded random source for reproducible shoes."""
    return random.Random(20240501)


@pytest.fixture
def cards():
    """Build cards from compact codes: cards("KS", "10H")."""

    def build(*codes):
        parsed = [Card.parse(code) for code in codes]
        return parsed[0] if len(parsed) == 1 else parsed

    return build
