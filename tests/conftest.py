"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by all test packages.
"""

import pytest

from simplejack.blackjack.decision_logger import decision_logger
from simplejack.common.card import Card, Rank, Suit
from simplejack.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton and decision history around each test."""
    EventBus._instance = None
    decision_logger.clear()
    yield
    EventBus._instance = None
    decision_logger.clear()


@pytest.fixture
def cards():
    """Build cards from short rank names: cards("A", "6", "K")."""
    names = {
        "A": Rank.ACE,
        "2": Rank.TWO,
        "3": Rank.THREE,
        "4": Rank.FOUR,
        "5": Rank.FIVE,
        "6": Rank.SIX,
        "7": Rank.SEVEN,
        "8": Rank.EIGHT,
        "9": Rank.NINE,
        "10": Rank.TEN,
        "J": Rank.JACK,
        "Q": Rank.QUEEN,
        "K": Rank.KING,
    }
    suits = list(Suit)

    def build(*ranks):
        return tuple(
            Card(suits[i % len(suits)], names[rank]) for i, rank in enumerate(ranks)
        )

    return build
