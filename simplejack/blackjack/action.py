"""Defines the Action enum for the possible actions a player can take in a game of blackjack."""
from enum import Enum
from typing import Optional


class Action(Enum):
    """Enum for the possible actions a player can take in a game of blackjack."""

    HIT = "hit"
    STAND = "stand"

    @property
    def shortcut(self) -> str:
        return self.value[0]

    @classmethod
    def from_token(cls, token: str) -> Optional["Action"]:
        """Parse a console token; only "h" and "s" are accepted, None otherwise."""
        for action in cls:
            if token == action.shortcut:
                return action
        return None
