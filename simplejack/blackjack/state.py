"""
Immutable state models for a round of blackjack.

This module provides dataclasses for representing the state of a blackjack
session in an immutable manner. These classes are designed to be used with
pure transition functions that create new state instances rather than
modifying existing ones.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple
from enum import Enum
import uuid

from simplejack.common.card import Card
from simplejack.blackjack.errors import NoCurrentHandError
from simplejack.blackjack.hand import BlackjackHand


class Phase(Enum):
    """Stages of a blackjack round, in the order they are played."""

    PLAYER_TURN = 0
    DEALER_TURN = 1
    HAND_OVER = 2

    def next(self) -> "Phase":
        """The following phase; HAND_OVER is terminal."""
        if self is Phase.HAND_OVER:
            raise NoCurrentHandError(self)
        return Phase(self.value + 1)


@dataclass(frozen=True)
class GameState:
    """
    Immutable representation of a blackjack session at one moment.

    Attributes:
        deck: Cards remaining in the shoe, front card dealt next
        phase: Current stage of the round
        player: The player's hand
        dealer: The dealer's hand
        id: Unique identifier for this session
        rounds_played: Number of rounds resolved so far
    """

    deck: Tuple[Card, ...] = ()
    phase: Phase = Phase.PLAYER_TURN
    player: BlackjackHand = field(default_factory=BlackjackHand)
    dealer: BlackjackHand = field(default_factory=BlackjackHand)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    rounds_played: int = 0

    @property
    def current_hand(self) -> BlackjackHand:
        """
        The hand whose turn it is.

        Raises:
            NoCurrentHandError: If the round is over
        """
        return getattr(self, self.current_role)

    @property
    def current_role(self) -> str:
        """Name of the state field holding the current hand."""
        if self.phase is Phase.PLAYER_TURN:
            return "player"
        if self.phase is Phase.DEALER_TURN:
            return "dealer"
        raise NoCurrentHandError(self.phase)

    @property
    def cards_remaining(self) -> int:
        return len(self.deck)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game state
        """
        return {
            "id": self.id,
            "phase": self.phase.name,
            "rounds_played": self.rounds_played,
            "cards_remaining": self.cards_remaining,
            "player": {
                "cards": [str(card) for card in self.player],
                "score": self.player.score,
            },
            "dealer": {
                "cards": [str(card) for card in self.dealer],
                "score": self.dealer.score,
            },
        }

