"""
Immutable blackjack hand with Ace-aware scoring.
"""

from dataclasses import dataclass
from typing import Tuple

from simplejack.common.card import Card

HIDDEN_CARD = "**HIDDEN**"


@dataclass(frozen=True)
class BlackjackHand:
    """
    An ordered, immutable hand of cards.

    Adding a card returns a new hand, so a hand held by one game state can
    never change underneath it.
    """

    cards: Tuple[Card, ...] = ()

    def add_card(self, card: Card) -> "BlackjackHand":
        """Return a new hand with `card` appended."""
        return BlackjackHand(self.cards + (card,))

    @property
    def min_score(self) -> int:
        """The lowest possible score, counting every Ace as 1."""
        return sum(card.value for card in self.cards)

    @property
    def score(self) -> int:
        """
        The best score of the hand.

        At most one Ace is promoted to 11, and only while the hard total is
        11 or less, so two Aces score 12.
        """
        min_score = self.min_score
        if min_score > 11:
            return min_score

        if any(card.is_ace for card in self.cards):
            # Ace counted as 1 so far; add 10 to count it as 11
            return min_score + 10

        return min_score

    @property
    def is_soft(self) -> bool:
        """True when the score relies on an Ace counted as 11."""
        return self.score != self.min_score

    @property
    def is_bust(self) -> bool:
        return self.score > 21

    def dealer_string(self) -> str:
        """Render the hand showing only its first card."""
        if not self.cards:
            raise ValueError("Cannot render an empty hand")
        return f"{self.cards[0]}, {HIDDEN_CARD}"

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self.cards)
