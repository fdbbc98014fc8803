"""
House rules and round resolution.
"""

from dataclasses import dataclass
from enum import Enum, auto

from simplejack.blackjack.hand import BlackjackHand


class Rules:
    def __init__(
        self,
        num_decks: int = 3,
        num_rounds: int = 5,
        dealer_hit_soft_17: bool = True,
        reshuffle_threshold: int = 15,
    ):
        if num_decks < 1:
            raise ValueError("Number of decks must be at least 1")
        if num_rounds < 1:
            raise ValueError("Number of rounds must be at least 1")
        if reshuffle_threshold < 0:
            raise ValueError("Reshuffle threshold must be non-negative")
        if reshuffle_threshold > num_decks * 52:
            raise ValueError("Reshuffle threshold cannot exceed the shoe size")
        self.num_decks = num_decks
        self.num_rounds = num_rounds
        self.dealer_hit_soft_17 = dealer_hit_soft_17
        self.reshuffle_threshold = reshuffle_threshold

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "num_decks": self.num_decks,
            "num_rounds": self.num_rounds,
            "dealer_hit_soft_17": self.dealer_hit_soft_17,
            "reshuffle_threshold": self.reshuffle_threshold,
        }

    def should_dealer_hit(self, hand: BlackjackHand) -> bool:
        """Determine if the dealer should hit based on the game rules."""
        score = hand.score
        is_soft_17 = score == 17 and hand.is_soft
        return score <= 16 or (is_soft_17 and self.dealer_hit_soft_17)

    def __repr__(self) -> str:
        return f"Rules({self.to_dict()})"


class RoundResult(Enum):
    """How a round ended, from the player's point of view."""

    PLAYER_BUST = auto()
    DEALER_BUST = auto()
    PLAYER_WIN = auto()
    DEALER_WIN = auto()
    DRAW = auto()

    @property
    def player_won(self) -> bool:
        return self in (RoundResult.DEALER_BUST, RoundResult.PLAYER_WIN)

    @property
    def player_lost(self) -> bool:
        return self in (RoundResult.PLAYER_BUST, RoundResult.DEALER_WIN)

    @property
    def message(self) -> str:
        return _RESULT_MESSAGES[self]


_RESULT_MESSAGES = {
    RoundResult.PLAYER_BUST: "You busted! You lose 😢",
    RoundResult.DEALER_BUST: "Dealer busted! You win 🎉",
    RoundResult.PLAYER_WIN: "You win 🎉",
    RoundResult.DEALER_WIN: "You lose 😢",
    RoundResult.DRAW: "Draw!",
}


def determine_result(player_score: int, dealer_score: int) -> RoundResult:
    """
    Decide a round from the two final scores.

    A player bust loses even when the dealer also busts.
    """
    if player_score > 21:
        return RoundResult.PLAYER_BUST
    if dealer_score > 21:
        return RoundResult.DEALER_BUST
    if player_score > dealer_score:
        return RoundResult.PLAYER_WIN
    if dealer_score > player_score:
        return RoundResult.DEALER_WIN
    return RoundResult.DRAW


@dataclass(frozen=True)
class RoundOutcome:
    """
    Final hands, scores and result of one round.

    Attributes:
        player: The player's final hand
        dealer: The dealer's final hand
        result: How the round ended
    """

    player: BlackjackHand
    dealer: BlackjackHand
    result: RoundResult

    @property
    def player_score(self) -> int:
        return self.player.score

    @property
    def dealer_score(self) -> int:
        return self.dealer.score

    @property
    def player_won(self) -> bool:
        return self.result.player_won

    @property
    def player_lost(self) -> bool:
        return self.result.player_lost

    @property
    def is_draw(self) -> bool:
        return self.result is RoundResult.DRAW

    @classmethod
    def from_hands(cls, player: BlackjackHand, dealer: BlackjackHand) -> "RoundOutcome":
        return cls(player, dealer, determine_result(player.score, dealer.score))

    def to_dict(self) -> dict:
        return {
            "player": [str(card) for card in self.player],
            "dealer": [str(card) for card in self.dealer],
            "player_score": self.player_score,
            "dealer_score": self.dealer_score,
            "result": self.result.name,
        }
