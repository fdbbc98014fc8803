"""Exceptions raised by the blackjack engine."""


class BlackjackError(Exception):
    """Base class for all blackjack engine errors."""


class NoCurrentHandError(BlackjackError):
    """
    Raised when an action needs the current hand but the round is over.

    This signals a bug in the caller, not a condition to retry.
    """

    def __init__(self, phase):
        self.phase = phase
        super().__init__(f"It's currently not any player's turn (phase: {phase.name})")


class DeckExhaustedError(BlackjackError):
    """Raised when a draw needs more cards than the deck holds."""

    def __init__(self, needed: int, remaining: int):
        self.needed = needed
        self.remaining = remaining
        super().__init__(
            f"Deck exhausted: needed {needed} card(s), {remaining} remaining"
        )


class SessionAborted(BlackjackError):
    """Raised when the input stream closes in the middle of a session."""
