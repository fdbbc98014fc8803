"""
Blackjack rules, immutable state and the session loop.
"""

from simplejack.blackjack.action import Action
from simplejack.blackjack.errors import (
    BlackjackError,
    DeckExhaustedError,
    NoCurrentHandError,
    SessionAborted,
)
from simplejack.blackjack.hand import BlackjackHand
from simplejack.blackjack.rules import RoundOutcome, RoundResult, Rules
from simplejack.blackjack.state import GameState, Phase
from simplejack.blackjack.transitions import StateTransitionEngine

__all__ = [
    "Action",
    "BlackjackError",
    "BlackjackHand",
    "DeckExhaustedError",
    "GameState",
    "NoCurrentHandError",
    "Phase",
    "RoundOutcome",
    "RoundResult",
    "Rules",
    "SessionAborted",
    "StateTransitionEngine",
]
