"""
Logging for blackjack decision paths.
Tracks every hit/stand decision made by a strategy.
"""

import logging
from collections import deque
from typing import Deque, Dict, Any, List, Optional
from dataclasses import dataclass
from datetime import datetime
import os
from ..common.card import Card
from .action import Action
from .hand import BlackjackHand

MAX_HISTORY = 10000


@dataclass
class DecisionContext:
    """Context for a single decision point."""

    timestamp: datetime
    actor: str
    hand_cards: List[Card]
    score: int
    min_score: int
    chosen_action: Optional[Action] = None
    strategy_reason: Optional[str] = None

    @property
    def is_soft(self) -> bool:
        return self.score != self.min_score

    @classmethod
    def for_hand(cls, actor: str, hand: BlackjackHand) -> "DecisionContext":
        return cls(
            timestamp=datetime.now(),
            actor=actor,
            hand_cards=list(hand.cards),
            score=hand.score,
            min_score=hand.min_score,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "actor": self.actor,
            "cards": [str(c) for c in self.hand_cards],
            "score": self.score,
            "min_score": self.min_score,
            "soft": self.is_soft,
            "chosen": self.chosen_action.value if self.chosen_action else None,
            "reason": self.strategy_reason,
        }


class DecisionLogger:
    """
    Logs all decision-making processes in blackjack.

    Only the most recent `max_history` decisions are kept in memory.
    """

    def __init__(self, max_history: int = MAX_HISTORY):
        self.logger = logging.getLogger("simplejack.decisions")
        # Check environment variable to silence decision logging
        if os.environ.get("BLACKJACK_DISABLE_LOGGING", "").lower() in (
            "1",
            "true",
            "yes",
        ):
            self.logger.setLevel(logging.ERROR)

        self.decision_history: Deque[DecisionContext] = deque(maxlen=max_history)

    def log_decision(self, context: DecisionContext):
        """Record a decision and log it with full context."""
        self.decision_history.append(context)

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"Decision for {context.actor}: "
                f"{[str(c) for c in context.hand_cards]} (score={context.score}, "
                f"soft={context.is_soft})"
            )

        if context.chosen_action and self.logger.isEnabledFor(logging.INFO):
            self.logger.info(
                f"{context.actor} chose {context.chosen_action.value} "
                f"(reason: {context.strategy_reason or 'unknown'})"
            )

    def get_decision_summary(self) -> Dict[str, Any]:
        """Count decisions by actor and by action."""
        summary: Dict[str, Any] = {
            "total_decisions": len(self.decision_history),
            "by_action": {},
            "by_actor": {},
        }
        for decision in self.decision_history:
            if decision.chosen_action:
                action = decision.chosen_action.value
                summary["by_action"][action] = summary["by_action"].get(action, 0) + 1
            actor = decision.actor
            summary["by_actor"][actor] = summary["by_actor"].get(actor, 0) + 1
        return summary

    def clear(self):
        self.decision_history.clear()


# Global logger instance
decision_logger = DecisionLogger()
