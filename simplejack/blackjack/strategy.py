from abc import ABC, abstractmethod
from typing import Optional

from simplejack.blackjack.action import Action
from simplejack.blackjack.decision_logger import DecisionContext, decision_logger
from simplejack.blackjack.hand import BlackjackHand
from simplejack.blackjack.rules import Rules


class Strategy(ABC):
    @abstractmethod
    def decide_action(self, hand: BlackjackHand) -> Action:
        """Choose HIT or STAND for the given hand."""
        pass


class DealerStrategy(Strategy):
    """
    The house policy: hit on 16 or less and, by default, on a soft 17.

    A soft 17 is a 17 that only exists because an Ace counts as 11.
    """

    def __init__(self, rules: Optional[Rules] = None, actor: str = "Dealer"):
        self.rules = rules or Rules()
        self.actor = actor

    def decide_action(self, hand: BlackjackHand) -> Action:
        context = DecisionContext.for_hand(self.actor, hand)

        if not self.rules.should_dealer_hit(hand):
            action, reason = Action.STAND, f"score {hand.score}"
        elif hand.is_soft and hand.score == 17:
            action, reason = Action.HIT, "soft 17"
        else:
            action, reason = Action.HIT, f"score {hand.score} is 16 or less"

        context.chosen_action = action
        context.strategy_reason = reason
        decision_logger.log_decision(context)
        return action
