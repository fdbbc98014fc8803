"""
The blackjack session loop.

`BlackjackGame` owns the current `GameState` and rebinds it after every
transition. It asks the player for hit/stand through an `IOInterface`, plays
the dealer's hand with the house strategy and reports each round.
"""

import logging
import random
import time
from typing import Callable, Optional

from simplejack.common.io_interface import IOInterface
from simplejack.events import EventBus, EngineEventType
from simplejack.blackjack.action import Action
from simplejack.blackjack.decision_logger import decision_logger
from simplejack.blackjack.errors import DeckExhaustedError, SessionAborted
from simplejack.blackjack.rules import RoundOutcome, Rules
from simplejack.blackjack.state import GameState, Phase
from simplejack.blackjack.stats import SessionStats
from simplejack.blackjack.strategy import DealerStrategy, Strategy
from simplejack.blackjack.transitions import StateTransitionEngine

logger = logging.getLogger(__name__)

ACTION_PROMPT = "What will you do? (h)it, (s)tand"

_TRANSITIONS = {
    Action.HIT: StateTransitionEngine.hit,
    Action.STAND: StateTransitionEngine.stand,
}


class BlackjackGame:
    """
    A session of blackjack between one player and the dealer.

    Args:
        io_interface: Where prompts and reports go, and answers come from
        rules: House rules; defaults to three decks and five rounds
        rng: Optional random generator, for reproducible shuffles
        player_strategy: Plays the player's hand automatically when given,
            instead of prompting
    """

    def __init__(
        self,
        io_interface: IOInterface,
        rules: Optional[Rules] = None,
        rng: Optional[random.Random] = None,
        player_strategy: Optional[Strategy] = None,
    ):
        self.io_interface = io_interface
        self.rules = rules or Rules()
        self.rng = rng
        self.player_strategy = player_strategy
        self.dealer_strategy = DealerStrategy(self.rules)
        self.stats = SessionStats()
        self.state = GameState()
        self.event_bus = EventBus.get_instance()

    def play(self, num_rounds: Optional[int] = None) -> SessionStats:
        """
        Shuffle a fresh shoe and play `num_rounds` rounds (default from the rules).

        The decision history is reset, so it only covers this session.

        Raises:
            SessionAborted: If the input stream closes during a prompt
        """
        num_rounds = self.rules.num_rounds if num_rounds is None else num_rounds
        decision_logger.clear()
        self.event_bus.emit(
            EngineEventType.GAME_STARTED,
            {
                "game_id": self.state.id,
                "rules": self.rules.to_dict(),
                "timestamp": time.time(),
            },
        )

        self._shuffle()
        for _ in range(num_rounds):
            self.play_round()

        self._report_session()
        self.event_bus.emit(
            EngineEventType.GAME_ENDED,
            {
                "game_id": self.state.id,
                "stats": self.stats.report(),
                "timestamp": time.time(),
            },
        )
        return self.stats

    def play_round(self) -> RoundOutcome:
        """Deal, play both turns and resolve a single round."""
        if self.state.cards_remaining < self.rules.reshuffle_threshold:
            logger.warning(
                "Only %d cards left before round %d, reshuffling",
                self.state.cards_remaining,
                self.state.rounds_played + 1,
            )
            self._shuffle()

        self._apply(StateTransitionEngine.deal)
        self._player_turn()
        self._dealer_turn()

        self.state, outcome = StateTransitionEngine.end_game(self.state)
        self._report_outcome(outcome)
        self.stats.update(outcome)
        return outcome

    def _shuffle(self) -> None:
        self.state = StateTransitionEngine.shuffle(
            self.state, self.rules.num_decks, self.rng
        )

    def _apply(self, transition: Callable[[GameState], GameState]) -> None:
        """
        Run a transition on the current state and keep the result.

        If the shoe runs dry, a fresh one is shuffled in and the transition is
        retried from the same snapshot.
        """
        try:
            self.state = transition(self.state)
        except DeckExhaustedError as exc:
            logger.warning("%s, reshuffling", exc)
            self._shuffle()
            self.state = transition(self.state)

    def _player_turn(self) -> None:
        while self.state.phase is Phase.PLAYER_TURN:
            self._show_table()
            action = self._next_player_action()
            if action is None:
                continue
            self.event_bus.emit(
                EngineEventType.PLAYER_ACTION,
                {
                    "game_id": self.state.id,
                    "action": action.value,
                    "score": self.state.player.score,
                    "timestamp": time.time(),
                },
            )
            self._apply(_TRANSITIONS[action])

    def _next_player_action(self) -> Optional[Action]:
        if self.player_strategy is not None:
            return self.player_strategy.decide_action(self.state.player)

        try:
            token = self.io_interface.read_token("> ")
        except EOFError as exc:
            raise SessionAborted("Input closed during the player's turn") from exc

        action = Action.from_token(token)
        if action is None:
            self.io_interface.output(
                f'"{token}" is not a valid option 🤕. Try again.\n'
            )
        return action

    def _dealer_turn(self) -> None:
        while self.state.phase is Phase.DEALER_TURN:
            action = self.dealer_strategy.decide_action(self.state.dealer)
            self.event_bus.emit(
                EngineEventType.DEALER_ACTION,
                {
                    "game_id": self.state.id,
                    "action": action.value,
                    "score": self.state.dealer.score,
                    "timestamp": time.time(),
                },
            )
            self._apply(_TRANSITIONS[action])

    def _show_table(self) -> None:
        output = self.io_interface.output
        output(f"Your current score is: {self.state.player.score}")
        output(f"Player: {self.state.player}")
        output(f"Dealer: {self.state.dealer.dealer_string()}")
        output(ACTION_PROMPT)

    def _report_outcome(self, outcome: RoundOutcome) -> None:
        output = self.io_interface.output
        output("==FINAL HANDS==")
        output(f"Player: {outcome.player}\nScore: {outcome.player_score}")
        output(f"Dealer: {outcome.dealer}\nScore: {outcome.dealer_score}")
        output(outcome.result.message)
        output("")

    def _report_session(self) -> None:
        report = self.stats.report()
        self.io_interface.output("==SESSION SUMMARY==")
        self.io_interface.output(
            f"Rounds: {report['games_played']}  "
            f"Wins: {report['player_wins']}  "
            f"Losses: {report['dealer_wins']}  "
            f"Draws: {report['draws']}"
        )
