"""
State transition functions for blackjack.

This module provides pure functions for transitioning between game states,
without modifying the original state objects. Callers thread the state
through explicitly::

    state = StateTransitionEngine.shuffle(GameState())
    state = StateTransitionEngine.deal(state)
    state = StateTransitionEngine.hit(state)
"""

import logging
import random
import time
from dataclasses import replace
from typing import Optional, Tuple

from simplejack.common.card import Card
from simplejack.common.deck import new_shoe
from simplejack.events import EventBus, EngineEventType
from simplejack.blackjack.errors import DeckExhaustedError
from simplejack.blackjack.hand import BlackjackHand
from simplejack.blackjack.rules import RoundOutcome
from simplejack.blackjack.state import GameState, Phase

logger = logging.getLogger(__name__)

DEFAULT_NUM_DECKS = 3


def _draw(
    deck: Tuple[Card, ...], num_cards: int = 1
) -> Tuple[Tuple[Card, ...], Tuple[Card, ...]]:
    """Split `num_cards` off the front of the deck, returning (drawn, rest)."""
    if num_cards > len(deck):
        raise DeckExhaustedError(num_cards, len(deck))
    return deck[:num_cards], deck[num_cards:]


class StateTransitionEngine:
    """
    Pure functions for state transitions in blackjack.

    This class contains static methods that implement game state transitions.
    Each method takes a state and returns a new state, without modifying the
    original.
    """

    @staticmethod
    def shuffle(
        state: GameState,
        num_decks: int = DEFAULT_NUM_DECKS,
        rng: Optional[random.Random] = None,
    ) -> GameState:
        """
        Replace the deck with freshly shuffled combined decks.

        Args:
            state: Current game state
            num_decks: Number of standard decks to combine
            rng: Optional random generator for reproducible shuffles

        Returns:
            New game state holding the new deck
        """
        new_state = replace(state, deck=tuple(new_shoe(num_decks, rng)))
        logger.debug(
            "Shuffled %d decks (%d cards) for game %s",
            num_decks,
            new_state.cards_remaining,
            state.id,
        )

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.SHUFFLE,
            {
                "game_id": state.id,
                "num_decks": num_decks,
                "cards_remaining": new_state.cards_remaining,
                "timestamp": time.time(),
            },
        )

        return new_state

    @staticmethod
    def deal(state: GameState) -> GameState:
        """
        Start a round: two cards each, dealt player, dealer, player, dealer.

        Args:
            state: Current game state

        Returns:
            New game state in the player's turn

        Raises:
            DeckExhaustedError: If fewer than four cards remain
        """
        drawn, deck = _draw(state.deck, 4)
        player = BlackjackHand((drawn[0], drawn[2]))
        dealer = BlackjackHand((drawn[1], drawn[3]))

        new_state = replace(
            state,
            deck=deck,
            player=player,
            dealer=dealer,
            phase=Phase.PLAYER_TURN,
        )
        logger.debug(
            "Dealt round %d: player [%s], dealer [%s]",
            state.rounds_played + 1,
            player,
            dealer,
        )

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.ROUND_STARTED,
            {
                "game_id": state.id,
                "round_number": state.rounds_played + 1,
                "timestamp": time.time(),
            },
        )
        for i, card in enumerate(drawn):
            event_bus.emit(
                EngineEventType.CARD_DEALT,
                {
                    "game_id": state.id,
                    "to": "player" if i % 2 == 0 else "dealer",
                    "card": str(card),
                    # The dealer's second card stays face down
                    "hidden": i == 3,
                    "timestamp": time.time(),
                },
            )

        return new_state

    @staticmethod
    def hit(state: GameState) -> GameState:
        """
        Draw one card onto the current hand.

        A hand that goes over 21 ends its turn, as if the owner had stood.

        Args:
            state: Current game state

        Returns:
            New game state with the card added

        Raises:
            NoCurrentHandError: If the round is over
            DeckExhaustedError: If the deck is empty
        """
        role = state.current_role
        (card,), deck = _draw(state.deck)
        hand = getattr(state, role).add_card(card)

        new_state = replace(state, deck=deck, **{role: hand})
        logger.debug("%s hit: %s (score %d)", role, card, hand.score)

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.CARD_DEALT,
            {
                "game_id": state.id,
                "to": role,
                "card": str(card),
                "hidden": False,
                "timestamp": time.time(),
            },
        )

        if hand.is_bust:
            new_state = replace(new_state, phase=new_state.phase.next())
            logger.debug("%s busted with %d", role, hand.score)
            event_bus.emit(
                EngineEventType.HAND_BUSTED,
                {
                    "game_id": state.id,
                    "owner": role,
                    "score": hand.score,
                    "timestamp": time.time(),
                },
            )

        return new_state

    @staticmethod
    def stand(state: GameState) -> GameState:
        """
        End the current turn, advancing the phase by one step.

        Raises:
            NoCurrentHandError: If the round is already over
        """
        new_state = replace(state, phase=state.phase.next())
        logger.debug("Phase %s -> %s", state.phase.name, new_state.phase.name)
        return new_state

    @staticmethod
    def end_game(state: GameState) -> Tuple[GameState, RoundOutcome]:
        """
        Score the round and clear both hands.

        The deck and phase are left as they are, so the next round keeps
        drawing from the same shoe.

        Args:
            state: Current game state

        Returns:
            Tuple of (new game state, round outcome)
        """
        outcome = RoundOutcome.from_hands(state.player, state.dealer)
        new_state = replace(
            state,
            player=BlackjackHand(),
            dealer=BlackjackHand(),
            rounds_played=state.rounds_played + 1,
        )
        logger.debug(
            "Round %d over: player %d, dealer %d, %s",
            new_state.rounds_played,
            outcome.player_score,
            outcome.dealer_score,
            outcome.result.name,
        )

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.HAND_RESULT,
            {"game_id": state.id, **outcome.to_dict(), "timestamp": time.time()},
        )
        event_bus.emit(
            EngineEventType.ROUND_ENDED,
            {
                "game_id": state.id,
                "round_number": new_state.rounds_played,
                "result": outcome.result.name,
                "timestamp": time.time(),
            },
        )

        return new_state, outcome
