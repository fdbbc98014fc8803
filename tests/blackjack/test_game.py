"""
Tests for the BlackjackGame session loop, driven by scripted input.
"""

import random
from unittest.mock import MagicMock

import pytest

from simplejack.common.io_interface import TestIOInterface
from simplejack.events import EventBus, EngineEventType
from simplejack.blackjack.decision_logger import DecisionContext, decision_logger
from simplejack.blackjack.errors import SessionAborted
from simplejack.blackjack.game import BlackjackGame
from simplejack.blackjack.rules import RoundResult, Rules
from simplejack.blackjack.state import GameState, Phase
from simplejack.blackjack.strategy import DealerStrategy


@pytest.fixture
def io():
    return TestIOInterface()


def stacked_game(io, cards, *ranks, **rule_kwargs):
    """A game whose shoe deals `ranks` in order, with reshuffling off."""
    rule_kwargs.setdefault("reshuffle_threshold", 0)
    game = BlackjackGame(io, Rules(**rule_kwargs), rng=random.Random(0))
    game.state = GameState(deck=cards(*ranks))
    return game


class SnapshotIO(TestIOInterface):
    """Scripted input that records the game state at every prompt."""

    def __init__(self, *responses):
        super().__init__(list(responses))
        self.game = None
        self.states = []

    def input(self, prompt):
        self.states.append(self.game.state)
        return super().input(prompt)


def test_invalid_token_reprompts(io, cards):
    game = stacked_game(io, cards, "10", "9", "8", "8")
    io.add_input("x", "s")

    outcome = game.play_round()

    assert outcome.result is RoundResult.PLAYER_WIN
    assert '"x" is not a valid option 🤕. Try again.\n' in io.sent_messages
    assert len(io.prompts) == 2
    assert game.state.rounds_played == 1


def test_empty_line_is_invalid(io, cards):
    game = stacked_game(io, cards, "10", "9", "8", "8")
    io.add_input("", "s and more")

    game.play_round()

    assert '"" is not a valid option 🤕. Try again.\n' in io.sent_messages


@pytest.mark.parametrize("token", ["x", "H", "S", "hit", "stand", "STAND", ""])
def test_invalid_token_leaves_state_untouched(cards, token):
    io = SnapshotIO(token, "s")
    shoe = cards("10", "9", "8", "8")
    game = stacked_game(io, cards, "10", "9", "8", "8")
    io.game = game

    outcome = game.play_round()

    before, after = io.states
    assert after is before
    assert after.phase is Phase.PLAYER_TURN
    assert after.player.cards == (shoe[0], shoe[2])
    assert after.dealer.cards == (shoe[1], shoe[3])
    assert after.deck == ()
    assert f'"{token}" is not a valid option 🤕. Try again.\n' in io.sent_messages
    assert len(outcome.player) == 2


def test_table_hides_dealer_hole_card(io, cards):
    game = stacked_game(io, cards, "10", "9", "8", "8")
    io.add_input("s")

    game.play_round()

    assert io.sent_messages[:4] == [
        "Your current score is: 18",
        "Player: Ten of Spades, Eight of Diamonds",
        "Dealer: Nine of Hearts, **HIDDEN**",
        "What will you do? (h)it, (s)tand",
    ]


def test_player_bust(io, cards):
    game = stacked_game(io, cards, "10", "9", "6", "8", "K")
    io.add_input("h")

    outcome = game.play_round()

    assert outcome.result is RoundResult.PLAYER_BUST
    assert outcome.player_score == 26
    assert "You busted! You lose 😢" in io.sent_messages
    assert len(io.prompts) == 1


def test_dealer_hits_soft_17(io, cards):
    game = stacked_game(io, cards, "10", "A", "9", "6", "3")
    io.add_input("s")

    outcome = game.play_round()

    assert len(outcome.dealer) == 3
    assert outcome.dealer_score == 20
    assert outcome.result is RoundResult.DEALER_WIN


def test_dealer_stands_on_soft_17_when_configured(io, cards):
    game = stacked_game(io, cards, "10", "A", "9", "6", "3", dealer_hit_soft_17=False)
    io.add_input("s")

    outcome = game.play_round()

    assert len(outcome.dealer) == 2
    assert outcome.result is RoundResult.PLAYER_WIN


def test_final_report(io, cards):
    game = stacked_game(io, cards, "10", "9", "9", "K")
    io.add_input("s")

    game.play_round()

    assert io.sent_messages[-5:] == [
        "==FINAL HANDS==",
        "Player: Ten of Spades, Nine of Diamonds\nScore: 19",
        "Dealer: Nine of Hearts, King of Clubs\nScore: 19",
        "Draw!",
        "",
    ]
    assert game.state.player.cards == ()
    assert game.state.dealer.cards == ()


def test_input_closed_aborts_session(io, cards):
    game = stacked_game(io, cards, "10", "9", "8", "8")
    with pytest.raises(SessionAborted):
        game.play_round()


def test_deck_runs_out_mid_round(io, cards, caplog):
    game = stacked_game(io, cards, "2", "10", "3", "7")
    io.add_input("h", "s")

    with caplog.at_level("WARNING"):
        game.play_round()

    assert "reshuffling" in caplog.text
    # fresh 156-card shoe minus the card the player drew
    assert game.state.cards_remaining == 155


def test_reshuffles_before_deal_when_low(io, cards):
    shuffles = MagicMock()
    EventBus.get_instance().on(EngineEventType.SHUFFLE, shuffles)
    game = stacked_game(io, cards, *(["2"] * 10), reshuffle_threshold=15)
    game.player_strategy = DealerStrategy(game.rules, actor="Player")

    game.play_round()

    shuffles.assert_called_once()
    assert game.state.cards_remaining > 100


def test_player_action_events(io, cards):
    actions = []
    EventBus.get_instance().on(EngineEventType.PLAYER_ACTION, actions.append)
    game = stacked_game(io, cards, "2", "10", "3", "7", "4")
    io.add_input("h", "s")

    game.play_round()

    assert [event["action"] for event in actions] == ["hit", "stand"]


def test_full_session_autoplay(io):
    ended = MagicMock()
    rounds = []
    bus = EventBus.get_instance()
    bus.on(EngineEventType.GAME_ENDED, ended)
    bus.on(EngineEventType.ROUND_ENDED, rounds.append)

    rules = Rules()
    game = BlackjackGame(
        io,
        rules,
        rng=random.Random(2024),
        player_strategy=DealerStrategy(rules, actor="Player"),
    )
    stats = game.play()

    assert stats.games_played == 5
    assert stats.player_wins + stats.dealer_wins + stats.draws == 5
    assert game.state.rounds_played == 5
    assert len(rounds) == 5
    assert io.sent_messages.count("==FINAL HANDS==") == 5
    assert "==SESSION SUMMARY==" in io.sent_messages
    assert io.prompts == []
    ended.assert_called_once()
    assert ended.call_args[0][0]["stats"]["games_played"] == 5


def test_deck_persists_between_rounds(io):
    rules = Rules()
    game = BlackjackGame(
        io,
        rules,
        rng=random.Random(5),
        player_strategy=DealerStrategy(rules, actor="Player"),
    )
    game.play(num_rounds=2)

    used = 156 - game.state.cards_remaining
    assert used >= 8
    assert game.state.phase is Phase.HAND_OVER


def test_decision_history_covers_one_session(io):
    history_at_start = []
    EventBus.get_instance().on(
        EngineEventType.GAME_STARTED,
        lambda data: history_at_start.append(len(decision_logger.decision_history)),
    )
    stale = DecisionContext.for_hand("Dealer", GameState().dealer)
    decision_logger.log_decision(stale)
    rules = Rules()
    game = BlackjackGame(
        io,
        rules,
        rng=random.Random(9),
        player_strategy=DealerStrategy(rules, actor="Player"),
    )

    game.play(num_rounds=1)
    game.play(num_rounds=1)

    assert history_at_start == [0, 0]
    assert stale not in decision_logger.decision_history
    # both hands decide at least once per round
    assert len(decision_logger.decision_history) >= 2
