"""Tests for game creation, action submission and end conditions."""

import pytest

from game.logic import game as game_module
from game.logic.enums import ActionKind, GameKind, GameStatus
from game.logic.exceptions import GameEndedError, InvalidActionError, NotInGameError
from game.logic.game import create_game, is_game_over, submit_action
from game.logic.rules import GameRules
from game.logic.settings import EndCondition, GameSettings
from game.logic.state import Player, RoundResult

ROCK = ActionKind.ROCK
PAPER = ActionKind.PAPER
SCISSORS = ActionKind.SCISSORS

ALICE = Player(id=0, name="Alice")
BOB = Player(id=1, name="Bob")
CHARLIE = Player(id=2, name="Charlie")


def _game(end_condition: EndCondition, players=(ALICE, BOB)):
    settings = GameSettings(player_count=len(players), end_condition=end_condition)
    return create_game(0, settings, list(players))


class TestCreateGame:
    def test_initial_state(self):
        game = _game(EndCondition.first_to_score(3), players=(BOB, ALICE))
        assert [gp.player for gp in game.players] == [BOB, ALICE]
        assert [gp.score for gp in game.players] == [0, 0]
        assert game.current_round.inputs == {}
        assert game.current_round.result is None
        assert game.round_history == []
        assert game.status == GameStatus.RUNNING
        assert game.waiting_for == [BOB, ALICE]


class TestSubmitAction:
    def test_partial_round_does_not_resolve(self):
        game = _game(EndCondition.first_to_score(3))
        resolved = submit_action(game, ALICE.id, ROCK)
        assert resolved is False
        assert game.current_round.inputs == {ALICE.id: ROCK}
        assert game.round_history == []
        assert game.waiting_for == [BOB]

    def test_resubmission_replaces_previous_action(self):
        game = _game(EndCondition.first_to_score(3))
        submit_action(game, ALICE.id, PAPER)
        resolved = submit_action(game, ALICE.id, ROCK)
        assert resolved is False
        assert game.current_round.inputs == {ALICE.id: ROCK}
        assert game.round_history == []

    def test_last_input_resolves_round(self):
        game = _game(EndCondition.first_to_score(3))
        submit_action(game, ALICE.id, PAPER)
        resolved = submit_action(game, BOB.id, SCISSORS)
        assert resolved is True
        assert len(game.round_history) == 1
        finished = game.round_history[0]
        assert finished.inputs == {ALICE.id: PAPER, BOB.id: SCISSORS}
        assert finished.result == [RoundResult.winner(BOB.id)]
        assert game.scores == {ALICE.id: 0, BOB.id: 1}
        assert game.current_round.inputs == {}
        assert game.current_round.result is None

    def test_outsider_rejected(self):
        game = _game(EndCondition.first_to_score(3))
        with pytest.raises(NotInGameError):
            submit_action(game, CHARLIE.id, ROCK)
        assert game.current_round.inputs == {}

    def test_action_outside_rules_table_rejected(self, monkeypatch):
        reduced = GameRules(
            kind=GameKind.ROCK_PAPER_SCISSORS,
            beats={ROCK: frozenset({SCISSORS}), SCISSORS: frozenset()},
        )
        monkeypatch.setattr(game_module, "get_rules", lambda _kind: reduced)
        game = _game(EndCondition.first_to_score(3))
        submit_action(game, ALICE.id, ROCK)

        with pytest.raises(InvalidActionError, match="paper is not allowed"):
            submit_action(game, BOB.id, PAPER)
        assert game.current_round.inputs == {ALICE.id: ROCK}
        assert game.round_history == []

    def test_ended_game_rejects_actions_without_change(self):
        game = _game(EndCondition.total_rounds(1))
        submit_action(game, ALICE.id, ROCK)
        submit_action(game, BOB.id, ROCK)
        assert game.status == GameStatus.ENDED

        with pytest.raises(GameEndedError):
            submit_action(game, ALICE.id, PAPER)
        assert game.current_round.inputs == {}
        assert len(game.round_history) == 1

    def test_three_player_round_scores_every_pairwise_win(self):
        game = _game(EndCondition.first_to_score(5), players=(ALICE, BOB, CHARLIE))
        submit_action(game, CHARLIE.id, SCISSORS)
        submit_action(game, ALICE.id, ROCK)
        submit_action(game, BOB.id, ROCK)
        assert game.round_history[0].result == [
            RoundResult.draw(),
            RoundResult.winner(ALICE.id),
            RoundResult.winner(BOB.id),
        ]
        assert game.scores == {ALICE.id: 1, BOB.id: 1, CHARLIE.id: 0}


class TestEndConditions:
    def test_total_rounds_ends_after_exactly_n_rounds(self):
        game = _game(EndCondition.total_rounds(2))
        submit_action(game, ALICE.id, ROCK)
        submit_action(game, BOB.id, ROCK)
        assert game.status == GameStatus.RUNNING
        submit_action(game, ALICE.id, ROCK)
        submit_action(game, BOB.id, PAPER)
        assert game.status == GameStatus.ENDED
        assert len(game.round_history) == 2

    def test_first_to_score_ends_when_target_reached(self):
        game = _game(EndCondition.first_to_score(2))
        for _ in range(2):
            assert game.status == GameStatus.RUNNING
            submit_action(game, ALICE.id, ROCK)
            submit_action(game, BOB.id, SCISSORS)
        assert game.status == GameStatus.ENDED
        assert game.scores[ALICE.id] == 2

    def test_draws_do_not_advance_score_target(self):
        game = _game(EndCondition.first_to_score(1))
        submit_action(game, ALICE.id, PAPER)
        submit_action(game, BOB.id, PAPER)
        assert game.status == GameStatus.RUNNING

    def test_simultaneous_target_reached_co_terminates(self):
        game = _game(EndCondition.first_to_score(1), players=(ALICE, BOB, CHARLIE))
        # rock, scissors, paper: every player wins exactly one pair
        submit_action(game, ALICE.id, ROCK)
        submit_action(game, BOB.id, SCISSORS)
        submit_action(game, CHARLIE.id, PAPER)
        assert game.scores == {ALICE.id: 1, BOB.id: 1, CHARLIE.id: 1}
        assert game.status == GameStatus.ENDED

    def test_score_past_target_keeps_game_running(self):
        game = _game(EndCondition.first_to_score(1), players=(ALICE, BOB, CHARLIE))
        # paper beats both rocks: Alice jumps from 0 to 2
        submit_action(game, ALICE.id, PAPER)
        submit_action(game, BOB.id, ROCK)
        submit_action(game, CHARLIE.id, ROCK)
        assert game.scores == {ALICE.id: 2, BOB.id: 0, CHARLIE.id: 0}
        assert game.status == GameStatus.RUNNING
        assert is_game_over(game) is False

    def test_is_game_over_on_fresh_game(self):
        assert is_game_over(_game(EndCondition.first_to_score(1))) is False
        assert is_game_over(_game(EndCondition.total_rounds(1))) is False
