"""
Game creation, action submission and end-condition evaluation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from game.logic.enums import EndConditionType, GameStatus
from game.logic.exceptions import GameEndedError, InvalidActionError, NotInGameError
from game.logic.round import resolve_round, score_round
from game.logic.rules import get_rules
from game.logic.state import Game, GamePlayer, RoundData

if TYPE_CHECKING:
    from collections.abc import Sequence

    from game.logic.enums import ActionKind
    from game.logic.settings import GameSettings
    from game.logic.state import Player

logger = structlog.get_logger()


def create_game(game_id: int, settings: GameSettings, players: Sequence[Player]) -> Game:
    """Build a running game from a room snapshot. Every player starts at 0 points."""
    return Game(
        id=game_id,
        settings=settings,
        players=[GamePlayer(player=player) for player in players],
    )


def is_game_over(game: Game) -> bool:
    """
    Check the game's end condition against its current state.

    - TOTAL_ROUNDS(n): exactly n rounds have been resolved
    - FIRST_TO_SCORE(n): the best score is exactly n (several players may
      reach it in the same round, they simply co-terminate)
    """
    end_condition = game.settings.end_condition
    if end_condition.type == EndConditionType.TOTAL_ROUNDS:
        return len(game.round_history) == end_condition.target
    best_score = max((gp.score for gp in game.players), default=0)
    return best_score == end_condition.target


def submit_action(game: Game, player_id: int, action: ActionKind) -> bool:
    """
    Record a player's action and resolve the round once everyone has acted.

    Resubmitting before the round resolves replaces the previous action.
    Returns True if this call resolved a round.
    """
    if not game.has_player(player_id):
        raise NotInGameError
    if not game.is_running:
        raise GameEndedError
    rules = get_rules(game.settings.kind)
    if not rules.accepts(action):
        raise InvalidActionError(f"{action.value} is not allowed in {game.settings.kind.value}")

    game.current_round.inputs[player_id] = action
    if game.waiting_for:
        return False

    _resolve_current_round(game)
    return True


def _resolve_current_round(game: Game) -> None:
    rules = get_rules(game.settings.kind)
    finished = game.current_round
    finished.result = resolve_round(game.players, finished.inputs, rules)
    score_round(game.players, finished.result)

    game.round_history.append(finished)
    game.current_round = RoundData()

    logger.info(
        "round resolved",
        game_id=game.id,
        round_number=len(game.round_history),
        scores=game.scores,
    )

    if is_game_over(game):
        game.status = GameStatus.ENDED
        logger.info("game ended", game_id=game.id, rounds=len(game.round_history), scores=game.scores)
