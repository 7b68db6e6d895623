"""Collection of launched games and the round-play entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from game.logic.exceptions import NotInGameError, UnknownGameError
from game.logic.game import create_game, submit_action

if TYPE_CHECKING:
    from collections.abc import Sequence

    from game.logic.enums import ActionKind
    from game.logic.settings import GameSettings
    from game.logic.state import Game, Player

logger = structlog.get_logger()


class GameManager:
    """Own every launched game, running or ended.

    Games are never removed so finished games stay queryable. Player identity
    is validated by the caller before any method here is reached.
    """

    def __init__(self) -> None:
        self._games: dict[int, Game] = {}  # game_id -> Game

    @property
    def game_count(self) -> int:
        return len(self._games)

    @property
    def running_game_count(self) -> int:
        return sum(1 for game in self._games.values() if game.is_running)

    def create_from_room(self, game_id: int, settings: GameSettings, players: Sequence[Player]) -> Game:
        game = create_game(game_id, settings, players)
        self._games[game_id] = game
        logger.info(
            "game launched",
            game_id=game_id,
            kind=settings.kind,
            players=[p.name for p in players],
        )
        return game

    def _require(self, game_id: int) -> Game:
        game = self._games.get(game_id)
        if game is None:
            raise UnknownGameError
        return game

    def get(self, player_id: int, game_id: int) -> Game:
        """Return a game the player takes part in."""
        game = self._require(game_id)
        if not game.has_player(player_id):
            raise NotInGameError
        return game

    def play_round(self, player_id: int, game_id: int, action: ActionKind) -> Game:
        """Submit an action for the current round, resolving it when everyone has played."""
        game = self._require(game_id)
        submit_action(game, player_id, action)
        return game
