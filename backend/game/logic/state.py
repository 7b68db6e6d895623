"""
Game state models for the lobby.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from game.logic.enums import ActionKind, GameStatus
from game.logic.settings import GameSettings


@dataclass(frozen=True)
class Player:
    """A registered player. Lives for the whole process lifetime."""

    id: int
    name: str


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one pair of players in a round: a draw, or the winning player's id."""

    winner_id: int | None = None

    @classmethod
    def draw(cls) -> RoundResult:
        return cls()

    @classmethod
    def winner(cls, player_id: int) -> RoundResult:
        return cls(winner_id=player_id)

    @property
    def is_draw(self) -> bool:
        return self.winner_id is None


@dataclass
class RoundData:
    """
    Inputs collected for one round, and its results once resolved.

    result stays None while the round is still collecting inputs.
    """

    inputs: dict[int, ActionKind] = field(default_factory=dict)  # player_id -> action
    result: list[RoundResult] | None = None


@dataclass
class GamePlayer:
    player: Player
    score: int = 0


@dataclass
class Game:
    """
    A launched game.

    players keeps the room's join order for the whole game; pair enumeration
    during round resolution depends on it.
    """

    id: int
    settings: GameSettings
    players: list[GamePlayer]
    current_round: RoundData = field(default_factory=RoundData)
    round_history: list[RoundData] = field(default_factory=list)
    status: GameStatus = GameStatus.RUNNING

    @property
    def is_running(self) -> bool:
        return self.status == GameStatus.RUNNING

    @property
    def waiting_for(self) -> list[Player]:
        """Players that have not submitted an action for the current round yet."""
        return [gp.player for gp in self.players if gp.player.id not in self.current_round.inputs]

    @property
    def scores(self) -> dict[int, int]:
        return {gp.player.id: gp.score for gp in self.players}

    def has_player(self, player_id: int) -> bool:
        return any(gp.player.id == player_id for gp in self.players)
