"""Redacted views of rooms and games for HTTP responses.

Other players are shown by name only. A player's numeric id is included
only on the viewer's own entry, and only the viewer's own pending action
is revealed for the round in progress.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel

from game.logic.enums import ActionKind, GameStatus
from game.logic.settings import GameSettings

if TYPE_CHECKING:
    from game.logic.state import Game, Player, RoundData, RoundResult
    from lobby.rooms.models import Room


class PlayerPublic(BaseModel):
    name: str
    id: int | None = None


class PlayerFull(BaseModel):
    id: int
    name: str


class RoomPublic(BaseModel):
    id: int
    name: str
    settings: GameSettings
    host: PlayerPublic | None = None
    players: list[PlayerPublic]


class RoundResultView(BaseModel):
    type: Literal["draw", "winner"]
    player_id: int | None = None


class RoundView(BaseModel):
    inputs: dict[int, ActionKind]
    result: list[RoundResultView]


class GamePlayerView(BaseModel):
    player: PlayerPublic
    score: int


class GameView(BaseModel):
    id: int
    settings: GameSettings
    status: GameStatus
    players: list[GamePlayerView]
    waiting_for_players: list[PlayerPublic]
    my_action: ActionKind | None = None
    round_history: list[RoundView]


def player_public(player: Player, viewer_id: int | None = None) -> PlayerPublic:
    if viewer_id is not None and player.id == viewer_id:
        return PlayerPublic(name=player.name, id=player.id)
    return PlayerPublic(name=player.name)


def room_public(room: Room, viewer_id: int | None = None) -> RoomPublic:
    return RoomPublic(
        id=room.id,
        name=room.name,
        settings=room.settings,
        host=player_public(room.host, viewer_id) if room.host is not None else None,
        players=[player_public(p, viewer_id) for p in room.players],
    )


def _result_view(result: RoundResult) -> RoundResultView:
    if result.is_draw:
        return RoundResultView(type="draw")
    return RoundResultView(type="winner", player_id=result.winner_id)


def _round_view(round_data: RoundData) -> RoundView:
    return RoundView(
        inputs=dict(round_data.inputs),
        result=[_result_view(r) for r in round_data.result or []],
    )


def game_view(game: Game, viewer_id: int | None = None) -> GameView:
    return GameView(
        id=game.id,
        settings=game.settings,
        status=game.status,
        players=[GamePlayerView(player=player_public(gp.player, viewer_id), score=gp.score) for gp in game.players],
        waiting_for_players=[player_public(p, viewer_id) for p in game.waiting_for],
        my_action=game.current_round.inputs.get(viewer_id) if viewer_id is not None else None,
        round_history=[_round_view(r) for r in game.round_history],
    )


def dump_view(view: BaseModel) -> dict:
    """JSON-ready dict without unset optional fields (e.g. other players' ids)."""
    return view.model_dump(mode="json", exclude_none=True)
