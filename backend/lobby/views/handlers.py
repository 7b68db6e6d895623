"""HTTP handlers for players, rooms and games.

Every endpoint is a GET taking its input from the query string. Core
errors and invalid queries are turned into responses by the exception
handlers in lobby.views.errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.responses import JSONResponse, PlainTextResponse

from lobby.server.types import GameQuery, NewPlayerQuery, NewRoomQuery, PlayRoundQuery, RoomQuery
from lobby.views.public import PlayerFull, dump_view, game_view, room_public

if TYPE_CHECKING:
    from starlette.requests import Request

    from lobby.server.settings import LobbyServerSettings
    from lobby.session.store import SessionStore


def _store(request: Request) -> SessionStore:
    return request.app.state.store


def _params(request: Request) -> dict[str, str]:
    return dict(request.query_params)


async def new_player(request: Request) -> JSONResponse:
    """GET /player/new?name= - register a player under a unique name."""
    query = NewPlayerQuery.model_validate(_params(request))
    settings: LobbyServerSettings = request.app.state.settings
    player = await _store(request).register_player(query.name or settings.default_player_name)
    return JSONResponse({"player": dump_view(PlayerFull(id=player.id, name=player.name))})


async def list_rooms(request: Request) -> JSONResponse:
    """GET /rooms/list - every open room, names only."""
    rooms = await _store(request).list_rooms()
    return JSONResponse({"rooms": [dump_view(room_public(room)) for room in rooms]})


async def new_room(request: Request) -> JSONResponse:
    query = NewRoomQuery.model_validate(_params(request))
    room = await _store(request).create_room(query.player_id, query.room_name, query.to_settings())
    return JSONResponse({"room": dump_view(room_public(room, query.player_id))})


async def join_room(request: Request) -> JSONResponse:
    query = RoomQuery.model_validate(_params(request))
    room = await _store(request).join_room(query.player_id, query.room_id)
    return JSONResponse({"room": dump_view(room_public(room, query.player_id))})


async def leave_room(request: Request) -> PlainTextResponse:
    query = RoomQuery.model_validate(_params(request))
    await _store(request).leave_room(query.player_id, query.room_id)
    return PlainTextResponse("Ok")


async def get_room(request: Request) -> JSONResponse:
    query = RoomQuery.model_validate(_params(request))
    room = await _store(request).get_room(query.player_id, query.room_id)
    return JSONResponse({"room": dump_view(room_public(room, query.player_id))})


async def launch_room(request: Request) -> JSONResponse:
    """GET /room/launch - host turns a full room into a game."""
    query = RoomQuery.model_validate(_params(request))
    game = await _store(request).launch_room(query.player_id, query.room_id)
    return JSONResponse(dump_view(game_view(game, query.player_id)))


async def get_game(request: Request) -> JSONResponse:
    query = GameQuery.model_validate(_params(request))
    game = await _store(request).get_game(query.player_id, query.game_id)
    return JSONResponse(dump_view(game_view(game, query.player_id)))


async def play_round(request: Request) -> JSONResponse:
    """GET /game/play - submit (or replace) the player's action for the current round."""
    query = PlayRoundQuery.model_validate(_params(request))
    game = await _store(request).play_round(query.player_id, query.game_id, query.action)
    return JSONResponse(dump_view(game_view(game, query.player_id)))
