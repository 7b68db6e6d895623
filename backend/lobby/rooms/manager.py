"""Room manager for the lobby server."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from game.logic.exceptions import (
    AlreadyInRoomError,
    NotHostError,
    NotInRoomError,
    RoomFullError,
    RoomNotFullError,
    UnknownRoomError,
)
from game.logic.settings import DEFAULT_GAME_SETTINGS, validate_settings
from lobby.rooms.models import Room
from lobby.session.ids import IdAllocator

if TYPE_CHECKING:
    from game.logic.settings import GameSettings
    from game.logic.state import Game
    from game.session.manager import GameManager
    from lobby.registry.manager import PlayerRegistry

logger = structlog.get_logger()


class RoomManager:
    """Manages pre-game rooms: membership, capacity, host rules and launch.

    Purely state management, no I/O. Every method validates before mutating,
    so a raised LobbyError leaves rooms untouched. Empty rooms are deleted
    immediately, and a launched room is consumed into a game.
    """

    def __init__(
        self,
        players: PlayerRegistry,
        games: GameManager,
        room_ids: IdAllocator | None = None,
        game_ids: IdAllocator | None = None,
    ) -> None:
        self._players = players
        self._games = games
        self._room_ids = room_ids or IdAllocator()
        self._game_ids = game_ids or IdAllocator()
        self._rooms: dict[int, Room] = {}  # room_id -> Room, in creation order

    @property
    def room_count(self) -> int:
        return len(self._rooms)

    def _require_room(self, room_id: int) -> Room:
        room = self._rooms.get(room_id)
        if room is None:
            raise UnknownRoomError
        return room

    def _require_member(self, player_id: int, room_id: int) -> Room:
        self._players.require(player_id)
        room = self._require_room(room_id)
        if not room.has_player(player_id):
            raise NotInRoomError
        return room

    def create(self, host_id: int, name: str, settings: GameSettings | None = None) -> Room:
        """Create a room with the given player as its host (first member)."""
        host = self._players.require(host_id)
        settings = settings or DEFAULT_GAME_SETTINGS
        validate_settings(settings)

        room = Room(id=self._room_ids.next_id(), name=name, settings=settings, players=[host])
        self._rooms[room.id] = room
        logger.info(
            "room created",
            room_id=room.id,
            room_name=name,
            host_id=host_id,
            player_count=settings.player_count,
        )
        return room

    def join(self, player_id: int, room_id: int) -> Room:
        player = self._players.require(player_id)
        room = self._require_room(room_id)
        if room.has_player(player_id):
            raise AlreadyInRoomError
        if room.is_full:
            raise RoomFullError

        room.players.append(player)
        logger.info("player joined room", room_id=room_id, player_id=player_id, seats_taken=room.player_count)
        return room

    def leave(self, player_id: int, room_id: int) -> None:
        """Remove a player. The next player in join order becomes host; an emptied room is deleted."""
        room = self._require_member(player_id, room_id)

        room.remove_player(player_id)
        logger.info("player left room", room_id=room_id, player_id=player_id)

        if room.is_empty:
            del self._rooms[room_id]
            logger.info("room deleted", room_id=room_id)

    def get(self, player_id: int, room_id: int) -> Room:
        """Return a room the player belongs to."""
        return self._require_member(player_id, room_id)

    def list_rooms(self) -> list[Room]:
        """Return every open room, for the public lobby listing."""
        return list(self._rooms.values())

    def launch(self, player_id: int, room_id: int) -> Game:
        """Host turns a full room into a game. The room is consumed."""
        room = self._require_member(player_id, room_id)
        if not room.is_host(player_id):
            raise NotHostError
        if room.player_count != room.settings.player_count:
            raise RoomNotFullError

        game = self._games.create_from_room(self._game_ids.next_id(), room.settings, list(room.players))
        del self._rooms[room_id]
        logger.info("room launched", room_id=room_id, game_id=game.id)
        return game
