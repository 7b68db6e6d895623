from __future__ import annotations

import asyncio
import copy
from typing import TYPE_CHECKING

from game.session.manager import GameManager
from lobby.registry.manager import PlayerRegistry
from lobby.rooms.manager import RoomManager
from lobby.session.ids import IdAllocator
from lobby.session.stats import SessionStats

if TYPE_CHECKING:
    from game.logic.enums import ActionKind
    from game.logic.settings import GameSettings
    from game.logic.state import Game, Player
    from lobby.rooms.models import Room


class SessionStore:
    """Process-wide owner of players, rooms and games.

    Every operation, reads included, runs inside a single asyncio.Lock and
    never awaits anything else while holding it, so callers never observe a
    partially applied mutation. Results are deep copies: nothing returned
    here aliases the aggregate.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._players = PlayerRegistry(IdAllocator())
        self._games = GameManager()
        self._rooms = RoomManager(
            self._players,
            self._games,
            room_ids=IdAllocator(),
            game_ids=IdAllocator(),
        )

    async def register_player(self, name: str) -> Player:
        async with self._lock:
            return copy.deepcopy(self._players.register(name))

    async def list_rooms(self) -> list[Room]:
        async with self._lock:
            return copy.deepcopy(self._rooms.list_rooms())

    async def create_room(self, player_id: int, room_name: str, settings: GameSettings | None = None) -> Room:
        async with self._lock:
            return copy.deepcopy(self._rooms.create(player_id, room_name, settings))

    async def join_room(self, player_id: int, room_id: int) -> Room:
        async with self._lock:
            return copy.deepcopy(self._rooms.join(player_id, room_id))

    async def leave_room(self, player_id: int, room_id: int) -> None:
        async with self._lock:
            self._rooms.leave(player_id, room_id)

    async def get_room(self, player_id: int, room_id: int) -> Room:
        async with self._lock:
            return copy.deepcopy(self._rooms.get(player_id, room_id))

    async def launch_room(self, player_id: int, room_id: int) -> Game:
        async with self._lock:
            return copy.deepcopy(self._rooms.launch(player_id, room_id))

    async def get_game(self, player_id: int, game_id: int) -> Game:
        async with self._lock:
            self._players.require(player_id)
            return copy.deepcopy(self._games.get(player_id, game_id))

    async def play_round(self, player_id: int, game_id: int, action: ActionKind) -> Game:
        async with self._lock:
            self._players.require(player_id)
            return copy.deepcopy(self._games.play_round(player_id, game_id, action))

    async def stats(self) -> SessionStats:
        async with self._lock:
            return SessionStats(
                players=self._players.player_count,
                rooms=self._rooms.room_count,
                games=self._games.game_count,
                running_games=self._games.running_game_count,
            )
