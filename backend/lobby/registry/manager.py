import structlog

from game.logic.exceptions import NameTakenError, UnknownPlayerError
from game.logic.state import Player
from lobby.session.ids import IdAllocator

logger = structlog.get_logger()


class PlayerRegistry:
    """Registered players, keyed by id. Players are never removed.

    Display names are unique process-wide (exact, case-sensitive match).
    """

    def __init__(self, ids: IdAllocator | None = None) -> None:
        self._ids = ids or IdAllocator()
        self._players: dict[int, Player] = {}
        self._names: set[str] = set()

    @property
    def player_count(self) -> int:
        return len(self._players)

    def register(self, name: str) -> Player:
        if name in self._names:
            raise NameTakenError
        player = Player(id=self._ids.next_id(), name=name)
        self._players[player.id] = player
        self._names.add(name)
        logger.info("player registered", player_id=player.id, player_name=name)
        return player

    def exists(self, player_id: int) -> bool:
        return player_id in self._players

    def get(self, player_id: int) -> Player | None:
        return self._players.get(player_id)

    def require(self, player_id: int) -> Player:
        """Return the player or raise UnknownPlayerError."""
        player = self._players.get(player_id)
        if player is None:
            raise UnknownPlayerError
        return player
