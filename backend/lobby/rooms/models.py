"""Room model for the lobby."""

from __future__ import annotations

from dataclasses import dataclass, field

from game.logic.settings import DEFAULT_GAME_SETTINGS, GameSettings
from game.logic.state import Player


@dataclass
class Room:
    """Pre-game room gathering players until it holds exactly settings.player_count.

    players is kept in join order and the first entry is the host. There is
    no separate host field: when the host leaves, the next player in join
    order becomes host.
    """

    id: int
    name: str
    settings: GameSettings = DEFAULT_GAME_SETTINGS
    players: list[Player] = field(default_factory=list)

    @property
    def host(self) -> Player | None:
        return self.players[0] if self.players else None

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def is_full(self) -> bool:
        return self.player_count >= self.settings.player_count

    @property
    def is_empty(self) -> bool:
        return self.player_count == 0

    def has_player(self, player_id: int) -> bool:
        return any(p.id == player_id for p in self.players)

    def is_host(self, player_id: int) -> bool:
        return self.host is not None and self.host.id == player_id

    def remove_player(self, player_id: int) -> None:
        self.players = [p for p in self.players if p.id != player_id]
