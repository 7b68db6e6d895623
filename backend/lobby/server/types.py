"""Query-string models for the lobby HTTP endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from game.logic.enums import ActionKind, EndConditionType, GameKind
from game.logic.settings import DEFAULT_GAME_SETTINGS, EndCondition, GameSettings


class _Query(BaseModel):
    model_config = ConfigDict(extra="forbid")


class NewPlayerQuery(_Query):
    name: str | None = Field(default=None, min_length=1, max_length=50)


class NewRoomQuery(_Query):
    """Room creation. Settings fields are optional; any omitted one takes its default."""

    player_id: int
    room_name: str = Field(min_length=1, max_length=100)
    kind: GameKind | None = None
    player_count: int | None = None
    end_condition: EndConditionType | None = None
    end_condition_target: int | None = None

    @field_validator("kind", "end_condition", mode="before")
    @classmethod
    def _lowercase_enums(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v

    def to_settings(self) -> GameSettings | None:
        if (
            self.kind is None
            and self.player_count is None
            and self.end_condition is None
            and self.end_condition_target is None
        ):
            return None

        default_end = DEFAULT_GAME_SETTINGS.end_condition
        return GameSettings(
            kind=self.kind or DEFAULT_GAME_SETTINGS.kind,
            player_count=DEFAULT_GAME_SETTINGS.player_count if self.player_count is None else self.player_count,
            end_condition=EndCondition(
                type=self.end_condition or default_end.type,
                target=default_end.target if self.end_condition_target is None else self.end_condition_target,
            ),
        )


class RoomQuery(_Query):
    player_id: int
    room_id: int


class GameQuery(_Query):
    player_id: int
    game_id: int


class PlayRoundQuery(GameQuery):
    action: ActionKind

    @field_validator("action", mode="before")
    @classmethod
    def _lowercase_action(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v
