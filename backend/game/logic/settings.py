"""Game settings chosen at room creation and copied into the launched game."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from game.logic.enums import EndConditionType, GameKind
from game.logic.exceptions import InvalidSettingsError
from game.logic.rules import RULES_BY_KIND

MIN_PLAYER_COUNT = 2
MAX_PLAYER_COUNT = 16


class EndCondition(BaseModel):
    """When a running game ends: after `target` rounds, or when a player scores `target`."""

    model_config = ConfigDict(frozen=True)

    type: EndConditionType
    target: int

    @classmethod
    def total_rounds(cls, rounds: int) -> EndCondition:
        return cls(type=EndConditionType.TOTAL_ROUNDS, target=rounds)

    @classmethod
    def first_to_score(cls, score: int) -> EndCondition:
        return cls(type=EndConditionType.FIRST_TO_SCORE, target=score)


class GameSettings(BaseModel):
    """Room configuration: game kind, exact seat count and end condition."""

    model_config = ConfigDict(frozen=True)

    kind: GameKind = GameKind.ROCK_PAPER_SCISSORS
    player_count: int = 2
    end_condition: EndCondition = EndCondition.first_to_score(3)


DEFAULT_GAME_SETTINGS = GameSettings()


def validate_settings(settings: GameSettings) -> None:
    """Reject settings whose end state would be undefined.

    Raises InvalidSettingsError listing every problem found.
    """
    errors: list[str] = []

    if settings.kind not in RULES_BY_KIND:
        errors.append(f"kind={settings.kind.value} has no rules table")

    if not (MIN_PLAYER_COUNT <= settings.player_count <= MAX_PLAYER_COUNT):
        errors.append(
            f"player_count must be {MIN_PLAYER_COUNT}-{MAX_PLAYER_COUNT}, got {settings.player_count}",
        )

    if settings.end_condition.target < 1:
        errors.append(
            f"{settings.end_condition.type.value} target must be at least 1, got {settings.end_condition.target}",
        )

    if errors:
        raise InvalidSettingsError("; ".join(errors))
