import pytest
from pydantic import ValidationError

from game.logic.enums import EndConditionType, GameKind
from game.logic.exceptions import InvalidSettingsError, LobbyErrorCode
from game.logic.rules import RULES_BY_KIND
from game.logic.settings import (
    DEFAULT_GAME_SETTINGS,
    MAX_PLAYER_COUNT,
    EndCondition,
    GameSettings,
    validate_settings,
)


class TestDefaults:
    def test_default_settings(self):
        assert DEFAULT_GAME_SETTINGS.kind == GameKind.ROCK_PAPER_SCISSORS
        assert DEFAULT_GAME_SETTINGS.player_count == 2
        assert DEFAULT_GAME_SETTINGS.end_condition == EndCondition.first_to_score(3)

    def test_end_condition_constructors(self):
        assert EndCondition.total_rounds(5).type == EndConditionType.TOTAL_ROUNDS
        assert EndCondition.first_to_score(2).target == 2

    def test_settings_are_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_GAME_SETTINGS.player_count = 3  # type: ignore[misc]


class TestValidateSettings:
    def test_accepts_defaults(self):
        validate_settings(DEFAULT_GAME_SETTINGS)

    @pytest.mark.parametrize("player_count", [-1, 0, 1, MAX_PLAYER_COUNT + 1])
    def test_rejects_player_count_out_of_range(self, player_count):
        with pytest.raises(InvalidSettingsError, match="player_count") as exc_info:
            validate_settings(GameSettings(player_count=player_count))
        assert exc_info.value.code == LobbyErrorCode.INVALID_SETTINGS

    @pytest.mark.parametrize("end_condition", [EndCondition.total_rounds(0), EndCondition.first_to_score(0)])
    def test_rejects_zero_targets(self, end_condition):
        with pytest.raises(InvalidSettingsError, match="target must be at least 1"):
            validate_settings(GameSettings(end_condition=end_condition))

    def test_reports_every_problem(self):
        settings = GameSettings(player_count=1, end_condition=EndCondition.total_rounds(0))
        with pytest.raises(InvalidSettingsError) as exc_info:
            validate_settings(settings)
        assert "player_count" in str(exc_info.value)
        assert "total_rounds" in str(exc_info.value)

    def test_accepts_many_players(self):
        validate_settings(GameSettings(player_count=MAX_PLAYER_COUNT))

    def test_rejects_kind_without_rules_table(self, monkeypatch):
        monkeypatch.delitem(RULES_BY_KIND, GameKind.ROCK_PAPER_SCISSORS)
        with pytest.raises(InvalidSettingsError, match="kind=rock_paper_scissors has no rules table"):
            validate_settings(DEFAULT_GAME_SETTINGS)
