"""Lobby server configuration via environment variables."""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from shared.validators import parse_string_list


class LobbyServerSettings(BaseSettings):
    model_config = {"env_prefix": "LOBBY_"}

    log_dir: str | None = None
    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    stats_interval_seconds: float = Field(default=5, ge=0)  # 0 disables periodic stats logging
    default_player_name: str = Field(default="toto", min_length=1, max_length=50)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: str | list[str]) -> list[str]:
        return parse_string_list(v, allow_empty=True)
