"""
Application settings.

Loaded from environment variables (prefix ROOKMATE_) with Pydantic validation.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rookmate.chess.square import MAX_BOARD_SIZE, MIN_BOARD_SIZE
from rookmate.core.logger import LOG_LEVELS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="ROOKMATE_")

    # --- Board ---
    default_board_size: int = 8

    # --- Initial placement ---
    max_placement_attempts: int = 10_000
    random_seed: Optional[int] = None

    # --- Persistence ---
    database_url: str = "sqlite:///rookmate.db"
    database_echo: bool = False
    replay_file: str = "game_replay.txt"

    # --- Logging ---
    log_level: str = "WARNING"

    @field_validator("default_board_size")
    @classmethod
    def validate_board_size(cls, value: int) -> int:
        if not MIN_BOARD_SIZE <= value <= MAX_BOARD_SIZE:
            raise ValueError(
                f"default_board_size must lie within {MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}. Got {value}"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        if value.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}. Got {value!r}")
        return value.upper()

    @field_validator("max_placement_attempts")
    @classmethod
    def validate_attempts(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_placement_attempts must be positive")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
