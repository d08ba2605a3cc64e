"""
Dudo - Engine Settings

Loads configuration from environment variables (prefixed `DUDO_`) or a
local `.env` file using Pydantic Settings, and applies the logging level.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Match defaults
    start_num_dice: int = Field(default=5, ge=3, le=6)
    random_seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="DUDO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the `dudo` logger hierarchy from settings."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level

    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("dudo").setLevel(level)
