"""CLI settings loaded from environment variables."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVEL_DEFAULT = "WARNING"


class CliSettings(BaseSettings):
    """Environment fallbacks for signing material and logging.

    Explicit command-line flags always take precedence over these values.
    """

    model_config = SettingsConfigDict(env_prefix="JWTGEN_")

    secret: str = ""
    private_key: str = ""
    log_level: str = LOG_LEVEL_DEFAULT

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level
