"""
Central application configuration using pydantic-settings.

This module provides typed access to environment-based configuration for:
- the console front end (log level, JSONL game log, example game)
- the HTTP lane server
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BowlingSettings(BaseSettings):
    """
    Configuration for the console front end.

    Environment variables (prefix: BOWLING_):
        BOWLING_LOG_LEVEL    - Python logging level name (default: INFO)
        BOWLING_LOG_FILE     - Optional path to a JSONL game log
        BOWLING_SHOW_EXAMPLE - Print the example game before playing (default: false)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="BOWLING_",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level for the application logger.",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Path to a JSONL game log; disabled when unset.",
    )
    show_example: bool = Field(
        default=False,
        description="Print the example game before the interactive loop.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        """Upper-case the level name and reject names logging does not know."""
        if not value:
            return "INFO"
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


class ServerSettings(BaseSettings):
    """
    Configuration for the HTTP lane server.

    Environment variables (prefix: BOWLING_SERVER_):
        BOWLING_SERVER_HOST - Bind address (default: 127.0.0.1)
        BOWLING_SERVER_PORT - Bind port (default: 8000)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="BOWLING_SERVER_",
    )

    host: str = Field(default="127.0.0.1", description="Bind address.")
    port: int = Field(default=8000, gt=0, lt=65536, description="Bind port.")


@lru_cache
def get_settings() -> BowlingSettings:
    """Return cached console settings instance."""
    return BowlingSettings()


@lru_cache
def get_server_settings() -> ServerSettings:
    """Return cached server settings instance."""
    return ServerSettings()
