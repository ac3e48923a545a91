"""Application configuration settings using Pydantic Settings.

Settings are loaded from environment variables (prefixed with OTHELLO_) with sensible defaults.
A singleton instance is provided via get_settings() for dependency injection.

Example:
    >>> from src.core.config import get_settings
    >>> get_settings().search_depth
    3
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Attributes:
        database_url: SQLAlchemy connection URL for the game repository.
        echo_sql: Log every SQL statement emitted by the engine.
        search_depth: Plies the computer opponent (and move hints) search ahead.
        max_search_depth: Deepest search a move hint may request.
        log_level: Level handed to configure_logging().
    """

    model_config = SettingsConfigDict(
        env_prefix="OTHELLO_",
        extra="ignore",
    )

    database_url: str = "sqlite:///othello.db"
    echo_sql: bool = False
    search_depth: int = Field(default=3, ge=1)
    max_search_depth: int = Field(default=5, ge=1)
    log_level: LogLevel = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance (environment is read once)."""
    return Settings()
