"""Application settings and configuration.

This module defines all configuration options for the Linkshare application.
Settings are loaded from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Linkshare", alias="LINKSHARE_APP_NAME")
    app_version: str = Field(default="0.1.0", alias="LINKSHARE_APP_VERSION")
    debug: bool = Field(default=False, alias="LINKSHARE_DEBUG")
    log_level: str = Field(default="INFO", alias="LINKSHARE_LOG_LEVEL")

    # Store configuration
    store_backend: Literal["redis", "memory"] = Field(
        default="redis",
        alias="LINKSHARE_STORE_BACKEND",
    )
    redis_url: str = Field(default="redis://localhost:6379/0", alias="LINKSHARE_REDIS_URL")
    redis_socket_timeout_seconds: float = Field(
        default=5.0,
        alias="LINKSHARE_REDIS_SOCKET_TIMEOUT_SECONDS",
    )

    # Ranking rules. One vote is worth 86400 / 200 seconds of freshness.
    vote_score: int = Field(default=432, alias="LINKSHARE_VOTE_SCORE")
    voting_window_seconds: int = Field(
        default=7 * 86400,
        alias="LINKSHARE_VOTING_WINDOW_SECONDS",
    )
    articles_per_page: int = Field(default=25, ge=1, alias="LINKSHARE_ARTICLES_PER_PAGE")
    group_cache_seconds: int = Field(default=60, ge=1, alias="LINKSHARE_GROUP_CACHE_SECONDS")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="LINKSHARE_CORS_ORIGINS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "OPTIONS"],
        alias="LINKSHARE_CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="LINKSHARE_CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def ranking_rules(self) -> dict[str, int]:
        """Return the ranking constants as a convenience dictionary.

        Returns:
            Dictionary with the vote increment, voting window and cache lifetime
        """
        return {
            "vote_score": self.vote_score,
            "voting_window_seconds": self.voting_window_seconds,
            "group_cache_seconds": self.group_cache_seconds,
        }


settings = Settings()
