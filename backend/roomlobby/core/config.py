"""Application settings for lobby runtime and tests."""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Typed settings loaded from environment variables or explicit kwargs."""

    lobby_app_host: str = "127.0.0.1"
    lobby_app_port: int = Field(default=8000, ge=1)

    lobby_sqlite_path: str = "lobby.db"
    lobby_sqlite_busy_timeout_seconds: float = Field(default=5.0, gt=0)
    lobby_cors_allow_origins: str = "*"

    # None keeps the join-code allocator retrying until a free code is found.
    lobby_join_code_max_attempts: int | None = Field(default=None, ge=1)

    lobby_log_level: str = "INFO"

    @model_validator(mode="after")
    def validate_log_level(self) -> "Settings":
        """Ensure the configured log level is one the logging module knows."""
        level = self.lobby_log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOBBY_LOG_LEVEL has unknown level {self.lobby_log_level!r}")
        self.lobby_log_level = level
        return self

    def cors_origins(self) -> list[str]:
        """Split the comma-separated CORS origin list."""
        return [origin.strip() for origin in self.lobby_cors_allow_origins.split(",") if origin.strip()]


def load_settings() -> Settings:
    """Load settings from process environment."""
    return Settings()
