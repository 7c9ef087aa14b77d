"""
Configuration for services rendering canonical errors.

Settings are loaded from .env files and environment variables prefixed with
``CANONICAL_ERRORS_`` (e.g. ``CANONICAL_ERRORS_INCLUDE_DEBUG_INFO=true``).
``problem_for_settings`` and ``configure_logging`` consult them; the pure
conversion functions never do.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Defines application environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="CANONICAL_ERRORS_",
    )

    SERVICE_NAME: str = Field(default="canonical-errors", description="Service identifier")
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT, description="Runtime environment"
    )
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] | None = Field(
        default=None,
        description="Log renderer; json in production and console elsewhere when unset",
    )
    INCLUDE_DEBUG_INFO: bool = Field(
        default=False,
        description="Render the debug payload of errors into problem documents",
    )

    @property
    def debug_problems_enabled(self) -> bool:
        """Debug payloads are never rendered in production."""
        return self.INCLUDE_DEBUG_INFO and self.ENVIRONMENT != Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
