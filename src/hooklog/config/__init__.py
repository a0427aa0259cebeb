"""
hooklog Configuration Module.

Nested settings: each sub-module is an independent concern with its own
environment variable prefix.

Multi-Environment Support:
    Set `HL_ENV` to one of: development, testing, staging, production
    .env files are loaded in this order (later overrides earlier):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local

Usage:
    from hooklog.config import settings

    settings.logging.mode   # LogMode.DATE
    settings.logging.path   # "logs"
"""

from functools import cached_property
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from .environment import EnvironmentSettings
from .logging import LoggingSettings, LogLevel, LogMode


def _get_env_files() -> tuple[str, ...]:
    """Determine which .env files to load based on HL_ENV."""
    env = os.getenv("HL_ENV", "development")
    return (
        ".env",
        ".env.local",
        f".env.{env}",
        f".env.{env}.local",
    )


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def environment(self) -> EnvironmentSettings:
        return EnvironmentSettings()

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings(_env_file=self.environment.env_files)


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "EnvironmentSettings",
    "LoggingSettings",
    "LogLevel",
    "LogMode",
]
