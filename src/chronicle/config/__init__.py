"""
Chronicle Configuration Module.

Implements the Nested Settings Pattern for orthogonal configuration domains.
Each sub-module represents an independent concern with its own environment variable prefix.

Multi-Environment Support:
    Set `CHR_ENV` to one of: development, testing, staging, production
    Every sub-settings object loads .env files in this order (later overrides earlier):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local
    Process environment variables override all of them.

Usage:
    from chronicle.config import settings

    settings.product.company
    settings.sinks.default
    settings.logging.level
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .environment import EnvironmentSettings
from .logging import LoggingSettings
from .product import ProductSettings
from .sinks import SinkSettings


class Settings(BaseSettings):
    """
    Composite settings aggregating all orthogonal configuration domains.

    The environment is resolved first; its `.env` chain is then handed to each
    sub-settings object, which loads from its own env prefix on first access.
    """

    model_config = SettingsConfigDict(extra="ignore")

    @cached_property
    def environment(self) -> EnvironmentSettings:
        return EnvironmentSettings()

    @cached_property
    def product(self) -> ProductSettings:
        return ProductSettings(_env_file=self.environment.env_files)

    @cached_property
    def sinks(self) -> SinkSettings:
        return SinkSettings(_env_file=self.environment.env_files)

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
    "ProductSettings",
    "SinkSettings",
]
