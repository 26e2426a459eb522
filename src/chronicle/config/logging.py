"""
Diagnostic Logging Configuration.

Controls chronicle's own structlog output, not the records handed to sinks.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiagnosticLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class LoggingSettings(BaseSettings):
    """Diagnostic logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CHR_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: DiagnosticLevel = Field(default=DiagnosticLevel.WARNING, description="Diagnostic log level")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="Output format")
    console_timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Console timestamp format",
    )
    console_level_width: int = Field(default=11, description="Console level column width")
    console_logger_width: int = Field(default=32, description="Console logger column width")
    console_separator: str = Field(default=" | ", description="Console column separator")
