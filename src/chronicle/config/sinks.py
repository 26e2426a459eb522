"""
Sink Configuration.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


SinkName = Literal["null", "memory", "stdio", "file", "gcloud", "pubsub"]


class SinkSettings(BaseSettings):
    """
    Settings consumed by `chronicle.sinks.create_sink`.
    Prefix: CHR_SINK_
    """

    model_config = SettingsConfigDict(
        env_prefix="CHR_SINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    default: SinkName = Field(default="stdio", description="Sink built when no name is given")
    timeout: Optional[float] = Field(
        default=10.0,
        gt=0,
        description="Seconds a single persist call may take (None disables)",
    )

    # Stdio
    stdio_format: Literal["console", "json"] = Field(default="console", description="Stdio output format")

    # File
    file_path: str = Field(default="logs/chronicle.log", description="Path for file sink")
    file_max_bytes: int = Field(default=10 * 1024 * 1024, gt=0, description="Rotate after this many bytes")
    file_backup_count: int = Field(default=5, ge=1, description="Rotated files kept")

    # Google Cloud Logging
    gcloud_project: Optional[str] = Field(default=None, description="GCP project for Cloud Logging")
    gcloud_log_name: str = Field(default="chronicle", description="Log name for Cloud Logging")

    # Google Cloud Pub/Sub
    pubsub_project: Optional[str] = Field(default=None, description="GCP project owning the topic")
    pubsub_topic: Optional[str] = Field(default=None, description="Pub/Sub topic id")
