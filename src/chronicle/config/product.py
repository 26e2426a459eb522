"""
Product Identity Configuration.

Seeds the process-wide company/name/version stamped on every record.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProductSettings(BaseSettings):
    """
    Product identity settings.
    Prefix: CHR_PRODUCT_

    When `distribution` is set, fields left unset are read from that installed
    distribution's metadata (Author, Name, Version).
    """

    model_config = SettingsConfigDict(
        env_prefix="CHR_PRODUCT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    company: Optional[str] = Field(default=None, description="Company publishing the product")
    name: Optional[str] = Field(default=None, description="Product name")
    version: Optional[str] = Field(default=None, description="Product version")
    distribution: Optional[str] = Field(
        default=None,
        description="Installed distribution to read missing identity fields from",
    )
