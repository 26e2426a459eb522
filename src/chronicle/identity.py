"""
Product identity stamped on records.

`ProductInfo` is a plain value. Prefer handing one to a `RecordFactory`; the
process-wide value below exists for code that builds records through
`LogEvent.new` without a factory.

The process-wide value is resolved once, on first read, from freshly loaded
product settings (`CHR_PRODUCT_*` and the `.env` chain for `CHR_ENV`).
Call `override_product_info` during startup, before records are created
concurrently: records copy the identity when they are constructed, so an
override only affects records built after it.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from importlib import metadata
from typing import Optional

from chronicle.config import Settings
from chronicle.config.product import ProductSettings
from chronicle.logging import get_logger

logger = get_logger("chronicle.identity")


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class ProductInfo:
    """Company, product name and product version."""

    company: Optional[str] = None
    name: Optional[str] = None
    version: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return not (_blank(self.company) or _blank(self.name) or _blank(self.version))

    @classmethod
    def from_distribution(cls, distribution: str) -> "ProductInfo":
        """Read identity from an installed distribution's metadata.

        Raises:
            importlib.metadata.PackageNotFoundError: If the distribution is not installed
        """
        meta = metadata.metadata(distribution)
        return cls(
            company=meta.get("Author") or meta.get("Author-email"),
            name=meta.get("Name"),
            version=meta.get("Version"),
        )

    @classmethod
    def from_settings(cls, product: ProductSettings) -> "ProductInfo":
        """Build identity from settings, filling unset fields from `product.distribution`.

        A distribution that is not installed contributes nothing; the identity
        then stays incomplete and record construction reports it.
        """
        info = cls(company=product.company, name=product.name, version=product.version)
        if info.is_complete or not product.distribution:
            return info
        try:
            fallback = cls.from_distribution(product.distribution)
        except metadata.PackageNotFoundError:
            return info
        return cls(
            company=info.company if not _blank(info.company) else fallback.company,
            name=info.name if not _blank(info.name) else fallback.name,
            version=info.version if not _blank(info.version) else fallback.version,
        )


_lock = threading.Lock()
_current: Optional[ProductInfo] = None


def current_product_info() -> ProductInfo:
    """Return the process-wide identity, resolving it from settings on first use."""
    global _current
    if _current is None:
        with _lock:
            if _current is None:
                _current = ProductInfo.from_settings(Settings().product)
    return _current


def override_product_info(company: str, name: str, version: str) -> ProductInfo:
    """Replace the process-wide identity.

    Records constructed before this call keep the identity they copied.
    """
    global _current
    info = ProductInfo(company=company, name=name, version=version)
    with _lock:
        _current = info
    logger.debug("product_info.overridden", company=company, name=name, version=version)
    return info


def reset_product_info() -> None:
    """Forget the process-wide identity (useful for testing)."""
    global _current
    with _lock:
        _current = None
