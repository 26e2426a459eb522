"""
Diagnostic logging for chronicle.

Library: structlog + orjson. Console output uses aligned columns; JSON output
is one object per line.
"""

from .core import configure_from_settings, configure_logging, get_logger

__all__ = ["configure_logging", "configure_from_settings", "get_logger"]
