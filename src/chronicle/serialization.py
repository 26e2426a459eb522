"""
Record serialization for sinks.

Every public field of a record is kept under its own name. Values orjson can
not encode natively (arbitrary metadata objects) fall back to `str()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

import orjson

if TYPE_CHECKING:
    from .record import LogEvent

# Metadata may hold dicts keyed by ints, enums or UUIDs.
_OPTIONS = orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC | orjson.OPT_NON_STR_KEYS


def record_to_dict(record: "LogEvent") -> Dict[str, Any]:
    """Snapshot a record as a plain dict. Thread fields are read on the calling thread."""
    key = record.correlation_key
    return {
        "type_name": record.type_name,
        "level": record.level.label,
        "message": record.message,
        "correlation_key": str(key) if key is not None else None,
        "tags": sorted(record.tags),
        "metadata": dict(record.metadata),
        "product_company": record.product_company,
        "product_name": record.product_name,
        "product_version": record.product_version,
        "machine_name": record.machine_name,
        "process_id": record.process_id,
        "process_name": record.process_name,
        "process_path": record.process_path,
        "thread_id": record.thread_id,
        "thread_name": record.thread_name,
        "origin_thread_id": record.origin_thread_id,
        "origin_thread_name": record.origin_thread_name,
        "created_at": record.created_at.isoformat(),
    }


def dumps(payload: Dict[str, Any]) -> bytes:
    """Encode a record dict as compact UTF-8 JSON."""
    return orjson.dumps(payload, default=str, option=_OPTIONS)


def record_to_json(record: "LogEvent") -> bytes:
    return dumps(record_to_dict(record))
