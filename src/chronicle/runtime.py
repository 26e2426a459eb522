"""
Process facts shared by every record.

Captured once per process on first use. A forked child starts with an empty
cache so it reports its own pid.
"""

from __future__ import annotations

import os
import platform
import socket
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ProcessInfo:
    """Machine and process facts of the running interpreter."""

    machine_name: str
    process_id: int
    process_name: str
    process_path: str

    @classmethod
    def capture(cls) -> "ProcessInfo":
        executable = sys.executable or (sys.argv[0] if sys.argv else "")
        return cls(
            machine_name=platform.node() or socket.gethostname(),
            process_id=os.getpid(),
            process_name=Path(executable).stem if executable else "python",
            process_path=str(Path(executable).resolve()) if executable else "",
        )


_lock = threading.Lock()
_process_info: Optional[ProcessInfo] = None


def process_info() -> ProcessInfo:
    """Return the process facts, capturing them on first call."""
    global _process_info
    if _process_info is None:
        with _lock:
            if _process_info is None:
                _process_info = ProcessInfo.capture()
    return _process_info


def _forget() -> None:
    global _process_info
    _process_info = None


if hasattr(os, "register_at_fork"):
    os.register_at_fork(after_in_child=_forget)
