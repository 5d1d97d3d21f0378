#!/usr/bin/env python3
"""
Tolk Utilities

Logging helpers shared by the lookup engine and the public API.
"""

import os
import threading
from datetime import datetime

# Global lock for stdout to prevent garbled output in multi-threaded hosts
_stdout_lock = threading.Lock()

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "WARNING": 30, "ERROR": 40}


def _threshold() -> int:
    raw = os.getenv("TOLK_LOG_LEVEL", "INFO").strip().upper()
    return _LEVELS.get(raw, _LEVELS["INFO"])


def tolk_log(tag: str, message: str, level: str = "INFO"):
    """
    Log a message with timestamp and tag.

    Format: [HH:MM:SS.mmm] [LEVEL] [TAG] message

    Args:
        tag: Component tag (e.g., "RESOLVE", "CONFIG", "API")
        message: Log message
        level: Log level (DEBUG, INFO, WARN, ERROR)
    """
    if _LEVELS.get(level.upper(), _LEVELS["INFO"]) < _threshold():
        return

    timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]

    # Format: [14:08:25.342] [WARN] [RESOLVE] Translation table not found
    log_line = f"[{timestamp}] [{level}] [{tag}] {message}"

    with _stdout_lock:
        print(log_line, flush=True)
