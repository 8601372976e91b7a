"""High-resolution time since the process first asked for it."""

from __future__ import annotations

import time

_INITIAL_TIME = time.perf_counter()


def current_time_seconds() -> float:
    """Seconds elapsed since this module was first loaded."""
    return time.perf_counter() - _INITIAL_TIME