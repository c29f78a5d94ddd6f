"""Elapsed wall-clock time for progress lines.

The run's start is a ``time.monotonic()`` reading stored on the release
config; nothing here holds state.
"""

from __future__ import annotations

import time

__all__ = ["elapsed", "format_elapsed", "now"]


def now() -> float:
    return time.monotonic()


def elapsed(current: float, start: float) -> float:
    """Seconds between ``start`` and ``current``, never negative."""
    return max(0.0, current - start)


def format_elapsed(seconds: float) -> str:
    """Render seconds the way step lines show them: ``12.3s``."""
    return f"{seconds:.1f}s"
