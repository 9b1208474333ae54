"""starledger.core.time

The chain counts in whole seconds since the epoch.

This module is the *only* clock surface in the codebase.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], int]


def unix_now() -> int:
    """Return wall-clock time as integer seconds since the epoch."""

    return int(time.time())


def elapsed_seconds(since: int, *, now: int | None = None) -> int:
    """Return whole seconds elapsed since ``since``.

    Args:
        since: Unix timestamp (seconds).
        now: Override clock for testing.
    """

    ref = unix_now() if now is None else now
    return ref - since


def to_datetime(ts: int) -> datetime:
    """Convert a unix timestamp into an aware UTC datetime."""

    return datetime.fromtimestamp(ts, tz=UTC)
