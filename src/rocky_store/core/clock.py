"""Injectable wall-clock used by backup scheduling and the debug log."""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class IClock(Protocol):
    """Protocol for wall-clock sources.

    Backup scheduling compares ``now()`` against file modification times, so
    implementations must return epoch seconds, not a monotonic reading.
    """

    def now(self) -> float:
        """Return the current time as seconds since the epoch."""
        ...


class SystemClock:
    """Wall clock backed by ``time.time()``."""

    def now(self) -> float:
        return time.time()
