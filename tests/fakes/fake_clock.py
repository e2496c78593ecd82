"""Manually advanced clock for deterministic scheduling tests."""

from __future__ import annotations

HOUR = 60 * 60
DAY = 24 * HOUR


class FakeClock:
    """Wall clock that only moves when told to."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds
