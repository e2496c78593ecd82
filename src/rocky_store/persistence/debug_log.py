"""Append-only ``debug.log`` sink."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from rocky_store.core.clock import IClock, SystemClock
from rocky_store.exceptions import PersistenceError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class DebugLog:
    """Appends ``"<local time> | <line>"`` records to a text file.

    The file is created on first write and never rotated or truncated.
    """

    def __init__(self, path: Path, clock: IClock | None = None) -> None:
        self._path = path
        self._clock = clock or SystemClock()

    @property
    def path(self) -> Path:
        return self._path

    def format_record(self, line: str) -> str:
        stamp = datetime.fromtimestamp(self._clock.now()).strftime(TIMESTAMP_FORMAT)
        return f"{stamp} | {line}\n"

    def append(self, line: str) -> None:
        record = self.format_record(line)
        try:
            with self._path.open("a", encoding="utf-8") as f:
                f.write(record)
        except OSError as e:
            raise PersistenceError(f"Failed to append to {self._path}: {e}") from e


class DebugLogHandler(logging.Handler):
    """Forwards log records to a ``DebugLog``.

    Lets backup maintenance failures, which are never raised, still show up
    in the app's debug.log.
    """

    def __init__(self, debug_log: DebugLog, level: int = logging.WARNING) -> None:
        super().__init__(level)
        self._debug_log = debug_log
        self.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._debug_log.append(self.format(record))
        except Exception:
            self.handleError(record)
