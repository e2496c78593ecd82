"""Host-facing data service: load, save and appendLog over one data directory."""

from __future__ import annotations

import logging
from typing import Any

from rocky_store.core.clock import IClock, SystemClock
from rocky_store.core.config import AppSettings, StorageConfig
from rocky_store.core.paths import StoragePaths, ensure_dir
from rocky_store.exceptions import PersistenceError
from rocky_store.persistence.backups import BackupDirectory, BackupEntry
from rocky_store.persistence.debug_log import DebugLog
from rocky_store.persistence.document import Document
from rocky_store.persistence.engine import DocumentStore
from rocky_store.persistence.scheduler import BackupScheduler

log = logging.getLogger(__name__)


class RockyDataService:
    """The three operations the UI layer invokes, plus backup listing."""

    def __init__(self, config: StorageConfig, clock: IClock | None = None) -> None:
        self.paths = StoragePaths.from_config(config)
        try:
            ensure_dir(self.paths.data_dir)
        except OSError as e:
            raise PersistenceError(f"Cannot create data directory {self.paths.data_dir}: {e}") from e

        clock = clock or SystemClock()
        self._backups = BackupDirectory(self.paths.backup_dir)
        scheduler = BackupScheduler(
            self._backups,
            clock=clock,
            keep=config.backup_keep,
            min_interval_seconds=config.backup_min_interval_seconds,
        )
        self._store = DocumentStore(self.paths.data_file, self._backups, scheduler)
        self.debug_log = DebugLog(self.paths.log_file, clock=clock)

    @classmethod
    def from_settings(cls, settings: AppSettings, clock: IClock | None = None) -> RockyDataService:
        return cls(settings.storage, clock=clock)

    def load(self) -> Any:
        return self._store.load()

    def save(self, document: Document) -> None:
        self._store.save(document)

    def append_log(self, line: str) -> None:
        self.debug_log.append(line)

    def list_backups(self) -> list[BackupEntry]:
        """Backups newest first."""
        return self._backups.entries()
