"""rocky-store: crash-safe JSON persistence with rotating daily backups.

Typical use::

    from rocky_store import AppSettings, RockyDataService

    service = RockyDataService.from_settings(AppSettings())
    data = service.load()
    data["days"].append({"date": "2024-05-01", "text": "ran 5k", "color": "green"})
    service.save(data)
"""

from __future__ import annotations

from rocky_store.core.config import AppSettings
from rocky_store.exceptions import PersistenceError, RockyError
from rocky_store.persistence import (
    BackupDirectory,
    BackupScheduler,
    DebugLog,
    DocumentStore,
    default_document,
)
from rocky_store.services.data_service import RockyDataService

__all__ = [
    "AppSettings",
    "BackupDirectory",
    "BackupScheduler",
    "DebugLog",
    "DocumentStore",
    "PersistenceError",
    "RockyDataService",
    "RockyError",
    "default_document",
]
