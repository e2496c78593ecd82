"""Atomic JSON persistence with rotating, time-gated backups."""

from __future__ import annotations

from rocky_store.persistence.atomic import atomic_write_text
from rocky_store.persistence.backups import BackupDirectory, BackupEntry
from rocky_store.persistence.debug_log import DebugLog, DebugLogHandler
from rocky_store.persistence.document import Document, default_document
from rocky_store.persistence.engine import DocumentStore
from rocky_store.persistence.scheduler import BackupScheduler

__all__ = [
    "BackupDirectory",
    "BackupEntry",
    "BackupScheduler",
    "DebugLog",
    "DebugLogHandler",
    "Document",
    "DocumentStore",
    "atomic_write_text",
    "default_document",
]
