"""Load and save of the primary data file with backup fallback."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from rocky_store.exceptions import PersistenceError
from rocky_store.persistence.atomic import atomic_write_text
from rocky_store.persistence.backups import BackupDirectory
from rocky_store.persistence.document import (
    Document,
    decode_document,
    default_document,
    encode_document,
)
from rocky_store.persistence.scheduler import BackupScheduler

log = logging.getLogger(__name__)


class DocumentStore:
    """Persists a single JSON document at ``data_file``.

    ``load`` never fails on corrupt content: it falls back to the newest
    backup, then to an empty default document. Only filesystem errors on the
    primary file are raised, as ``PersistenceError``.
    """

    def __init__(
        self,
        data_file: Path,
        backups: BackupDirectory,
        scheduler: BackupScheduler,
    ) -> None:
        self._data_file = data_file
        self._backups = backups
        self._scheduler = scheduler

    @property
    def data_file(self) -> Path:
        return self._data_file

    def load(self) -> Any:
        """Return the stored document.

        A missing data file is seeded with the default document on disk. A
        corrupt one is left in place untouched: the newest backup is returned
        if it parses, otherwise a default document that is not persisted.
        """
        if not self._data_file.exists():
            document = default_document()
            atomic_write_text(self._data_file, encode_document(document))
            log.info("Created new data file at %s", self._data_file)
            return document

        try:
            raw = self._data_file.read_bytes()
        except OSError as e:
            raise PersistenceError(f"Failed to read {self._data_file}: {e}") from e

        try:
            return decode_document(raw)
        except ValueError as e:
            log.warning("Data file %s is corrupt (%s); trying latest backup", self._data_file, e)

        recovered = self._load_latest_backup()
        if recovered is not None:
            return recovered

        log.error(
            "No usable backup for %s; returning an empty document and leaving the corrupt file in place",
            self._data_file,
        )
        return default_document()

    def save(self, document: Document) -> Path:
        """Snapshot the current file if a backup is due, then replace it atomically."""
        text = encode_document(document)
        self._scheduler.ensure_periodic_backup(self._data_file)
        atomic_write_text(self._data_file, text)
        log.debug("Saved %d bytes to %s", len(text), self._data_file)
        return self._data_file

    def _load_latest_backup(self) -> Any | None:
        latest = self._backups.latest_backup()
        if latest is None:
            return None
        try:
            document = decode_document(latest.path.read_bytes())
        except (OSError, ValueError) as e:
            log.warning("Latest backup %s is unusable: %s", latest.path, e)
            return None
        log.warning("Recovered document from backup %s", latest.path)
        return document
