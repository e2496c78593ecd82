"""Backup directory listing, lookup and retention."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

log = logging.getLogger(__name__)

BACKUP_SUFFIX = ".json"
BACKUP_PREFIX = "rocky-"
# Sorts after every real timestamp when ordering newest first
UNKNOWN_MTIME = float("-inf")


class BackupEntry(NamedTuple):
    """A backup file and its modification time in epoch seconds."""

    path: Path
    modified: float


def backup_filename(timestamp: float) -> str:
    """Name for a backup taken at ``timestamp`` (seconds resolution)."""
    return f"{BACKUP_PREFIX}{int(timestamp)}{BACKUP_SUFFIX}"


class BackupDirectory:
    """A directory of timestamped snapshots of the primary data file.

    All state is read back from the filesystem on each call. Errors reading
    the directory or a file's metadata degrade to "no backup" rather than
    failing the caller.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def list_backups(self) -> list[Path]:
        """Return every regular ``.json`` file in the directory, unordered."""
        try:
            candidates = list(self._path.iterdir())
        except OSError as e:
            log.debug("Backup directory %s not readable: %s", self._path, e)
            return []
        files = []
        for p in candidates:
            try:
                if p.suffix == BACKUP_SUFFIX and p.is_file():
                    files.append(p)
            except OSError:
                continue
        return files

    def latest_backup(self) -> BackupEntry | None:
        """Return the backup with the greatest mtime, or ``None``.

        Ties keep the first entry found.
        """
        latest: BackupEntry | None = None
        for p in self.list_backups():
            modified = _mtime(p)
            if modified is None:
                continue
            if latest is None or modified > latest.modified:
                latest = BackupEntry(p, modified)
        return latest

    def entries(self) -> list[BackupEntry]:
        """Return all backups newest first; unreadable metadata sorts last."""
        entries = []
        for p in self.list_backups():
            modified = _mtime(p)
            entries.append(BackupEntry(p, UNKNOWN_MTIME if modified is None else modified))
        entries.sort(key=lambda e: (e.modified, e.path.name), reverse=True)
        return entries

    def rotate(self, keep: int) -> list[Path]:
        """Delete all but the ``keep`` most recent backups.

        Each deletion is independent: a file that cannot be removed is logged
        and skipped. Returns the paths actually removed.
        """
        removed = []
        for entry in self.entries()[max(keep, 0):]:
            try:
                entry.path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                log.warning("Could not remove old backup %s: %s", entry.path, e)
                continue
            removed.append(entry.path)
        if removed:
            log.info("Pruned %d old backup(s) from %s", len(removed), self._path)
        return removed


def _mtime(path: Path) -> float | None:
    try:
        return path.stat().st_mtime
    except OSError:
        return None
