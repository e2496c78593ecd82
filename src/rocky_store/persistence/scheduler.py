"""Time-gated backup snapshots taken before the primary file is overwritten."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from rocky_store.core.clock import IClock, SystemClock
from rocky_store.core.config import DEFAULT_BACKUP_KEEP, DEFAULT_BACKUP_MIN_INTERVAL_SECONDS
from rocky_store.exceptions import BackupError
from rocky_store.persistence.atomic import temp_path_for
from rocky_store.persistence.backups import BackupDirectory, backup_filename

log = logging.getLogger(__name__)


class BackupScheduler:
    """Decides whether a snapshot is due and takes it.

    Whether a backup is due is recomputed from the newest backup's mtime on
    every call; there is no separate schedule record. Backup maintenance is
    advisory: failures are logged, never raised.
    """

    def __init__(
        self,
        backups: BackupDirectory,
        *,
        clock: IClock | None = None,
        keep: int = DEFAULT_BACKUP_KEEP,
        min_interval_seconds: float = DEFAULT_BACKUP_MIN_INTERVAL_SECONDS,
    ) -> None:
        self._backups = backups
        self._clock = clock or SystemClock()
        self._keep = keep
        self._min_interval = min_interval_seconds

    def is_due(self, now: float) -> bool:
        """True when no backup exists or the newest one is old enough.

        A newest backup stamped in the future (clock moved backwards) is
        treated as due.
        """
        latest = self._backups.latest_backup()
        if latest is None:
            return True
        elapsed = now - latest.modified
        return elapsed < 0 or elapsed >= self._min_interval

    def ensure_periodic_backup(self, primary_file: Path) -> Path | None:
        """Snapshot ``primary_file`` into the backup directory if one is due.

        Returns the new backup path, or ``None`` when no backup was taken.
        """
        if not primary_file.exists():
            return None

        now = self._clock.now()
        if not self.is_due(now):
            return None

        try:
            target = self._snapshot(primary_file, now)
        except BackupError as e:
            log.warning("Periodic backup skipped: %s", e)
            return None

        try:
            self._backups.rotate(self._keep)
        except OSError as e:
            log.warning("Backup rotation failed in %s: %s", self._backups.path, e)
        return target

    def _snapshot(self, primary_file: Path, now: float) -> Path:
        """Copy ``primary_file`` to a new ``rocky-<now>.json``.

        The copy lands under a ``.tmp`` name that backup listings ignore and
        is renamed into place only once complete. An existing backup with the
        same name is never overwritten.
        """
        target = self._backups.path / backup_filename(now)
        if target.exists():
            raise BackupError(f"{target} already exists")
        staging = temp_path_for(target)
        try:
            self._backups.path.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(primary_file, staging)
            # Stamp with the scheduler's clock so later due checks agree with it
            os.utime(staging, (now, now))
            os.replace(staging, target)
        except OSError as e:
            try:
                staging.unlink(missing_ok=True)
            except OSError:
                log.debug("Could not clean up partial backup %s", staging)
            raise BackupError(f"could not copy {primary_file} to {target}: {e}") from e
        log.info("Backed up %s to %s", primary_file, target)
        return target
