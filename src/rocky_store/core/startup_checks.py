"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rocky_store.core.config import AppSettings

log = logging.getLogger(__name__)

_ONE_HOUR = 60 * 60


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_data_dir(settings)
    _check_backup_interval(settings)


def _check_data_dir(settings: AppSettings) -> None:
    """Reject a data directory path that points at a regular file."""
    data_dir = settings.storage.data_dir.expanduser()
    if data_dir.exists() and not data_dir.is_dir():
        raise ValueError(
            f"ROCKY_STORAGE_DATA_DIR points at a file, not a directory: {data_dir}"
        )


def _check_backup_interval(settings: AppSettings) -> None:
    """Warn when the backup interval would rotate the whole set within hours."""
    interval = settings.storage.backup_min_interval_seconds
    if interval < _ONE_HOUR:
        log.warning(
            "ROCKY_STORAGE_BACKUP_MIN_INTERVAL_SECONDS=%s is under an hour; "
            "only the last %d saves will be recoverable from backups.",
            interval,
            settings.storage.backup_keep,
        )
