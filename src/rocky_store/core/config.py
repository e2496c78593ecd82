"""Nested pydantic-settings configuration for the application.

Each sub-model reads its own ``ROCKY_<GROUP>_*`` env vars, so
``AppSettings().storage.data_dir`` can be set with::

    export ROCKY_STORAGE_DATA_DIR=~/rocky-data
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from rocky_store.core.paths import default_data_dir

# Just under a day so daily use reliably produces one backup per calendar day
DEFAULT_BACKUP_MIN_INTERVAL_SECONDS = 24 * 60 * 60 - 30 * 60
DEFAULT_BACKUP_KEEP = 7


class StorageConfig(BaseSettings):
    """Where the data file, backups and debug log live.

    Env vars use ``ROCKY_STORAGE_`` prefix::

        export ROCKY_STORAGE_DATA_DIR=/tmp/rocky
        export ROCKY_STORAGE_BACKUP_KEEP=14
    """

    model_config = {"env_prefix": "ROCKY_STORAGE_"}

    data_dir: Path = Field(default_factory=default_data_dir)
    data_filename: str = "rocky.json"
    backup_dirname: str = "backups"
    log_filename: str = "debug.log"
    backup_keep: int = Field(default=DEFAULT_BACKUP_KEEP, ge=1)
    backup_min_interval_seconds: float = Field(default=DEFAULT_BACKUP_MIN_INTERVAL_SECONDS, gt=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``ROCKY_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "ROCKY_OBSERVABILITY_"}

    log_level: str = "INFO"
    # Records at or above this level are also appended to debug.log
    debug_log_level: str = "WARNING"


class APIConfig(BaseSettings):
    """Local data API configuration.

    Env vars use ``ROCKY_API_`` prefix::

        export ROCKY_API_PORT=9000
    """

    model_config = {"env_prefix": "ROCKY_API_"}

    title: str = "rocky-store"
    description: str = "Local data API for the Rocky tracker"
    host: str = "127.0.0.1"
    port: int = 8787
    cors_origins: list[str] = ["*"]


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    api: APIConfig = Field(default_factory=APIConfig)
