"""Platform data directory resolution and the resolved storage layout."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rocky_store.core.config import StorageConfig

APP_NAME = "Rocky"
APP_DIR_NAME = "rocky"


def default_data_dir() -> Path:
    """Return the default platform-specific application data directory.

    Linux: $XDG_DATA_HOME/rocky or ~/.local/share/rocky
    macOS: ~/Library/Application Support/Rocky
    Windows: %APPDATA%\\Rocky
    """
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA")
        return (Path(base) if base else Path.home() / "AppData" / "Roaming") / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    xdg = os.environ.get("XDG_DATA_HOME")
    return (Path(xdg) if xdg else Path.home() / ".local" / "share") / APP_DIR_NAME


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


@dataclass(frozen=True)
class StoragePaths:
    """Concrete file locations under one data directory."""

    data_dir: Path
    data_file: Path
    backup_dir: Path
    log_file: Path

    @classmethod
    def from_config(cls, config: StorageConfig) -> StoragePaths:
        data_dir = config.data_dir.expanduser()
        return cls(
            data_dir=data_dir,
            data_file=data_dir / config.data_filename,
            backup_dir=data_dir / config.backup_dirname,
            log_file=data_dir / config.log_filename,
        )
