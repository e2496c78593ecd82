"""Crash-safe file replacement.

Uses the write-to-temp-then-rename pattern:

1. Write the full content to a sibling ``<name>.tmp`` file
2. Flush and fsync it
3. Rename it over the target

Readers only ever open the target path, so they see either the old or the new
content, never a partial write.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rocky_store.exceptions import PersistenceError

log = logging.getLogger(__name__)


def temp_path_for(path: Path) -> Path:
    """Sibling temp file used while replacing ``path`` (``rocky.json.tmp``)."""
    return path.with_name(path.name + ".tmp")


def atomic_write_text(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` (UTF-8) atomically.

    If the rename onto an existing target fails, the target is removed and
    the rename retried once.

    Raises:
        PersistenceError: the temp file could not be written, or both rename
            attempts failed. In the first case the temp file is removed and the
            target is untouched.
    """
    tmp = temp_path_for(path)
    try:
        with tmp.open("w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            log.debug("Could not clean up temp file %s", tmp)
        raise PersistenceError(f"Failed to write {tmp}: {e}") from e

    try:
        os.replace(tmp, path)
        return
    except OSError as first:
        log.debug("Rename %s -> %s failed (%s); removing target and retrying", tmp, path, first)

    try:
        path.unlink(missing_ok=True)
        os.replace(tmp, path)
    except OSError as e:
        raise PersistenceError(f"Failed to replace {path}: {e}") from e
