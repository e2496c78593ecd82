"""Tests for atomic_write_text: temp-then-rename and the rename fallback."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from rocky_store.exceptions import PersistenceError
from rocky_store.persistence import atomic
from rocky_store.persistence.atomic import atomic_write_text, temp_path_for


class TestTempPath:
    def test_sibling_with_tmp_suffix(self, tmp_path: Path) -> None:
        assert temp_path_for(tmp_path / "rocky.json") == tmp_path / "rocky.json.tmp"


class TestAtomicWrite:
    def test_creates_file(self, tmp_path: Path) -> None:
        target = tmp_path / "rocky.json"
        atomic_write_text(target, '{"version": 1}')

        assert target.read_text(encoding="utf-8") == '{"version": 1}'
        assert not temp_path_for(target).exists()

    def test_replaces_existing(self, tmp_path: Path) -> None:
        target = tmp_path / "rocky.json"
        target.write_text("old")
        atomic_write_text(target, "new")

        assert target.read_text() == "new"

    def test_writes_utf8(self, tmp_path: Path) -> None:
        target = tmp_path / "rocky.json"
        atomic_write_text(target, "café ✓")
        assert target.read_bytes() == "café ✓".encode("utf-8")


class TestRenameFallback:
    def test_removes_target_and_retries(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "rocky.json"
        target.write_text("old")
        real_replace = os.replace
        calls = []

        def replace_fails_while_target_exists(src: Path, dst: Path) -> None:
            calls.append((src, dst))
            if Path(dst).exists():
                raise PermissionError("target exists")
            real_replace(src, dst)

        monkeypatch.setattr(atomic.os, "replace", replace_fails_while_target_exists)

        atomic_write_text(target, "new")

        assert len(calls) == 2
        assert target.read_text() == "new"
        assert not temp_path_for(target).exists()

    def test_second_failure_raises(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "rocky.json"
        target.write_text("old")

        def always_fails(src: Path, dst: Path) -> None:
            raise PermissionError("read-only volume")

        monkeypatch.setattr(atomic.os, "replace", always_fails)

        with pytest.raises(PersistenceError, match="read-only volume"):
            atomic_write_text(target, "new")

        # New content survives in the temp file for manual recovery
        assert temp_path_for(target).read_text() == "new"


class TestWriteFailure:
    def test_fsync_failure_leaves_target_untouched(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = tmp_path / "rocky.json"
        target.write_text("old")

        def broken_fsync(fd: int) -> None:
            raise OSError("I/O error")

        monkeypatch.setattr(atomic.os, "fsync", broken_fsync)

        with pytest.raises(PersistenceError, match="I/O error"):
            atomic_write_text(target, "new")

        assert target.read_text() == "old"
        assert not temp_path_for(target).exists()

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(PersistenceError):
            atomic_write_text(tmp_path / "gone" / "rocky.json", "{}")
