"""Tests for setup_logging and the debug.log mirror."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from rocky_store.core.config import ObservabilityConfig
from rocky_store.hooks import attach_debug_log, setup_logging
from rocky_store.persistence.debug_log import DebugLog, DebugLogHandler
from tests.fakes.fake_clock import FakeClock


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    package = logging.getLogger("rocky_store")
    saved_root = (list(root.handlers), root.level)
    saved_package = (list(package.handlers), package.level)
    yield
    root.handlers[:] = saved_root[0]
    root.setLevel(saved_root[1])
    package.handlers[:] = saved_package[0]
    package.setLevel(saved_package[1])


class TestSetupLogging:
    def test_sets_levels(self) -> None:
        setup_logging(ObservabilityConfig(log_level="DEBUG"))
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("rocky_store").level == logging.DEBUG

    def test_unknown_level_defaults_to_info(self) -> None:
        setup_logging(ObservabilityConfig(log_level="chatty"))
        assert logging.getLogger("rocky_store").level == logging.INFO

    def test_mirrors_warnings_to_debug_log(self, tmp_path: Path) -> None:
        log_file = tmp_path / "debug.log"
        setup_logging(ObservabilityConfig(), debug_log=DebugLog(log_file, clock=FakeClock()))

        logging.getLogger("rocky_store.persistence.scheduler").warning("Periodic backup skipped")

        assert "Periodic backup skipped" in log_file.read_text(encoding="utf-8")

    def test_does_not_stack_handlers(self, tmp_path: Path) -> None:
        debug_log = DebugLog(tmp_path / "debug.log", clock=FakeClock())
        setup_logging(ObservabilityConfig(), debug_log=debug_log)
        setup_logging(ObservabilityConfig(), debug_log=debug_log)

        handlers = [
            h for h in logging.getLogger("rocky_store").handlers if isinstance(h, DebugLogHandler)
        ]
        assert len(handlers) == 1

    def test_console_keeps_its_own_level(self, tmp_path: Path) -> None:
        setup_logging(
            ObservabilityConfig(log_level="ERROR", debug_log_level="WARNING"),
            debug_log=DebugLog(tmp_path / "debug.log", clock=FakeClock()),
        )

        (console,) = logging.getLogger().handlers
        assert console.level == logging.ERROR


class TestAttachDebugLog:
    def test_lowers_package_level_to_reach_handler(self, tmp_path: Path) -> None:
        logging.getLogger("rocky_store").setLevel(logging.ERROR)
        log_file = tmp_path / "debug.log"

        attach_debug_log(DebugLog(log_file, clock=FakeClock()), "WARNING")
        logging.getLogger("rocky_store.persistence.backups").warning("Could not remove old backup")

        assert "Could not remove old backup" in log_file.read_text(encoding="utf-8")

    def test_info_below_threshold_is_not_written(self, tmp_path: Path) -> None:
        log_file = tmp_path / "debug.log"

        attach_debug_log(DebugLog(log_file, clock=FakeClock()), "WARNING")
        logging.getLogger("rocky_store.persistence.scheduler").info("Backed up")

        assert not log_file.exists()
