"""Shared fixtures for rocky-store tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from rocky_store.core.config import StorageConfig
from rocky_store.persistence.backups import BackupDirectory
from rocky_store.persistence.engine import DocumentStore
from rocky_store.persistence.scheduler import BackupScheduler
from rocky_store.services.data_service import RockyDataService
from tests.fakes.fake_clock import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / "appdata"
    path.mkdir()
    return path


@pytest.fixture
def data_file(data_dir: Path) -> Path:
    return data_dir / "rocky.json"


@pytest.fixture
def backups(data_dir: Path) -> BackupDirectory:
    return BackupDirectory(data_dir / "backups")


@pytest.fixture
def scheduler(backups: BackupDirectory, clock: FakeClock) -> BackupScheduler:
    return BackupScheduler(backups, clock=clock)


@pytest.fixture
def store(data_file: Path, backups: BackupDirectory, scheduler: BackupScheduler) -> DocumentStore:
    return DocumentStore(data_file, backups, scheduler)


@pytest.fixture
def service(data_dir: Path, clock: FakeClock) -> RockyDataService:
    return RockyDataService(StorageConfig(data_dir=data_dir), clock=clock)


@pytest.fixture
def sample_document() -> dict:
    """A small document shaped like real tracker data."""
    return {
        "version": 1,
        "days": [
            {"date": "2024-05-01", "text": "Ran 5k", "color": "green", "completedHabits": ["h_run"]},
            {"date": "2024-05-02", "text": "Rest day · sore", "color": "yellow"},
        ],
        "goals": [{"id": "h_run", "title": "Run daily", "startDate": "2024-05-01"}],
    }
