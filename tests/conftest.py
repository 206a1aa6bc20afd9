# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest

from taskcsv import configuration
from taskcsv.repository.task_file import TaskFileRepository
from taskcsv.service.store import TaskStore


@pytest.fixture(autouse=True)
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from the real user config directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    return config_dir / "config.yaml"


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.csv"


@pytest.fixture()
def repository(tasks_path: Path) -> TaskFileRepository:
    return TaskFileRepository(tasks_path)


@pytest.fixture()
def store(repository: TaskFileRepository) -> TaskStore:
    return TaskStore.load(repository)
