# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_manager.core.state import AppState
from todo_manager.tasks.task_codec import FlatFileTaskCodec
from todo_manager.tasks.task_store import TaskStore

from .fakes import FakePersistence


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_file_enabled=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        strict_load=False,
    )


@pytest.fixture()
def persistence() -> FakePersistence:
    return FakePersistence()


@pytest.fixture()
def store(persistence: FakePersistence) -> TaskStore:
    return TaskStore(persistence)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState backed by the real flat-file codec in a tmp dir.

    The codec's on-disk behavior is part of what the console tests check.
    """
    return AppState(
        settings=settings,
        task_store=TaskStore(FlatFileTaskCodec(settings.tasks_path)),
    )
