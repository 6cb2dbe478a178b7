# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskctl.core.state import AppState
from taskctl.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskctl",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        tasks_file=tmp_path / "tasks.json",
        color=False,
        clear_screen=False,
        show_logo=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_file)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState with a real JSON store under tmp_path and no colors/screen control."""
    return AppState(
        settings=settings,
        task_store=store,
        color=False,
        clear_screen=False,
        show_logo=False,
    )


@pytest.fixture()
def output() -> list[str]:
    return []
