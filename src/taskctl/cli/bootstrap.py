# src/taskctl/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task store into AppState,
- performs the tolerant startup load of the task file.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.errors import TaskDecodeError, TaskIOError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_file.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_file),
        color=bool(getattr(settings, "color", True)),
        clear_screen=bool(getattr(settings, "clear_screen", True)),
        show_logo=bool(getattr(settings, "show_logo", True)),
    )


def _backup_corrupt_file(path: Path) -> Path | None:
    backup = path.with_name(path.name + ".corrupt")
    try:
        shutil.copy2(path, backup)
    except OSError:
        logger.exception("Failed to back up unreadable task file %s", path)
        return None
    return backup


def load_tasks_for_session(state: AppState) -> str | None:
    """
    Load the task file into the store.

    Failures do not stop the session: the store keeps its (empty) content and
    a warning is returned for the console to show. A file that does not decode
    is copied to "<file>.corrupt" first, since the next save overwrites it.
    """
    store = state.task_store
    try:
        store.load()
    except TaskDecodeError as e:
        logger.warning("Task file %s is corrupt: %s", store.path, e)
        backup = _backup_corrupt_file(store.path)
        kept = f" A copy was saved to {backup}." if backup else ""
        return (
            f"WARNING: could not decode {store.path} ({e}). "
            f"Starting with an empty task list.{kept}"
        )
    except TaskIOError as e:
        logger.warning("Task file %s is unreadable: %s", store.path, e)
        return f"WARNING: could not read {store.path} ({e}). Starting with an empty task list."
    return None
