# src/taskctl/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .errors import TaskDecodeError, TaskIndexError, TaskIOError, TaskValidationError
from .task_models import Priority, Task, normalize_due_date, normalize_priority

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered task list backed by a single JSON file.

    Records have no id: a task is addressed by its current zero-based position,
    which shifts down by one for every record after a deleted one.

    Every mutation rewrites the whole file once. Nothing is batched.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Read-only snapshot of the current sequence."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def is_empty(self) -> bool:
        return not self._tasks

    # ---- persistence ----

    def load(self) -> None:
        """
        Replace in-memory content with the backing file's records.

        A missing file is the first run and leaves the store empty.
        On any failure the current in-memory content is kept as is.
        """
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            logger.info("No task file at %s, starting empty.", self._path)
            return
        except OSError as e:
            raise TaskIOError(f"cannot read task file {self._path}: {e}") from e

        try:
            raw = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TaskDecodeError(f"task file is not valid UTF-8: {e}") from e

        self._tasks = self._decode(raw)
        logger.info("Loaded %d task(s) from %s", len(self._tasks), self._path)

    def save(self) -> None:
        """Write the full sequence to the backing file, replacing it."""
        payload = json.dumps(
            [t.to_dict() for t in self._tasks], ensure_ascii=False, indent=2
        )
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise TaskIOError(f"cannot write task file {self._path}: {e}") from e
        logger.debug("Saved %d task(s) to %s", len(self._tasks), self._path)

    @staticmethod
    def _decode(raw: str) -> list[Task]:
        if raw.strip() == "":
            raise TaskDecodeError("task file is empty")
        try:
            data: Any = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as e:
            raise TaskDecodeError(f"task file is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise TaskDecodeError("task file must hold a JSON array")

        out: list[Task] = []
        for i, item in enumerate(data):
            try:
                out.append(Task.from_dict(item))
            except TaskDecodeError as e:
                raise TaskDecodeError(f"entry {i}: {e}") from e
        return out

    # ---- mutations ----

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def create(self, name: str, priority: str | Priority, due_date: str = "") -> int:
        """
        Append a new, not-done task and persist.

        Returns the new task's position.
        """
        clean_name = (name or "").strip()
        if not clean_name:
            raise TaskValidationError("task name is required")
        task = Task(
            name=clean_name,
            priority=normalize_priority(priority),
            done=False,
            due_date=normalize_due_date(due_date),
        )

        self._tasks.append(task)
        self.save()
        index = len(self._tasks) - 1
        logger.debug(
            "Task created index=%s priority=%s due=%s", index, task.priority, task.due_date or "-"
        )
        return index

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def toggle_done(self, index: int) -> Task:
        self._check_index(index)
        task = self._tasks[index]
        task.done = not task.done
        self.save()
        logger.debug("Task toggled index=%s done=%s", index, task.done)
        return task

    def delete(self, index: int) -> Task:
        self._check_index(index)
        removed = self._tasks.pop(index)
        self.save()
        logger.debug("Task deleted index=%s remaining=%s", index, len(self._tasks))
        return removed

    def clear(self) -> None:
        self._tasks = []
        self.save()
        logger.debug("Tasks cleared")
