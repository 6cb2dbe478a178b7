# src/taskctl/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base class for every error raised by the task subsystem."""


class TaskIOError(TaskError, OSError):
    """Backing file could not be read or written."""


class TaskDecodeError(TaskError, ValueError):
    """Backing file contents do not match the task schema."""


class TaskIndexError(TaskError, IndexError):
    """Requested position is outside the current task sequence."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        if size == 0:
            msg = f"invalid task index {index}: no tasks found"
        else:
            msg = f"invalid task index {index}: expected 0-{size - 1}"
        super().__init__(msg)


class TaskValidationError(TaskError, ValueError):
    """A priority, due date or name failed validation."""
