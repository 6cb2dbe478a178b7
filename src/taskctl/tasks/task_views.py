# src/taskctl/tasks/task_views.py

"""
Display orderings for the task list.

All helpers are pure: they return a new list and never touch the input
sequence or the store. Python's sort is stable, so records with equal keys
keep their insertion order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date
from enum import StrEnum
from typing import Any

from .task_models import Priority, Task, parse_due_date

PRIORITY_WEIGHT: dict[Priority, int] = {
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}

STATUS_WEIGHT: dict[bool, int] = {False: 1, True: 2}


class SortMode(StrEnum):
    ALL = "all"
    PRIORITY = "priority"
    STATUS = "status"
    DUE = "due"

    @classmethod
    def parse(cls, raw: str | None) -> SortMode:
        value = (raw or "").strip().lower()
        if value in ("", "insertion", "none"):
            return cls.ALL
        if value in ("due_date", "duedate", "date"):
            return cls.DUE
        return cls(value)


def _priority_key(task: Task) -> int:
    return PRIORITY_WEIGHT[task.priority]


def _status_key(task: Task) -> int:
    return STATUS_WEIGHT[task.done]


def _due_key(task: Task) -> tuple[int, date]:
    # Missing or unparsable dates form a trailing block.
    parsed = parse_due_date(task.due_date)
    if parsed is None:
        return (1, date.min)
    return (0, parsed)


_KEYS: dict[SortMode, Callable[[Task], Any] | None] = {
    SortMode.ALL: None,
    SortMode.PRIORITY: _priority_key,
    SortMode.STATUS: _status_key,
    SortMode.DUE: _due_key,
}


def sort_indexed(tasks: Sequence[Task], mode: SortMode | str) -> list[tuple[int, Task]]:
    """
    Order tasks for display, keeping each record's store position.

    The returned positions are the ones to pass back to get/toggle/delete.
    """
    mode = SortMode.parse(mode) if not isinstance(mode, SortMode) else mode
    pairs = list(enumerate(tasks))
    key = _KEYS[mode]
    if key is None:
        return pairs
    return sorted(pairs, key=lambda pair: key(pair[1]))


def sort_tasks(tasks: Sequence[Task], mode: SortMode | str) -> list[Task]:
    return [task for _, task in sort_indexed(tasks, mode)]


def by_insertion_order(tasks: Sequence[Task]) -> list[Task]:
    return list(tasks)


def by_priority(tasks: Sequence[Task]) -> list[Task]:
    return sorted(tasks, key=_priority_key)


def by_status(tasks: Sequence[Task]) -> list[Task]:
    return sorted(tasks, key=_status_key)


def by_due_date(tasks: Sequence[Task]) -> list[Task]:
    return sorted(tasks, key=_due_key)
