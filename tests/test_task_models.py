# tests/test_task_models.py

from __future__ import annotations

from datetime import date

import pytest

from taskctl.tasks.errors import TaskDecodeError, TaskValidationError
from taskctl.tasks.task_models import (
    Priority,
    Task,
    is_valid_date,
    is_valid_priority,
    normalize_due_date,
    parse_due_date,
)


@pytest.mark.parametrize("raw", ["low", "medium", "high", " HIGH ", "Medium"])
def test_valid_priorities_are_accepted(raw: str) -> None:
    assert is_valid_priority(raw)


@pytest.mark.parametrize("raw", ["urgent", "", None, "hi", "low!"])
def test_out_of_enumeration_priority_is_rejected(raw) -> None:
    assert not is_valid_priority(raw)
    with pytest.raises(TaskValidationError):
        Priority.parse(raw)


def test_due_date_parsing() -> None:
    assert parse_due_date("2025-01-10") == date(2025, 1, 10)
    assert parse_due_date("") is None
    assert parse_due_date("2025-02-30") is None
    assert parse_due_date("2025-1-5") is None
    assert parse_due_date("10/01/2025") is None

    assert is_valid_date("2024-02-29")
    assert not is_valid_date("2023-02-29")


def test_normalize_due_date_allows_empty_and_rejects_garbage() -> None:
    assert normalize_due_date("") == ""
    assert normalize_due_date("  2025-06-06 ") == "2025-06-06"
    with pytest.raises(TaskValidationError):
        normalize_due_date("tomorrow")


def test_to_dict_field_order_and_keys() -> None:
    task = Task(name="Write report", priority=Priority.HIGH, due_date="2025-06-06")
    data = task.to_dict()
    assert list(data) == ["name", "done", "priority", "dueDate"]
    assert data == {
        "name": "Write report",
        "done": False,
        "priority": "high",
        "dueDate": "2025-06-06",
    }


def test_from_dict_rebuilds_record() -> None:
    task = Task.from_dict({"name": "a", "done": True, "priority": "low", "dueDate": ""})
    assert task == Task(name="a", priority=Priority.LOW, done=True, due_date="")
    assert task.due is None


@pytest.mark.parametrize(
    "raw",
    [
        ["not", "an", "object"],
        {"name": "a", "done": False, "priority": "low"},
        {"name": "a", "done": "no", "priority": "low", "dueDate": ""},
        {"name": 1, "done": False, "priority": "low", "dueDate": ""},
        {"name": "a", "done": False, "priority": "urgent", "dueDate": ""},
        {"name": "a", "done": False, "priority": "low", "dueDate": "someday"},
    ],
)
def test_from_dict_rejects_schema_violations(raw) -> None:
    with pytest.raises(TaskDecodeError):
        Task.from_dict(raw)
