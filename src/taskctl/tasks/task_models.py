# src/taskctl/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Any

from .errors import TaskDecodeError, TaskValidationError

DUE_DATE_FORMAT = "%Y-%m-%d"

# Persisted JSON keys, in the order they are written.
FIELD_ORDER: tuple[str, ...] = ("name", "done", "priority", "dueDate")


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: str | None) -> Priority:
        """Strict conversion from user or file input (case-insensitive)."""
        value = (raw or "").strip().lower()
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise TaskValidationError(
                f"invalid priority {raw!r}: expected one of {choices}"
            ) from None


def is_valid_priority(value: str | None) -> bool:
    try:
        Priority.parse(value)
    except TaskValidationError:
        return False
    return True


def parse_due_date(value: str | None) -> date | None:
    """
    Parse a YYYY-MM-DD string.

    Returns None for an empty value or anything that is not a real calendar
    date in that exact zero-padded form.
    """
    if not value:
        return None
    text = value.strip()
    # strptime accepts "2025-1-5"; stored dates are always zero padded.
    if len(text) != 10:
        return None
    try:
        return datetime.strptime(text, DUE_DATE_FORMAT).date()
    except ValueError:
        return None


def is_valid_date(value: str | None) -> bool:
    return parse_due_date(value) is not None


def normalize_priority(value: str | None) -> Priority:
    return Priority.parse(value)


def normalize_due_date(value: str | None) -> str:
    """Return a stripped due date, "" meaning no due date."""
    text = (value or "").strip()
    if text == "":
        return ""
    if not is_valid_date(text):
        raise TaskValidationError(f"invalid due date {value!r}: expected YYYY-MM-DD")
    return text


@dataclass(slots=True)
class Task:
    name: str
    priority: Priority
    done: bool = False
    due_date: str = ""

    @property
    def due(self) -> date | None:
        return parse_due_date(self.due_date)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "done": self.done,
            "priority": self.priority.value,
            "dueDate": self.due_date,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Rebuild a record from its JSON object.

        Raises TaskDecodeError when a field is missing or does not hold a value
        the store could have written.
        """
        if not isinstance(raw, dict):
            raise TaskDecodeError(f"task entry must be an object, got {type(raw).__name__}")

        missing = [k for k in FIELD_ORDER if k not in raw]
        if missing:
            raise TaskDecodeError(f"task entry missing field(s): {', '.join(missing)}")

        name = raw["name"]
        done = raw["done"]
        priority = raw["priority"]
        due_date = raw["dueDate"]

        if not isinstance(name, str):
            raise TaskDecodeError("task field 'name' must be a string")
        if not isinstance(done, bool):
            raise TaskDecodeError("task field 'done' must be a boolean")
        if not isinstance(priority, str):
            raise TaskDecodeError("task field 'priority' must be a string")
        if not isinstance(due_date, str):
            raise TaskDecodeError("task field 'dueDate' must be a string")

        try:
            return cls(
                name=name,
                priority=normalize_priority(priority),
                done=done,
                due_date=normalize_due_date(due_date),
            )
        except TaskValidationError as e:
            raise TaskDecodeError(str(e)) from e
