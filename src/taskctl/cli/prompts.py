# src/taskctl/cli/prompts.py

"""
Re-prompting input loops.

Each helper keeps asking until the answer passes validation, so the store only
ever receives values it accepts. `read` and `write` are injectable for tests.
"""

from __future__ import annotations

from collections.abc import Callable

from ..tasks.task_models import Priority, is_valid_date, is_valid_priority

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def prompt_name(read: Reader = input, write: Writer = print) -> str:
    while True:
        name = read("Enter the task name: ").strip()
        if name:
            return name
        write("Task name cannot be empty. Please try again.")


def prompt_priority(read: Reader = input, write: Writer = print) -> Priority:
    while True:
        raw = read("Enter the task priority (low, medium, high): ")
        if is_valid_priority(raw):
            return Priority.parse(raw)
        write("Invalid priority. Please try again.")


def prompt_due_date(read: Reader = input, write: Writer = print) -> str:
    while True:
        raw = read("Enter the task due date (YYYY-MM-DD), or press Enter to skip: ").strip()
        if raw == "":
            return ""
        if is_valid_date(raw):
            return raw
        write("Invalid date format. Please try again.")


def prompt_index(size: int, read: Reader = input, write: Writer = print) -> int | None:
    """Ask for a position in [0, size). Returns None when there are no tasks."""
    if size <= 0:
        write("No tasks found.")
        return None
    while True:
        raw = read(f"Enter the task index (0-{size - 1}): ").strip()
        try:
            index = int(raw)
        except ValueError:
            index = -1
        if 0 <= index < size:
            return index
        write("Invalid task index. Please try again.")
