# src/taskctl/cli/render.py

"""Plain-text rendering for the console: banner, task tables, screen control."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from ..tasks.task_models import Task

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"

LOGO = r"""
 _            _        _   _
| |_ __ _ ___| | _____| |_| |
| __/ _` / __| |/ / __| __| |
| || (_| \__ \   < (__| |_| |
 \__\__,_|___/_|\_\___|\__|_|
   A simple CLI Task Management Tool (taskctl)
"""

HEADER = f"{'ID':<4} | {'Name':<20} | {'Status':<8} | {'Priority':<8} | {'Due Date':<10}"
RULE = "-----+----------------------+----------+----------+------------"
NO_TASKS = "No tasks found."


def _status_cell(task: Task, color: bool) -> str:
    status = "Done" if task.done else "Not Done"
    cell = f"{status:<8}"
    if not color:
        return cell
    return f"{GREEN if task.done else RED}{cell}{RESET}"


def format_row(index: int, task: Task, *, color: bool = True) -> str:
    due = task.due_date or "(none)"
    return (
        f"{index:<4} | {task.name:<20} | {_status_cell(task, color)} | "
        f"{task.priority.value.title():<8} | {due:<10}"
    )


def render_table(rows: Iterable[tuple[int, Task]], *, color: bool = True) -> str:
    """
    Render (position, task) pairs as a fixed-width table.

    Positions are printed as given, so sorted views still show the index to use
    for show/toggle/delete.
    """
    body = [format_row(i, t, color=color) for i, t in rows]
    if not body:
        return NO_TASKS
    return "\n".join(["", HEADER, RULE, *body])


def clear_screen() -> None:
    if not sys.stdout.isatty():
        return
    sys.stdout.write("\033[H\033[2J")
    sys.stdout.flush()
