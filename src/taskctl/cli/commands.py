# src/taskctl/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.errors import TaskIndexError, TaskIOError, TaskValidationError
from ..tasks.task_views import SortMode, sort_indexed
from .prompts import Reader, Writer, prompt_due_date, prompt_index, prompt_name, prompt_priority
from .render import NO_TASKS, render_table

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler4 = Callable[[AppState, list[str], Reader | None, Writer | None], str]
CommandHandler = CommandHandler2 | CommandHandler4

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Command registry used by the console loop (add, list, toggle, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        read: Reader | None = None,
        emit: Writer | None = None,
    ) -> str | None:
        """
        Handle a line like "toggle 2" (a leading "/" is accepted too).
        Returns a reply string or None for a blank line.
        """
        text = line.strip()
        if text.startswith("/"):
            text = text[1:]

        parts = text.split()
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: {name}. Use help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 4

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, read, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name:<7} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _resolve_index(
    state: AppState, args: list[str], read: Reader | None, emit: Writer | None
) -> int | str:
    """Index from args, or prompted. A str result is the reply to return."""
    size = len(state.task_store)
    if args:
        try:
            return int(args[0])
        except ValueError:
            return "Invalid task index."
    if read is None:
        return "Usage: provide a task index."
    index = prompt_index(size, read, emit or print)
    if index is None:
        return NO_TASKS
    return index


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(
    state: AppState,
    args: list[str],
    read: Reader | None = None,
    emit: Writer | None = None,
) -> str:
    """
    add              -> prompt for name, priority and due date
    add Buy milk     -> name from args, prompt for the rest
    """
    if read is None:
        return "Usage: add needs an interactive console."
    write = emit or print

    name = " ".join(args).strip() or prompt_name(read, write)
    priority = prompt_priority(read, write)
    due_date = prompt_due_date(read, write)

    try:
        state.task_store.create(name, priority, due_date)
    except TaskValidationError as e:
        return f"Task not added: {e}"
    except TaskIOError as e:
        logger.error("Save failed after add: %s", e)
        return f"Task added, but saving failed: {e}"
    return "Task added!"


def cmd_show(
    state: AppState,
    args: list[str],
    read: Reader | None = None,
    emit: Writer | None = None,
) -> str:
    index = _resolve_index(state, args, read, emit)
    if isinstance(index, str):
        return index
    try:
        task = state.task_store.get(index)
    except TaskIndexError:
        return "Invalid task index."
    return render_table([(index, task)], color=state.color)


def cmd_toggle(
    state: AppState,
    args: list[str],
    read: Reader | None = None,
    emit: Writer | None = None,
) -> str:
    index = _resolve_index(state, args, read, emit)
    if isinstance(index, str):
        return index
    try:
        state.task_store.toggle_done(index)
    except TaskIndexError:
        return "Invalid task index."
    except TaskIOError as e:
        logger.error("Save failed after toggle: %s", e)
        return f"Task updated, but saving failed: {e}"
    return "Task updated!"


def cmd_delete(
    state: AppState,
    args: list[str],
    read: Reader | None = None,
    emit: Writer | None = None,
) -> str:
    index = _resolve_index(state, args, read, emit)
    if isinstance(index, str):
        return index
    try:
        state.task_store.delete(index)
    except TaskIndexError:
        return "Invalid task index."
    except TaskIOError as e:
        logger.error("Save failed after delete: %s", e)
        return f"Task deleted, but saving failed: {e}"
    return "Task deleted!"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    list            -> insertion order
    list priority   -> high first
    list status     -> not done first
    list due        -> earliest due date first, undated last
    """
    try:
        mode = SortMode.parse(args[0] if args else "")
    except ValueError:
        modes = " | ".join(m.value for m in SortMode)
        return f"Unknown view. Usage: list [{modes}]"
    rows = sort_indexed(state.task_store.tasks, mode)
    return render_table(rows, color=state.color)


def cmd_clear(state: AppState, args: list[str]) -> str:
    try:
        state.task_store.clear()
    except TaskIOError as e:
        logger.error("Save failed after clear: %s", e)
        return f"Tasks cleared, but saving failed: {e}"
    return "Tasks cleared!"


def cmd_exit(state: AppState, args: list[str]) -> str:
    state.running = False
    app_name = str(getattr(state.settings, "app_name", "taskctl"))
    return f"Exiting... Thanks for using {app_name}!"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Create a task: add [name].", aliases=["new", "create"]
)
registry.register("show", cmd_show, help_text="Show one task: show [index].", aliases=["read"])
registry.register(
    "toggle",
    cmd_toggle,
    help_text="Flip done/not done: toggle [index].",
    aliases=["update", "done"],
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task: delete [index].", aliases=["del", "rm"]
)
registry.register(
    "list",
    cmd_list,
    help_text="View tasks: list [all | priority | status | due].",
    aliases=["ls", "view"],
)
registry.register("clear", cmd_clear, help_text="Delete all tasks.")
registry.register("exit", cmd_exit, help_text="Quit.", aliases=["quit", "q"])
