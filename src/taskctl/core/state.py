# src/taskctl/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings live on the state so handlers do not read global config.
    settings: object
    task_store: TaskStore

    color: bool = True
    clear_screen: bool = True
    show_logo: bool = True

    # Set by the exit command; the console loop stops after the current reply.
    running: bool = True
