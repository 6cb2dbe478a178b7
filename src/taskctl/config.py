# src/taskctl/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default, so a bare `taskctl` run works out of the box.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKCTL"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local paths ----
    data_dir: Path
    tasks_file: Path

    # ---- Console ----
    color: bool
    clear_screen: bool
    show_logo: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskctl").strip() or "taskctl"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskctl"))
        tasks_file = _env_path(_k("TASKS_FILE"), Path("tasks.json"))

        # NO_COLOR is honoured as a conventional global opt-out.
        color = _env_bool(_k("COLOR"), os.getenv("NO_COLOR") is None)
        clear_screen = _env_bool(_k("CLEAR_SCREEN"), True)
        show_logo = _env_bool(_k("SHOW_LOGO"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_file=tasks_file,
            color=color,
            clear_screen=clear_screen,
            show_logo=show_logo,
        )

    def with_tasks_file(self, path: str | Path) -> "Settings":
        return replace(self, tasks_file=Path(path).expanduser())


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process settings, read once on first use (after loading a local .env)."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
