# src/taskctl/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the task file, then runs the
console loop in the main thread.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from .. import __version__
from ..cli.bootstrap import create_initial_state, load_tasks_for_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="taskctl", description="A simple CLI task manager.")
    parser.add_argument("--file", "-f", help="Task file to use for this run.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)

    settings = get_settings()
    if args.file:
        settings = settings.with_tasks_file(args.file)

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (tasks file=%s)...", settings.app_name, settings.tasks_file)

    state = create_initial_state(settings=settings)
    warning = load_tasks_for_session(state)
    if warning:
        print(warning)

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
