# src/taskctl/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..cli.prompts import Reader, Writer
from ..cli.render import LOGO, clear_screen
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = ">>> taskctl: "


def _pause(state: AppState, read: Reader) -> None:
    if not state.clear_screen:
        return
    read("\nPress Enter to continue...")
    clear_screen()


def _banner(state: AppState, write: Writer) -> None:
    if state.clear_screen:
        clear_screen()
    if state.show_logo:
        write(LOGO)


def run_console_loop(state: AppState, read: Reader = input, write: Writer = print) -> None:
    """
    Interactive loop: read a command, run it, print the reply.

    Operation errors are reported and the loop goes on; only `exit`,
    EOF or Ctrl+C end the session.
    """
    logger.info("Console started (file=%s).", state.task_store.path)
    _banner(state, write)
    write(command_registry.build_help())

    while state.running:
        try:
            line = read(f"\n{PROMPT}")
        except (EOFError, KeyboardInterrupt):
            write("")
            logger.info("Console input closed.")
            break

        try:
            reply = command_registry.handle(state, line, read=read, emit=write)
        except (EOFError, KeyboardInterrupt):
            write("\nCancelled.")
            continue

        if reply is None:
            continue
        write(reply)

        if state.running:
            try:
                _pause(state, read)
            except (EOFError, KeyboardInterrupt):
                break
            if state.clear_screen:
                _banner(state, write)

    logger.info("Console stopped.")
