# src/taskctl/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskctl.log"

# The console shares the screen with the menu, so its lines stay short.
CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _OwnRecordsFilter(logging.Filter):
    """
    Console filter: records from our own package pass at the handler level,
    everything else (libraries, captured py.warnings) only at `foreign_level`.
    """

    def __init__(self, package: str = "taskctl", foreign_level: int = logging.ERROR) -> None:
        super().__init__()
        self.package = package
        self.foreign_level = foreign_level

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == self.package or name.startswith(self.package + "."):
            return True
        return record.levelno >= self.foreign_level


def _drop_root_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        root.removeHandler(h)


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskctl",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging for an interactive session.

    - stderr: short lines, WARNING+ by default, library noise filtered out
    - <log_dir>/taskctl.log: every record, appended across runs

    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    _drop_root_handlers(root)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console.addFilter(_OwnRecordsFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    logging.getLogger(__name__).debug(
        "Logging ready file=%s console_level=%s",
        log_file,
        logging.getLevelName(console_level),
    )
    return log_file
