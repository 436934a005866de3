"""Logging for the ``pipeparse`` CLI.

Everything at ``level`` goes to a rotating ``pipeparse.log``; the console only
gets records at ``console_level`` and above, so syntax errors that the CLI
already reports are not echoed a second time.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FILENAME = "pipeparse.log"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str, default: int) -> int:
    value = getattr(logging, str(name).upper(), None)
    return value if isinstance(value, int) else default


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    console_level: str = "WARNING",
) -> Path:
    """Configure the root logger and return the log file path."""
    logs_dir = log_dir or Path.cwd() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / LOG_FILENAME

    file_level = _level(level, logging.INFO)
    stream_level = _level(console_level, logging.WARNING)

    file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))

    console = logging.StreamHandler()
    console.setLevel(stream_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    # Repeated CLI runs in one process must not stack handlers.
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(file_handler)
    root.addHandler(console)
    root.setLevel(min(file_level, stream_level))
    return log_file
