from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterator

import pytest

from pipeparse.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _handlers() -> tuple[logging.Handler, logging.Handler]:
    root = logging.getLogger()
    file_handler = next(h for h in root.handlers if isinstance(h, RotatingFileHandler))
    console = next(h for h in root.handlers if not isinstance(h, RotatingFileHandler))
    return file_handler, console


def test_console_is_quieter_than_log_file(tmp_path: Path) -> None:
    log_file = setup_logging("DEBUG", tmp_path)
    assert log_file == tmp_path / "pipeparse.log"
    file_handler, console = _handlers()
    assert file_handler.level == logging.DEBUG
    assert console.level == logging.WARNING
    assert logging.getLogger().level == logging.DEBUG


def test_console_level_is_configurable(tmp_path: Path) -> None:
    setup_logging("info", tmp_path, console_level="error")
    file_handler, console = _handlers()
    assert file_handler.level == logging.INFO
    assert console.level == logging.ERROR


def test_unknown_level_names_fall_back(tmp_path: Path) -> None:
    setup_logging("loud", tmp_path, console_level="nope")
    file_handler, console = _handlers()
    assert file_handler.level == logging.INFO
    assert console.level == logging.WARNING


def test_repeated_setup_does_not_stack_handlers(tmp_path: Path) -> None:
    setup_logging("INFO", tmp_path)
    setup_logging("INFO", tmp_path)
    assert len(logging.getLogger().handlers) == 2
