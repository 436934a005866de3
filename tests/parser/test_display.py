from __future__ import annotations

import pytest

from pipeparse.assembler import parse_subcommand
from pipeparse.display import (
    display_result,
    print_num_subcommands,
    render_arguments,
    render_subcommand,
    render_subcommands,
)
from pipeparse.pipeline import parse_commandline
from pipeparse.splitter import split_commandline
from pipeparse.tokens import tokenize


def test_render_subcommands_in_order() -> None:
    text = render_subcommands(split_commandline("ls|wc -l"))
    assert text.splitlines() == ["Subcommand 1: 'ls'", "Subcommand 2: 'wc -l'"]


def test_render_arguments_does_not_consume_list() -> None:
    arguments = tokenize("cat > out")
    text = render_arguments(arguments)
    assert text.splitlines() == ["NORMAL 'cat'", "REDIRECT_OUTPUT_TRUNCATE '>'", "FILENAME 'out'"]
    assert len(arguments) == 3


def test_render_subcommand() -> None:
    text = render_subcommand(parse_subcommand("cat >> log.txt"), 1)
    assert "Subcommand 1:" in text
    assert "argv:   ['cat']" in text
    assert "input:  <stdin>" in text
    assert "output: log.txt" in text
    assert "mode:   append" in text


def test_print_helpers_write_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    print_num_subcommands(3)
    display_result(parse_commandline("a | | b"))
    captured = capsys.readouterr()
    assert "Number of subcommands: 3" in captured.out
    assert "Subcommand 3:" in captured.out
    assert "error: segment 2: no command to execute" in captured.err
