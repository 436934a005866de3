from __future__ import annotations

import pytest

from pipeparse.assembler import END_OF_ARGS, RedirectMode, assemble, parse_subcommand
from pipeparse.exceptions import EmptyCommandError, MalformedRedirectError
from pipeparse.tokens import Argument, TokenKind, tokenize


def test_plain_command() -> None:
    sub = parse_subcommand("ls -l")
    assert sub.argv == ["ls", "-l"]
    assert sub.exec_args == ("ls", "-l", END_OF_ARGS)
    assert sub.input is None
    assert sub.output is None
    assert sub.mode is RedirectMode.NONE


def test_input_and_truncate_output() -> None:
    sub = parse_subcommand("sort < in.txt > out.txt")
    assert sub.argv == ["sort"]
    assert sub.input == "in.txt"
    assert sub.output == "out.txt"
    assert sub.mode is RedirectMode.TRUNCATE


def test_append_output() -> None:
    sub = parse_subcommand("cat >> log.txt")
    assert sub.argv == ["cat"]
    assert sub.output == "log.txt"
    assert sub.mode is RedirectMode.APPEND
    assert sub.mode.value == "append"


def test_redirects_are_excluded_from_argv_wherever_they_appear() -> None:
    sub = parse_subcommand("> out.txt grep < in.txt -v foo")
    assert sub.argv == ["grep", "-v", "foo"]
    assert sub.input == "in.txt"
    assert sub.output == "out.txt"


@pytest.mark.parametrize(
    "segment, target, mode",
    [
        ("echo > a", "a", RedirectMode.TRUNCATE),
        ("echo > a >> b", "b", RedirectMode.APPEND),
        ("echo >> a > b", "b", RedirectMode.TRUNCATE),
        ("echo >> a > b >> c", "c", RedirectMode.APPEND),
    ],
)
def test_last_output_redirect_wins(segment: str, target: str, mode: RedirectMode) -> None:
    sub = parse_subcommand(segment)
    assert (sub.output, sub.mode) == (target, mode)


def test_last_input_redirect_wins() -> None:
    sub = parse_subcommand("wc < first < second")
    assert sub.input == "second"


def test_only_redirects_is_empty_command() -> None:
    with pytest.raises(EmptyCommandError):
        parse_subcommand("< in.txt > out.txt")


def test_blank_segment_is_empty_command() -> None:
    with pytest.raises(EmptyCommandError):
        parse_subcommand("   ")


def test_dangling_redirect_produces_no_subcommand() -> None:
    with pytest.raises(MalformedRedirectError):
        parse_subcommand("grep <")


def test_argument_list_is_released_after_assembly() -> None:
    arguments = tokenize("sort < in.txt")
    assemble(arguments)
    assert arguments == []


def test_argument_list_is_released_on_error() -> None:
    arguments = tokenize("> out.txt")
    with pytest.raises(EmptyCommandError):
        assemble(arguments)
    assert arguments == []


CAT = Argument("cat", TokenKind.NORMAL)
TRUNCATE = Argument(">", TokenKind.REDIRECT_OUTPUT_TRUNCATE)


def test_trailing_redirect_in_hand_built_list_raises() -> None:
    arguments = [CAT, TRUNCATE]
    with pytest.raises(MalformedRedirectError, match="missing filename after '>'"):
        assemble(arguments)
    assert arguments == []


def test_redirect_followed_by_normal_word_raises() -> None:
    with pytest.raises(MalformedRedirectError, match="expected filename"):
        assemble([CAT, TRUNCATE, Argument("out", TokenKind.NORMAL)])


def test_redirect_followed_by_redirect_raises() -> None:
    with pytest.raises(MalformedRedirectError):
        assemble([CAT, TRUNCATE, Argument("<", TokenKind.REDIRECT_INPUT), Argument("x", TokenKind.FILENAME)])


def test_filename_without_redirect_raises() -> None:
    with pytest.raises(MalformedRedirectError, match="no redirect operator"):
        assemble([CAT, Argument("out", TokenKind.FILENAME)])


def test_hand_built_list_with_bound_filename() -> None:
    sub = assemble([CAT, Argument(">>", TokenKind.REDIRECT_OUTPUT_APPEND), Argument("log", TokenKind.FILENAME)])
    assert sub.argv == ["cat"]
    assert (sub.output, sub.mode) == ("log", RedirectMode.APPEND)
