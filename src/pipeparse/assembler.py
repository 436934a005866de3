"""Fold a classified argument list into a :class:`Subcommand` record."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .exceptions import EmptyCommandError, MalformedRedirectError
from .tokens import Argument, TokenKind, tokenize

log = logging.getLogger(__name__)

# Marks the end of an exec argument vector.
END_OF_ARGS = None


class RedirectMode(str, Enum):
    APPEND = "append"
    TRUNCATE = "truncate"
    NONE = "none"


_OUTPUT_MODES = {
    TokenKind.REDIRECT_OUTPUT_APPEND: RedirectMode.APPEND,
    TokenKind.REDIRECT_OUTPUT_TRUNCATE: RedirectMode.TRUNCATE,
}


@dataclass(frozen=True)
class Subcommand:
    exec_args: Tuple[Optional[str], ...]
    input: Optional[str] = None
    output: Optional[str] = None
    mode: RedirectMode = RedirectMode.NONE

    @property
    def argv(self) -> List[str]:
        return [arg for arg in self.exec_args if arg is not END_OF_ARGS]


def assemble(arguments: List[Argument]) -> Subcommand:
    """Build a subcommand from ``arguments`` and empty the list.

    The last input redirect wins, as does the last output redirect; an output
    target always carries the mode of the operator that named it. Every
    redirect must be immediately followed by exactly one ``FILENAME`` node.

    Raises:
        MalformedRedirectError: a redirect is not followed by its filename, or
            a filename has no redirect before it.
        EmptyCommandError: no ``NORMAL`` words were present.
    """
    try:
        args: List[Optional[str]] = []
        stdin: Optional[str] = None
        output: Tuple[Optional[str], RedirectMode] = (None, RedirectMode.NONE)
        pending: Optional[TokenKind] = None

        for arg in arguments:
            if pending is not None:
                if arg.kind is not TokenKind.FILENAME:
                    raise MalformedRedirectError(
                        f"expected filename after '{pending.value}', got '{arg.contents}'"
                    )
                if pending is TokenKind.REDIRECT_INPUT:
                    stdin = arg.contents
                else:
                    output = (arg.contents, _OUTPUT_MODES[pending])
                pending = None
            elif arg.kind.is_redirect:
                pending = arg.kind
            elif arg.kind is TokenKind.FILENAME:
                raise MalformedRedirectError(f"filename '{arg.contents}' has no redirect operator")
            else:
                args.append(arg.contents)

        if pending is not None:
            raise MalformedRedirectError(f"missing filename after '{pending.value}'")

        if not args:
            raise EmptyCommandError("no command to execute")
        args.append(END_OF_ARGS)
    finally:
        arguments.clear()

    sub = Subcommand(exec_args=tuple(args), input=stdin, output=output[0], mode=output[1])
    log.debug("Assembled %s", sub)
    return sub


def parse_subcommand(segment: str) -> Subcommand:
    return assemble(tokenize(segment))


__all__ = ["END_OF_ARGS", "RedirectMode", "Subcommand", "assemble", "parse_subcommand"]
