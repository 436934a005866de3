"""Tokenizer and classifier for a single pipeline segment.

Words are split on runs of whitespace only. Each word is tagged with a
:class:`TokenKind`; the word following a redirect operator is tagged as the
operator's filename. Binding is tracked by a two-state machine
(:class:`Scanning` and :class:`ExpectingFilename`) so a dangling operator shows
up as input ending in the wrong state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Union

from .exceptions import MalformedRedirectError

log = logging.getLogger(__name__)


class TokenKind(Enum):
    REDIRECT_INPUT = "<"
    REDIRECT_OUTPUT_APPEND = ">>"
    REDIRECT_OUTPUT_TRUNCATE = ">"
    NORMAL = "normal"
    FILENAME = "filename"

    @property
    def is_redirect(self) -> bool:
        return self in _REDIRECT_KINDS


_REDIRECT_KINDS = frozenset(
    {
        TokenKind.REDIRECT_INPUT,
        TokenKind.REDIRECT_OUTPUT_APPEND,
        TokenKind.REDIRECT_OUTPUT_TRUNCATE,
    }
)

OPERATORS = {kind.value: kind for kind in _REDIRECT_KINDS}


@dataclass(frozen=True)
class Argument:
    contents: str
    kind: TokenKind


@dataclass(frozen=True)
class Scanning:
    pass


@dataclass(frozen=True)
class ExpectingFilename:
    operator: TokenKind


State = Union[Scanning, ExpectingFilename]


def iter_words(segment: str) -> Iterator[str]:
    """Yield words split on runs of whitespace; no quoting or escapes."""
    return iter(segment.split())


def tokenize(segment: str) -> List[Argument]:
    """Classify every word of ``segment`` into an ordered argument list.

    Raises:
        MalformedRedirectError: an operator is the last word, or is directly
            followed by another operator.
    """
    arguments: List[Argument] = []
    state: State = Scanning()

    for word in iter_words(segment):
        operator = OPERATORS.get(word)
        if isinstance(state, ExpectingFilename):
            if operator is not None:
                raise MalformedRedirectError(
                    f"expected filename after '{state.operator.value}', got '{word}'"
                )
            arguments.append(Argument(word, TokenKind.FILENAME))
            state = Scanning()
        elif operator is not None:
            arguments.append(Argument(word, operator))
            state = ExpectingFilename(operator)
        else:
            arguments.append(Argument(word, TokenKind.NORMAL))

    if isinstance(state, ExpectingFilename):
        raise MalformedRedirectError(f"missing filename after '{state.operator.value}'")

    log.debug("Tokenized %r into %d arguments", segment, len(arguments))
    return arguments


__all__ = [
    "TokenKind",
    "Argument",
    "Scanning",
    "ExpectingFilename",
    "OPERATORS",
    "iter_words",
    "tokenize",
]
