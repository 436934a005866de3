from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .assembler import Subcommand, assemble
from .exceptions import SyntaxParseError
from .splitter import Commandline, split_commandline
from .tokens import Argument, tokenize

log = logging.getLogger(__name__)


@dataclass
class SegmentError:
    index: int
    segment: str
    error: SyntaxParseError
    # Empty when the segment failed before tokenizing finished.
    tokens: Tuple[Argument, ...] = ()


@dataclass
class ParsedSegment:
    index: int
    subcommand: Subcommand
    tokens: Tuple[Argument, ...] = ()


@dataclass
class ParseResult:
    """Outcome of parsing one line.

    ``segments`` holds every subcommand that parsed, in pipeline order; failed
    segments are listed in ``errors`` instead. Nothing is rolled back when a
    later segment fails.
    """

    commandline: Commandline
    segments: List[ParsedSegment] = field(default_factory=list)
    errors: List[SegmentError] = field(default_factory=list)

    @property
    def subcommands(self) -> List[Subcommand]:
        return [seg.subcommand for seg in self.segments]

    def tokens_for(self, index: int) -> Tuple[Argument, ...]:
        for item in (*self.segments, *self.errors):
            if item.index == index:
                return item.tokens
        return ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise self.errors[0].error


def parse_commandline(line: str, *, strict: bool = False) -> ParseResult:
    """Split ``line`` on pipes and parse each segment on its own.

    Syntax errors are recorded per segment. With ``strict`` the first one
    stops the parse. Allocation and count errors always propagate.
    """
    commandline = split_commandline(line)
    result = ParseResult(commandline=commandline)

    for index, segment in enumerate(commandline.subcommands, start=1):
        tokens: Tuple[Argument, ...] = ()
        try:
            arguments = tokenize(segment)
            tokens = tuple(arguments)
            sub = assemble(arguments)
        except SyntaxParseError as exc:
            exc.segment_index = index
            log.info("Rejected %s", exc)
            result.errors.append(SegmentError(index=index, segment=segment, error=exc, tokens=tokens))
            if strict:
                break
            continue
        result.segments.append(ParsedSegment(index=index, subcommand=sub, tokens=tokens))

    return result


__all__ = ["ParseResult", "ParsedSegment", "SegmentError", "parse_commandline"]
