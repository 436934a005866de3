"""Exception types raised while parsing a shell command line."""

from __future__ import annotations

from typing import Optional


class PipeParseError(Exception):
    """Base class for all parser exceptions."""


class AllocationError(PipeParseError):
    """Raised when a buffer for a subcommand cannot be obtained."""


class SubcommandCountError(PipeParseError, IndexError):
    """Raised when a caller-supplied subcommand count disagrees with the line."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected {expected} subcommands, line has {actual}")
        self.expected = expected
        self.actual = actual


class SyntaxParseError(PipeParseError):
    """Recoverable syntax error in one pipeline segment."""

    def __init__(self, message: str, segment_index: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.segment_index = segment_index

    def __str__(self) -> str:
        if self.segment_index is None:
            return self.message
        return f"segment {self.segment_index}: {self.message}"


class MalformedRedirectError(SyntaxParseError):
    """Raised when a redirect operator is not followed by a filename."""


class EmptyCommandError(SyntaxParseError):
    """Raised when a segment contains no executable words."""


__all__ = [
    "PipeParseError",
    "AllocationError",
    "SubcommandCountError",
    "SyntaxParseError",
    "MalformedRedirectError",
    "EmptyCommandError",
]
