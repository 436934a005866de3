"""Public API for the pipeline command-line parser."""

from .assembler import END_OF_ARGS, RedirectMode, Subcommand, assemble, parse_subcommand
from .exceptions import (
    AllocationError,
    EmptyCommandError,
    MalformedRedirectError,
    PipeParseError,
    SubcommandCountError,
    SyntaxParseError,
)
from .pipeline import ParseResult, ParsedSegment, SegmentError, parse_commandline
from .splitter import Commandline, copy_subcommands, count_subcommands, split_commandline
from .tokens import Argument, TokenKind, tokenize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Argument",
    "TokenKind",
    "tokenize",
    "Commandline",
    "count_subcommands",
    "copy_subcommands",
    "split_commandline",
    "END_OF_ARGS",
    "RedirectMode",
    "Subcommand",
    "assemble",
    "parse_subcommand",
    "ParseResult",
    "ParsedSegment",
    "SegmentError",
    "parse_commandline",
    "PipeParseError",
    "AllocationError",
    "SubcommandCountError",
    "SyntaxParseError",
    "MalformedRedirectError",
    "EmptyCommandError",
]
