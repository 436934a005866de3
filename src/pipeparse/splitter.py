from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .exceptions import AllocationError, SubcommandCountError

log = logging.getLogger(__name__)

PIPE = "|"


@dataclass(frozen=True)
class Commandline:
    """The raw line split on pipes; segments are kept untrimmed."""

    num: int
    subcommands: Tuple[str, ...]


def count_subcommands(line: str) -> int:
    # Leading, trailing and doubled pipes each contribute an empty segment.
    return line.count(PIPE) + 1


def copy_subcommand(line: str, start: int, end: int) -> str:
    """Copy one segment of ``line`` into its own string."""
    return line[start:end]


def copy_subcommands(line: str, num: int) -> List[str]:
    actual = count_subcommands(line)
    if num != actual:
        raise SubcommandCountError(num, actual)

    out: List[str] = []
    start = 0
    try:
        for _ in range(num):
            end = line.find(PIPE, start)
            if end == -1:
                end = len(line)
            out.append(copy_subcommand(line, start, end))
            start = end + 1
    except MemoryError as exc:
        raise AllocationError(f"cannot copy subcommand {len(out) + 1}") from exc
    return out


def split_commandline(line: str) -> Commandline:
    num = count_subcommands(line)
    segments = copy_subcommands(line, num)
    log.debug("Split %r into %d subcommands", line, num)
    return Commandline(num=num, subcommands=tuple(segments))


__all__ = [
    "PIPE",
    "Commandline",
    "count_subcommands",
    "copy_subcommand",
    "copy_subcommands",
    "split_commandline",
]
