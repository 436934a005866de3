"""Read-only renderers for debugging each parser stage."""

from __future__ import annotations

from typing import Iterable, List, Optional

import typer

from .assembler import Subcommand
from .pipeline import ParseResult
from .splitter import Commandline
from .tokens import Argument


def render_num_subcommands(num: int) -> str:
    return f"Number of subcommands: {num}"


def render_subcommands(commandline: Commandline) -> str:
    return "\n".join(
        f"Subcommand {i}: '{segment}'" for i, segment in enumerate(commandline.subcommands, start=1)
    )


def render_arguments(arguments: Iterable[Argument]) -> str:
    return "\n".join(f"{arg.kind.name} '{arg.contents}'" for arg in arguments)


def render_subcommand(sub: Subcommand, index: Optional[int] = None) -> str:
    header = "Subcommand" if index is None else f"Subcommand {index}"
    lines = [
        f"{header}:",
        f"  argv:   {sub.argv}",
        f"  input:  {sub.input if sub.input is not None else '<stdin>'}",
        f"  output: {sub.output if sub.output is not None else '<stdout>'}",
        f"  mode:   {sub.mode.value}",
    ]
    return "\n".join(lines)


def render_result(result: ParseResult) -> str:
    blocks: List[str] = [render_subcommand(seg.subcommand, seg.index) for seg in result.segments]
    return "\n".join(blocks)


def print_num_subcommands(num: int) -> None:
    typer.echo(render_num_subcommands(num))


def print_subcommands(commandline: Commandline) -> None:
    typer.echo(render_subcommands(commandline))


def display_arguments(arguments: Iterable[Argument]) -> None:
    text = render_arguments(arguments)
    if text:
        typer.echo(text)


def display_subcommand(sub: Subcommand, index: Optional[int] = None) -> None:
    typer.echo(render_subcommand(sub, index))


def display_result(result: ParseResult) -> None:
    for seg in result.segments:
        display_subcommand(seg.subcommand, seg.index)
    for err in result.errors:
        typer.echo(f"error: {err.error}", err=True)
