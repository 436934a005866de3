from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from . import __version__
from .config import AppConfig, load_config
from .display import display_arguments, display_result, print_num_subcommands, print_subcommands
from .logging_setup import setup_logging
from .pipeline import ParseResult, parse_commandline

app = typer.Typer(help="Parse shell command lines into pipelines of subcommands.")
config_app = typer.Typer(help="Inspect configuration.")

log = logging.getLogger(__name__)

EXIT_WORDS = ("exit", "quit")


@dataclass
class State:
    config: AppConfig


@app.callback()
def _load_config(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a configuration file (TOML or YAML). Overrides discovery.",
    ),
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        help="Base directory for default paths. Defaults to the current working directory.",
    ),
) -> None:
    cfg = load_config(config_path=config, base_dir=base_dir)
    setup_logging("DEBUG" if cfg.debug else "INFO", cfg.paths.logs_dir, console_level=cfg.logging.console_level)
    ctx.obj = State(config=cfg)


def _show_tokens(result: ParseResult) -> None:
    failed = {err.index: err for err in result.errors}
    for index in range(1, result.commandline.num + 1):
        typer.echo(f"Tokens {index}:")
        tokens = result.tokens_for(index)
        if tokens:
            display_arguments(tokens)
        elif index in failed:
            typer.echo(f"  <no tokens: {failed[index].error.message}>")
        elif not any(seg.index == index for seg in result.segments):
            typer.echo("  <not parsed>")


def run_line(line: str, *, strict: bool, show_tokens: bool) -> ParseResult:
    result = parse_commandline(line, strict=strict)
    print_num_subcommands(result.commandline.num)
    print_subcommands(result.commandline)
    if show_tokens:
        _show_tokens(result)
    display_result(result)
    return result


@app.command(name="version")
def version() -> None:
    """Print version information."""
    typer.echo(__version__)


@app.command(name="parse")
def parse(
    ctx: typer.Context,
    line: str = typer.Argument(..., help="Command line to parse, e.g. 'sort < in.txt | uniq'."),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Stop at the first failing segment. Overrides config."
    ),
    tokens: Optional[bool] = typer.Option(
        None, "--tokens/--no-tokens", help="Show classified tokens per segment. Overrides config."
    ),
) -> None:
    """Parse a single line and print the resulting pipeline."""
    assert isinstance(ctx.obj, State)
    cfg = ctx.obj.config
    result = run_line(
        line,
        strict=cfg.parser.strict if strict is None else strict,
        show_tokens=cfg.display.show_tokens if tokens is None else tokens,
    )
    if not result.ok:
        raise typer.Exit(code=1)


@app.command(name="repl")
def repl(ctx: typer.Context) -> None:
    """Read lines from stdin and parse each one until EOF or 'exit'."""
    assert isinstance(ctx.obj, State)
    cfg = ctx.obj.config
    while True:
        typer.echo(cfg.display.prompt, nl=False)
        raw = sys.stdin.readline()
        if not raw:
            typer.echo()
            break
        line = raw.rstrip("\n")
        if not line.strip():
            continue
        if line.strip() in EXIT_WORDS:
            break
        run_line(line, strict=cfg.parser.strict, show_tokens=cfg.display.show_tokens)
    log.debug("repl finished")


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the resolved configuration values."""
    assert isinstance(ctx.obj, State)
    cfg = ctx.obj.config
    lines = [
        f"debug: {cfg.debug}",
        "paths:",
        f"  base_dir: {cfg.paths.base_dir}",
        f"  logs_dir: {cfg.paths.logs_dir}",
        "parser:",
        f"  strict: {cfg.parser.strict}",
        "display:",
        f"  show_tokens: {cfg.display.show_tokens}",
        f"  prompt: {cfg.display.prompt!r}",
        "logging:",
        f"  console_level: {cfg.logging.console_level}",
    ]
    for text in lines:
        typer.echo(text)


app.add_typer(config_app, name="config")
