from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import os
import sys
import logging

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - for safety if run on <3.11
    import tomli as tomllib  # type: ignore[no-redef]

import yaml

log = logging.getLogger(__name__)


CONFIG_FILENAMES_TOML = ("pipeparse.toml",)
CONFIG_FILENAMES_YAML = ("pipeparse.yaml", "pipeparse.yml")
DEFAULT_CONFIG_DIR_UNIX = Path.home() / ".config" / "pipeparse"


@dataclass(frozen=True)
class ParserConfig:
    strict: bool = False  # stop at the first failing segment


@dataclass(frozen=True)
class DisplayConfig:
    show_tokens: bool = False
    prompt: str = "$ "


@dataclass(frozen=True)
class LoggingConfig:
    console_level: str = "WARNING"


@dataclass(frozen=True)
class PathsConfig:
    base_dir: Path
    logs_dir: Path


@dataclass(frozen=True)
class AppConfig:
    paths: PathsConfig
    parser: ParserConfig
    display: DisplayConfig
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


def _find_config_file(explicit: Optional[Path]) -> Optional[Path]:
    if explicit is not None:
        return explicit

    env_path = os.environ.get("PIPEPARSE_CONFIG")
    if env_path:
        p = Path(env_path)
        if p.exists():
            return p

    cwd = Path.cwd()
    for name in (*CONFIG_FILENAMES_TOML, *CONFIG_FILENAMES_YAML):
        candidate = cwd / name
        if candidate.exists():
            return candidate

    # Home config directory
    for name in (*CONFIG_FILENAMES_TOML, *CONFIG_FILENAMES_YAML):
        candidate = DEFAULT_CONFIG_DIR_UNIX / name
        if candidate.exists():
            return candidate

    return None


def _read_toml(p: Path) -> Dict[str, Any]:
    with p.open("rb") as f:
        return tomllib.load(f)  # type: ignore[no-any-return]


def _read_yaml(p: Path) -> Dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML config must be a mapping at top-level: {p}")
    return data


def read_config_file(p: Path) -> Dict[str, Any]:
    if p.suffix.lower() == ".toml":
        return _read_toml(p)
    return _read_yaml(p)


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name)
    return value if isinstance(value, dict) else {}


def _to_path(value: Optional[str], *, base_dir: Path) -> Path:
    p = Path(value) if value else base_dir / "logs"
    if not p.is_absolute():
        p = (base_dir / p).resolve()
    return p


def load_config(*, config_path: Optional[Path] = None, base_dir: Optional[Path] = None) -> AppConfig:
    base_dir = (base_dir or Path.cwd()).resolve()

    file_path = _find_config_file(config_path)
    raw: Dict[str, Any] = {}
    if file_path is not None:
        try:
            raw = read_config_file(file_path)
            log.debug("Loaded config from %s", file_path)
        except (OSError, ValueError, yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
            print(f"Failed to load config: {exc}", file=sys.stderr)
            raw = {}

    raw_paths = _section(raw, "paths")
    raw_parser = _section(raw, "parser")
    raw_display = _section(raw, "display")
    raw_logging = _section(raw, "logging")

    defaults = DisplayConfig()
    return AppConfig(
        paths=PathsConfig(base_dir=base_dir, logs_dir=_to_path(raw_paths.get("logs"), base_dir=base_dir)),
        parser=ParserConfig(strict=bool(raw_parser.get("strict", False))),
        display=DisplayConfig(
            show_tokens=bool(raw_display.get("show_tokens", defaults.show_tokens)),
            prompt=str(raw_display.get("prompt", defaults.prompt)),
        ),
        logging=LoggingConfig(console_level=str(raw_logging.get("console_level", "WARNING")).upper()),
        debug=bool(raw.get("debug", False)),
    )
