from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import sys
import tomllib
from typing import Any, Mapping, TextIO

from asciiwriter.errors import ConfigError


_FILE_KEYS = ("is_terminal", "use_colors")


@dataclass(frozen=True)
class WriterConfig:
    """Construction-time output mode. Colors only ever apply to terminal output."""

    is_terminal: bool
    use_colors: bool

    def __post_init__(self) -> None:
        if self.use_colors and not self.is_terminal:
            object.__setattr__(self, "use_colors", False)


def detect_terminal(stream: TextIO | None = None) -> bool:
    stream = sys.stdout if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def resolve_writer_config(
    is_terminal: bool | None = None,
    use_colors: bool | None = None,
    *,
    stream: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> WriterConfig:
    """Fill in unspecified flags.

    Terminal mode is detected from `stream` (stdout by default). Colors follow
    terminal mode unless NO_COLOR is set to a non-empty value.
    """

    env = os.environ if environ is None else environ
    terminal = detect_terminal(stream) if is_terminal is None else bool(is_terminal)
    if use_colors is None:
        colors = terminal and not env.get("NO_COLOR")
    else:
        colors = bool(use_colors)
    return WriterConfig(is_terminal=terminal, use_colors=colors)


def read_config_file(path: str | Path) -> dict[str, bool]:
    """Read the `[writer]` table of a TOML file. Missing keys stay unset."""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"config file not found: {config_path}")
    try:
        with config_path.open("rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    return _coerce_writer_table(raw.get("writer", {}))


def _coerce_writer_table(table: Any) -> dict[str, bool]:
    if not isinstance(table, dict):
        raise ConfigError("`writer` must be a table")
    unknown = sorted(set(table) - set(_FILE_KEYS))
    if unknown:
        raise ConfigError(f"unknown writer setting(s): {', '.join(unknown)}")
    out: dict[str, bool] = {}
    for key in _FILE_KEYS:
        if key not in table:
            continue
        value = table[key]
        if not isinstance(value, bool):
            raise ConfigError(f"`writer.{key}` must be a boolean")
        out[key] = value
    return out
