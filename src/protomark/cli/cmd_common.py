# topmark:header:start
#
#   project      : ProtoMark
#   file         : cmd_common.py
#   file_relpath : src/protomark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by ProtoMark subcommands: config resolution and file I/O."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from protomark.cli.errors import (
    ProtomarkConfigError,
    ProtomarkEncodingError,
    ProtomarkFileNotFoundError,
    ProtomarkIOError,
)
from protomark.config import Config, MutableConfig
from protomark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from protomark.cli.console import ConsoleLike
    from protomark.config.logging import ProtomarkLogger

logger: ProtomarkLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root Click context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the Click context (default 0)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0) or 0)


def build_config(
    *,
    config_paths: list[str] | tuple[str, ...],
    no_config: bool,
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Merge config sources and CLI overrides into a frozen `Config`.

    Raises:
        ProtomarkConfigError: If the merged configuration is invalid.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    draft.apply_cli_args(overrides or {})
    try:
        config: Config = draft.freeze()
    except ValueError as exc:
        raise ProtomarkConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config


def read_source(path: str) -> str:
    """Read a UTF-8 source file (or STDIN for ``-``), keeping native newlines.

    Raises:
        ProtomarkFileNotFoundError: If ``path`` does not exist.
        ProtomarkEncodingError: If the content is not valid UTF-8.
        ProtomarkIOError: For any other read failure.
    """
    if path == STDIN_MARKER:
        stream = click.get_text_stream("stdin", encoding="utf-8")
        return stream.read()
    try:
        with open(path, encoding="utf-8", newline="") as fh:
            return fh.read()
    except FileNotFoundError as exc:
        raise ProtomarkFileNotFoundError(f"File not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise ProtomarkEncodingError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise ProtomarkIOError(f"Cannot read {path}: {exc}") from exc


def write_source(path: str, lines: list[str]) -> None:
    """Write ``lines`` back to ``path`` without newline translation.

    Raises:
        ProtomarkIOError: If the file cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write("".join(lines))
    except OSError as exc:
        raise ProtomarkIOError(f"Cannot write {path}: {exc}") from exc
