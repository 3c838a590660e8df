# topmark:header:start
#
#   project      : ProtoMark
#   file         : options.py
#   file_relpath : src/protomark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and option resolution for ProtoMark commands."""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from protomark.cli.errors import ProtomarkUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Return the program-output verbosity: negative when quiet, positive when verbose.

    Raises:
        ProtomarkUsageError: If both ``--verbose`` and ``--quiet`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ProtomarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Precedence: ``--color`` (always/never), then ``FORCE_COLOR`` / ``NO_COLOR``,
    then whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command."""
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(exists=True, dir_okay=False, path_type=str),
        multiple=True,
        help="Additional TOML config file to merge (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore protomark.toml / [tool.protomark] in the working directory.",
    )(f)
    return f


def common_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--indent`` and ``--mark-prefix`` overrides to a command."""
    f = click.option(
        "--indent",
        "indent",
        default=None,
        help="Indentation for declaration markers (default: four spaces).",
    )(f)
    f = click.option(
        "--mark-prefix",
        "mark_prefix",
        default=None,
        help="Text placed before each label (default: '// MARK: - ').",
    )(f)
    return f
