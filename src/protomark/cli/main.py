# topmark:header:start
#
#   project      : ProtoMark
#   file         : main.py
#   file_relpath : src/protomark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProtoMark Click CLI: group-level options plus the real subcommands.

Group-level options (verbosity, color) are resolved once and stored on
``ctx.obj`` together with the program-output console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from protomark.cli.commands.config import config_command
from protomark.cli.commands.mark import mark_command
from protomark.cli.commands.version import version_command
from protomark.cli.console import ClickConsole
from protomark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from protomark.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from protomark.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context."""
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ProtoMark CLI: add '// MARK: -' comments for protocol conformances.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ProtoMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'protomark mark [PATHS...]' to preview markers.")


cli.add_command(mark_command)
cli.add_command(config_command)
cli.add_command(version_command)
