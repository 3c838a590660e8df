# topmark:header:start
#
#   project      : ProtoMark
#   file         : config.py
#   file_relpath : src/protomark/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProtoMark ``config`` command.

Prints the effective configuration (defaults merged with ``pyproject.toml``,
``protomark.toml``, ``--config`` files and CLI overrides) as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from protomark.cli.cmd_common import build_config, get_console, get_effective_verbosity
from protomark.cli.options import CONTEXT_SETTINGS, common_config_options
from protomark.config import DEFAULT_CONFIG

if TYPE_CHECKING:
    from protomark.cli.console import ConsoleLike
    from protomark.config import Config


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@click.option(
    "--defaults",
    "show_defaults",
    is_flag=True,
    help="Show the built-in defaults instead of the merged configuration.",
)
def config_command(
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
    show_defaults: bool,
) -> None:
    """Print the effective (or default) configuration."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = (
        DEFAULT_CONFIG
        if show_defaults
        else build_config(config_paths=config_paths, no_config=no_config)
    )
    if get_effective_verbosity(ctx) > 0 and config.config_files:
        sources: str = ", ".join(str(p) for p in config.config_files)
        console.print(console.styled(f"# Sources: {sources}", dim=True))
    console.print(config.to_toml(), nl=False)
