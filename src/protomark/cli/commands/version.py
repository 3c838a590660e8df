# topmark:header:start
#
#   project      : ProtoMark
#   file         : version.py
#   file_relpath : src/protomark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProtoMark ``version`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from protomark.cli.cmd_common import get_console, get_effective_verbosity
from protomark.constants import PROTOMARK_VERSION

if TYPE_CHECKING:
    from protomark.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ProtoMark.",
)
def version_command() -> None:
    """Print the ProtoMark version installed in the current environment."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("ProtoMark version:", bold=True, underline=True))
        console.print(f"    {console.styled(PROTOMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(PROTOMARK_VERSION, bold=True))
