# topmark:header:start
#
#   project      : ProtoMark
#   file         : cli_types.py
#   file_relpath : src/protomark/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the ProtoMark CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import click

from protomark.parser.types import SelectionRange

if TYPE_CHECKING:

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]


class SelectionParam(ParamTypeBase):
    """Click parameter converting ``LINE:COL[-LINE:COL]`` into a `SelectionRange`."""

    name = "selection"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> SelectionRange:
        """Convert a CLI string into a `SelectionRange`, failing with a usage error."""
        if isinstance(value, SelectionRange):
            return value
        try:
            return SelectionRange.parse(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)
