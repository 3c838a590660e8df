# topmark:header:start
#
#   project      : ProtoMark
#   file         : planner.py
#   file_relpath : src/protomark/parser/planner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Marker placement and rendering.

For a matched line the planner decides where the markers go and how they are
indented:

* extension: target ``index - 1``, no indentation, and the blank separator in
  front of the marker is dropped (``2 * n - 1`` lines);
* declaration: target ``index``, one indentation level, a blank line before
  every marker (``2 * n`` lines).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from protomark.config import DEFAULT_CONFIG
from protomark.config.logging import get_logger
from protomark.parser.extractor import extract_conformance_names, find_conformance_clause
from protomark.parser.types import LineKind, MarkerInsertion

if TYPE_CHECKING:
    from collections.abc import Sequence

    from protomark.config import Config
    from protomark.config.logging import ProtomarkLogger

logger: ProtomarkLogger = get_logger(__name__)

BLANK_LINE: str = "\n"


def insertion_index(line_index: int, kind: LineKind) -> int:
    """Return the target line for markers generated from line ``line_index``."""
    return line_index - 1 if kind is LineKind.EXTENSION else line_index


def indentation_for(kind: LineKind, config: Config = DEFAULT_CONFIG) -> str:
    """Return the marker indentation for a line of the given kind."""
    return "" if kind is LineKind.EXTENSION else config.indent


def render_marker_lines(
    names: Sequence[str],
    indentation: str,
    config: Config = DEFAULT_CONFIG,
) -> list[str]:
    """Render a blank line and a marker comment for each name, in order."""
    lines: list[str] = []
    for name in names:
        lines.append(BLANK_LINE)
        lines.append(f"{indentation}{config.mark_prefix}{name}\n")
    return lines


def trim_extension_separator(lines: list[str]) -> list[str]:
    """Drop the second-to-last line (the blank before the final marker).

    Lists with fewer than two lines are returned unchanged.
    """
    if len(lines) < 2:
        return lines
    return lines[:-2] + lines[-1:]


def plan_markers(
    line_index: int,
    line: str,
    kind: LineKind,
    config: Config = DEFAULT_CONFIG,
) -> MarkerInsertion:
    """Compute the insertion for matched line ``line`` at ``line_index``.

    A line without a conformance clause yields an empty insertion.
    """
    target: int = insertion_index(line_index, kind)
    clause: str | None = find_conformance_clause(line)
    if clause is None:
        logger.debug("Line %d has no conformance clause", line_index)
        return MarkerInsertion(line_index=target)

    lines: list[str] = render_marker_lines(
        extract_conformance_names(clause),
        indentation_for(kind, config),
        config,
    )
    if kind is LineKind.EXTENSION and not config.extension_separator:
        lines = trim_extension_separator(lines)

    logger.trace("Line %d (%s): %d line(s) at %d", line_index, kind.value, len(lines), target)
    return MarkerInsertion(line_index=target, lines=tuple(lines))
