# topmark:header:start
#
#   project      : ProtoMark
#   file         : applier.py
#   file_relpath : src/protomark/editing/applier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Splice planned markers into a buffer image.

A `MarkerInsertion` targeting line ``t`` is inserted directly below that line,
so its first generated line becomes line ``t + 1`` (``t == -1`` inserts at the
top). Insertions are applied from the highest target down, so the targets of
the remaining insertions still refer to the original line numbers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from protomark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from protomark.config.logging import ProtomarkLogger
    from protomark.parser.types import MarkerInsertion

logger: ProtomarkLogger = get_logger(__name__)


def _with_newline_style(line: str, newline: str) -> str:
    if newline != "\n" and line.endswith("\n") and not line.endswith(newline):
        return line[:-1] + newline
    return line


def detect_newline(lines: Sequence[str]) -> str:
    """Return the terminator of the first terminated line (default ``"\\n"``)."""
    for line in lines:
        for nl in ("\r\n", "\n", "\r"):
            if line.endswith(nl):
                return nl
    return "\n"


def apply_insertions(
    lines: Sequence[str],
    insertions: Iterable[MarkerInsertion],
) -> list[str]:
    """Return a new line list with all non-empty insertions spliced in.

    Generated lines use ``"\\n"``; they are converted to the buffer's dominant
    newline. If the target line lacks a terminator (last line of a file), one
    is added so the markers start on their own line.

    Args:
        lines (Sequence[str]): The original lines, with terminators.
        insertions (Iterable[MarkerInsertion]): Planned insertions, any order.

    Returns:
        list[str]: The updated lines. ``lines`` itself is not modified.
    """
    updated: list[str] = list(lines)
    newline: str = detect_newline(lines)

    # Descending by (target, plan position): insertions sharing a target end up in plan order
    pending: list[tuple[int, int, MarkerInsertion]] = sorted(
        ((ins.line_index, pos, ins) for pos, ins in enumerate(insertions) if ins.lines),
        key=lambda item: (item[0], item[1]),
        reverse=True,
    )
    for _, _, ins in pending:
        at: int = min(max(ins.line_index + 1, 0), len(updated))
        if 0 < at == len(updated) and not updated[at - 1].endswith(("\n", "\r")):
            updated[at - 1] += newline
        new_lines: list[str] = [_with_newline_style(line, newline) for line in ins.lines]
        updated[at:at] = new_lines
        logger.trace("Inserted %d line(s) at %d", len(new_lines), at)

    return updated
