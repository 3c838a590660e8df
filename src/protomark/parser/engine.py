# topmark:header:start
#
#   project      : ProtoMark
#   file         : engine.py
#   file_relpath : src/protomark/parser/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse entry points composing classification, extraction and planning.

`parse` dispatches on a `ParseMode`:

* `ParseMode.IGNORE_SELECTION` -> `parse_buffer`: every selected line yields one
  `MarkerInsertion`, in ascending line order.
* `ParseMode.SELECTION_ONLY` -> `parse_selections`: every selection yields one
  `MarkerInsertion`, in selection order, targeting the selection's end line.

Both are pure: the buffer is read, never modified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from protomark.config import DEFAULT_CONFIG
from protomark.config.logging import get_logger
from protomark.parser.classifier import classify_line, line_indexes_to_parse
from protomark.parser.extractor import extract_conformance_names
from protomark.parser.planner import plan_markers, render_marker_lines
from protomark.parser.selection import selected_text
from protomark.parser.types import LineKind, MarkerInsertion, ParseMode

if TYPE_CHECKING:
    from protomark.config import Config
    from protomark.config.logging import ProtomarkLogger
    from protomark.parser.types import SelectionRange, SourceBuffer

logger: ProtomarkLogger = get_logger(__name__)


def parse_buffer(buffer: SourceBuffer, config: Config = DEFAULT_CONFIG) -> list[MarkerInsertion]:
    """Plan markers for every declaration and extension line in ``buffer``.

    Args:
        buffer (SourceBuffer): The buffer snapshot to scan.
        config (Config): Formatting options.

    Returns:
        list[MarkerInsertion]: One insertion per selected line, ascending by line.
            Insertions may be empty when a line has no conformance clause.
    """
    result: list[MarkerInsertion] = []
    for index in line_indexes_to_parse(buffer.lines):
        line: str = buffer.lines[index]
        kind: LineKind = classify_line(line) or LineKind.DECLARATION
        result.append(plan_markers(index, line, kind, config))
    logger.debug("parse_buffer: %d insertion(s)", len(result))
    return result


def parse_selection(
    buffer: SourceBuffer,
    selection: SelectionRange,
    config: Config = DEFAULT_CONFIG,
) -> MarkerInsertion:
    """Plan markers for the text covered by a single selection.

    The selected text is used as-is: when it has no colon, the whole text is
    the conformance list. Markers are unindented for a caret selection and
    indented one level otherwise; no separator trimming is applied.

    The target is the selection's end line, clamped to the last buffer line.
    Lines past the buffer contribute no text, so a selection entirely past the
    end still yields one marker with an empty label.
    """
    text: str = selected_text(buffer, selection)
    indentation: str = "" if selection.is_empty else config.indent
    lines: list[str] = render_marker_lines(extract_conformance_names(text), indentation, config)
    target: int = min(selection.end.line, len(buffer.lines) - 1)
    return MarkerInsertion(line_index=target, lines=tuple(lines))


def parse_selections(
    buffer: SourceBuffer,
    config: Config = DEFAULT_CONFIG,
) -> list[MarkerInsertion]:
    """Plan markers for each selection of ``buffer``, in selection order."""
    result: list[MarkerInsertion] = [parse_selection(buffer, s, config) for s in buffer.selections]
    logger.debug("parse_selections: %d insertion(s)", len(result))
    return result


def parse(
    buffer: SourceBuffer,
    mode: ParseMode = ParseMode.IGNORE_SELECTION,
    config: Config = DEFAULT_CONFIG,
) -> list[MarkerInsertion]:
    """Plan markers for ``buffer`` according to ``mode``."""
    if mode is ParseMode.SELECTION_ONLY:
        return parse_selections(buffer, config)
    return parse_buffer(buffer, config)
