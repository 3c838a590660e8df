# topmark:header:start
#
#   project      : ProtoMark
#   file         : selection.py
#   file_relpath : src/protomark/parser/selection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reconstruction of selected text from column-bounded line spans."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from protomark.parser.types import SelectionRange, SourceBuffer


@dataclass(frozen=True, slots=True)
class LineSpan:
    """The part ``text[start:end]`` of one line covered by a selection."""

    text: str
    start: int
    end: int

    def covered_text(self) -> str:
        """Return the covered text; bounds past the line end are clamped."""
        return self.text[self.start : self.end]


def selection_spans(buffer: SourceBuffer, selection: SelectionRange) -> list[LineSpan]:
    """Return one span per line covered by ``selection``, in line order.

    The first line starts at the start column, the last line ends after the
    (inclusive) end column, and lines in between are taken in full. A line past
    the end of the buffer contributes an empty string.
    """
    first: int = selection.start.line
    last: int = selection.end.line
    spans: list[LineSpan] = []
    for index in range(first, last + 1):
        text: str = buffer.line_at(index)
        start: int = selection.start.column if index == first else 0
        end: int = selection.end.column + 1 if index == last else len(text)
        spans.append(LineSpan(text=text, start=start, end=end))
    return spans


def join_spans(spans: Iterable[LineSpan]) -> str:
    """Concatenate the covered text of ``spans``."""
    return "".join(span.covered_text() for span in spans)


def selected_text(buffer: SourceBuffer, selection: SelectionRange) -> str:
    """Return the exact text covered by ``selection``."""
    return join_spans(selection_spans(buffer, selection))
