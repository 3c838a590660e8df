# topmark:header:start
#
#   project      : ProtoMark
#   file         : test_selection.py
#   file_relpath : tests/parser/test_selection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for selected-text reconstruction."""

from __future__ import annotations

from tests.conftest import mark_pipeline
from protomark.parser.selection import LineSpan, join_spans, selected_text, selection_spans
from protomark.parser.types import SelectionRange, SourceBuffer, TextPosition


def _sel(l1: int, c1: int, l2: int, c2: int) -> SelectionRange:
    return SelectionRange(start=TextPosition(l1, c1), end=TextPosition(l2, c2))


@mark_pipeline
def test_single_line_selection_includes_end_column() -> None:
    """The end column is inclusive."""
    buffer: SourceBuffer = SourceBuffer.from_text("class Foo: Bar, Baz\n")
    assert selected_text(buffer, _sel(0, 11, 0, 18)) == "Bar, Baz"


@mark_pipeline
def test_multi_line_selection() -> None:
    """First line from the start column, middle lines in full, last line to the end column."""
    buffer: SourceBuffer = SourceBuffer.from_text("class Foo:\n    Bar,\n    Baz {\n")
    assert selected_text(buffer, _sel(0, 9, 2, 6)) == ":\n    Bar,\n    Baz"


@mark_pipeline
def test_caret_selection_covers_one_character() -> None:
    """A zero-width selection still reads the character under the caret."""
    buffer: SourceBuffer = SourceBuffer.from_text("ABC\n")
    assert selected_text(buffer, _sel(0, 1, 0, 1)) == "B"


@mark_pipeline
def test_lines_past_buffer_end_contribute_nothing() -> None:
    """Selections reaching beyond the buffer degrade to empty strings per line."""
    buffer: SourceBuffer = SourceBuffer.from_text("Foo\n")
    spans: list[LineSpan] = selection_spans(buffer, _sel(0, 0, 2, 3))
    assert [s.text for s in spans] == ["Foo\n", "", ""]
    assert join_spans(spans) == "Foo\n"


@mark_pipeline
def test_columns_clamp_to_line_length() -> None:
    """Column bounds past the end of a line are clamped."""
    buffer: SourceBuffer = SourceBuffer.from_text("Foo")
    assert selected_text(buffer, _sel(0, 1, 0, 40)) == "oo"
