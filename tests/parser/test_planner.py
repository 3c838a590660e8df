# topmark:header:start
#
#   project      : ProtoMark
#   file         : test_planner.py
#   file_relpath : tests/parser/test_planner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for marker placement, indentation and rendering."""

from __future__ import annotations

from tests.conftest import mark_pipeline
from protomark.config import Config, MutableConfig
from protomark.parser.planner import (
    indentation_for,
    insertion_index,
    plan_markers,
    render_marker_lines,
    trim_extension_separator,
)
from protomark.parser.types import LineKind, MarkerInsertion


@mark_pipeline
def test_insertion_index_and_indentation() -> None:
    """Extensions go above their line unindented; declarations stay at the line, indented."""
    assert insertion_index(5, LineKind.EXTENSION) == 4
    assert insertion_index(5, LineKind.DECLARATION) == 5
    assert indentation_for(LineKind.EXTENSION) == ""
    assert indentation_for(LineKind.DECLARATION) == "    "


@mark_pipeline
def test_render_marker_lines() -> None:
    """Each name yields a blank line followed by the marker comment."""
    assert render_marker_lines(["Bar", "Baz"], "    ") == [
        "\n",
        "    // MARK: - Bar\n",
        "\n",
        "    // MARK: - Baz\n",
    ]
    assert render_marker_lines([], "") == []


@mark_pipeline
def test_trim_extension_separator() -> None:
    """The second-to-last line is dropped; short lists are left alone."""
    assert trim_extension_separator(["\n", "// MARK: - A\n"]) == ["// MARK: - A\n"]
    assert trim_extension_separator(["\n", "// MARK: - A\n", "\n", "// MARK: - B\n"]) == [
        "\n",
        "// MARK: - A\n",
        "// MARK: - B\n",
    ]
    assert trim_extension_separator(["x\n"]) == ["x\n"]
    assert trim_extension_separator([]) == []


@mark_pipeline
def test_declaration_round_trip() -> None:
    """`class Foo: Bar, Baz` gets two indented markers at its own index."""
    ins: MarkerInsertion = plan_markers(3, "class Foo: Bar, Baz\n", LineKind.DECLARATION)
    assert ins.line_index == 3
    assert ins.lines == (
        "\n",
        "    // MARK: - Bar\n",
        "\n",
        "    // MARK: - Baz\n",
    )
    assert ins.marker_count == 2


@mark_pipeline
def test_extension_single_conformance() -> None:
    """`extension Foo: Codable` gets one unindented marker above the line."""
    ins: MarkerInsertion = plan_markers(7, "extension Foo: Codable\n", LineKind.EXTENSION)
    assert ins.line_index == 6
    assert ins.lines == ("// MARK: - Codable\n",)


@mark_pipeline
def test_extension_without_clause_is_empty() -> None:
    """An extension line with no colon yields an empty insertion."""
    ins: MarkerInsertion = plan_markers(2, "extension Foo {\n", LineKind.EXTENSION)
    assert ins.line_index == 1
    assert ins.is_empty


@mark_pipeline
def test_line_counts_per_kind() -> None:
    """Declarations get 2N lines, extensions 2N - 1."""
    decl: MarkerInsertion = plan_markers(0, "struct S: A, B, C\n", LineKind.DECLARATION)
    ext: MarkerInsertion = plan_markers(1, "extension S: A\n", LineKind.EXTENSION)
    assert len(decl.lines) == 6
    assert len(ext.lines) == 1


@mark_pipeline
def test_config_controls_formatting() -> None:
    """Indent, prefix and the extension separator come from the config."""
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.indent = "\t"
    draft.mark_prefix = "// MARK: "
    draft.extension_separator = True
    config: Config = draft.freeze()

    decl: MarkerInsertion = plan_markers(0, "class Foo: Bar, Baz\n", LineKind.DECLARATION, config)
    assert decl.lines[1] == "\t// MARK: Bar\n"

    ext: MarkerInsertion = plan_markers(4, "extension Foo: Codable\n", LineKind.EXTENSION, config)
    assert ext.lines == ("\n", "// MARK: Codable\n")
