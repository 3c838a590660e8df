# topmark:header:start
#
#   project      : ProtoMark
#   file         : __init__.py
#   file_relpath : src/protomark/parser/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Marker parsing: line classification, conformance extraction and marker planning.

Typical use::

    from protomark.parser import ParseMode, SourceBuffer, parse

    buffer = SourceBuffer.from_text(source)
    insertions = parse(buffer, ParseMode.IGNORE_SELECTION)
"""

from __future__ import annotations

from protomark.parser.engine import parse, parse_buffer, parse_selection, parse_selections
from protomark.parser.types import (
    LineKind,
    MarkerInsertion,
    ParseMode,
    SelectionRange,
    SourceBuffer,
    TextPosition,
)

__all__ = [
    "LineKind",
    "MarkerInsertion",
    "ParseMode",
    "SelectionRange",
    "SourceBuffer",
    "TextPosition",
    "parse",
    "parse_buffer",
    "parse_selection",
    "parse_selections",
]
