# topmark:header:start
#
#   project      : ProtoMark
#   file         : types.py
#   file_relpath : src/protomark/parser/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types shared by the ProtoMark parser.

All types are immutable snapshots. A parse call receives a `SourceBuffer`
and returns a new tuple of `MarkerInsertion` values; the buffer itself is never
modified (splicing is done by `protomark.editing.applier`).
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

# "L:C" or "L:C-L:C", zero-based
_SELECTION_RE: Final[re.Pattern[str]] = re.compile(r"^\s*(\d+):(\d+)\s*(?:-\s*(\d+):(\d+)\s*)?$")


class LineKind(Enum):
    """Classification of a matched source line."""

    DECLARATION = "declaration"
    EXTENSION = "extension"


class ParseMode(Enum):
    """Which part of the buffer a parse call looks at.

    Attributes:
        IGNORE_SELECTION: Scan every line of the buffer.
        SELECTION_ONLY: Parse only the text covered by the buffer's selections.
    """

    IGNORE_SELECTION = "buffer"
    SELECTION_ONLY = "selection"


@dataclass(frozen=True, slots=True)
class TextPosition:
    """Zero-based (line, column) position in a buffer."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Selected text from `start` to `end`, the end column being inclusive.

    A zero-width selection (start equals end) is a plain caret position.
    """

    start: TextPosition
    end: TextPosition

    @property
    def is_empty(self) -> bool:
        """True when the selection is a caret (same line, same column)."""
        return self.start == self.end

    @classmethod
    def parse(cls, value: str) -> SelectionRange:
        """Build a selection from ``"L:C"`` or ``"L:C-L:C"`` (zero-based).

        Args:
            value (str): The selection string, typically from the command line.

        Returns:
            SelectionRange: The parsed selection. A single position yields a caret.

        Raises:
            ValueError: If ``value`` is malformed or the end precedes the start.
        """
        m: re.Match[str] | None = _SELECTION_RE.match(value)
        if m is None:
            raise ValueError(f"Invalid selection '{value}': expected 'LINE:COL[-LINE:COL]'")
        start = TextPosition(int(m.group(1)), int(m.group(2)))
        if m.group(3) is None:
            return cls(start=start, end=start)
        end = TextPosition(int(m.group(3)), int(m.group(4)))
        if (end.line, end.column) < (start.line, start.column):
            raise ValueError(f"Invalid selection '{value}': end precedes start")
        return cls(start=start, end=end)


@dataclass(frozen=True, slots=True)
class SourceBuffer:
    """Read-only snapshot of the lines and selections of an editor buffer.

    Attributes:
        lines (tuple[str, ...]): Lines including their own terminators.
        selections (tuple[SelectionRange, ...]): Zero or more selections, in order.
    """

    lines: tuple[str, ...]
    selections: tuple[SelectionRange, ...] = field(default_factory=tuple)

    @classmethod
    def from_text(
        cls,
        text: str,
        selections: tuple[SelectionRange, ...] | list[SelectionRange] = (),
    ) -> SourceBuffer:
        """Split ``text`` into lines, keeping native line terminators.

        Only ``"\\n"``, ``"\\r\\n"`` and ``"\\r"`` end a line, as when reading a file
        opened with ``newline=""``; form feeds and other Unicode separators stay
        inside their line.
        """
        lines: list[str] = io.StringIO(text, newline="").readlines()
        return cls(lines=tuple(lines), selections=tuple(selections))

    def line_at(self, index: int) -> str:
        """Return line ``index``, or an empty string when it is out of range."""
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return ""


@dataclass(frozen=True, slots=True)
class MarkerInsertion:
    """Lines to insert relative to a buffer line.

    Attributes:
        line_index (int): Target line; the lines go directly below it
            (``-1`` places them at the top of the buffer).
        lines (tuple[str, ...]): Generated lines, each with its own newline.
    """

    line_index: int
    lines: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to insert."""
        return not self.lines

    @property
    def marker_count(self) -> int:
        """Number of generated lines that are not blank separators."""
        return sum(1 for line in self.lines if line.strip())
