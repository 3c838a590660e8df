# topmark:header:start
#
#   project      : ProtoMark
#   file         : classifier.py
#   file_relpath : src/protomark/parser/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classification for marker generation.

Two independent predicates decide whether a line is worth parsing:

* `is_declaration_line`: a ``class``/``struct``/``extension``/``protocol``/``enum``
  keyword followed by a ``:`` and then a ``,`` (two or more conformances).
* `is_extension_line`: the literal ``extension`` with no ``,`` anywhere on the line
  (an extension with a single conformance).

A line is selected when either predicate holds.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from protomark.config.logging import get_logger
from protomark.constants import CONFORMANCE_SEPARATOR, DECLARATION_KEYWORDS, EXTENSION_KEYWORD
from protomark.parser.types import LineKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from protomark.config.logging import ProtomarkLogger

logger: ProtomarkLogger = get_logger(__name__)

DECLARATION_LINE_RE: Final[re.Pattern[str]] = re.compile(
    rf"({'|'.join(DECLARATION_KEYWORDS)})(.*:.*,.*)",
    re.IGNORECASE,
)


def is_declaration_line(line: str) -> bool:
    """Return True if ``line`` declares a type with a multi-entry conformance list."""
    return DECLARATION_LINE_RE.search(line) is not None


def is_extension_line(line: str) -> bool:
    """Return True if ``line`` mentions ``extension`` and contains no comma."""
    return EXTENSION_KEYWORD in line and CONFORMANCE_SEPARATOR not in line


def should_parse_line(line: str) -> bool:
    """Return True if either classification rule selects ``line``."""
    return is_declaration_line(line) or is_extension_line(line)


def classify_line(line: str) -> LineKind | None:
    """Return the kind used for planning ``line``, or None if it is not selected.

    The extension rule takes precedence: a comma-free extension line is planned
    as an extension even if the declaration rule would also hold.
    """
    if is_extension_line(line):
        return LineKind.EXTENSION
    if is_declaration_line(line):
        return LineKind.DECLARATION
    return None


def line_indexes_to_parse(lines: Sequence[str]) -> list[int]:
    """Return the ascending indexes of all selected lines."""
    indexes: list[int] = [i for i, line in enumerate(lines) if should_parse_line(line)]
    logger.debug("Selected %d of %d lines", len(indexes), len(lines))
    return indexes
