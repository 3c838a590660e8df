# topmark:header:start
#
#   project      : ProtoMark
#   file         : extractor.py
#   file_relpath : src/protomark/parser/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conformance list extraction and label normalization.

Given a declaration line (or any selected fragment), the text after the last
``:`` is split on ``,`` and each entry is turned into a readable label:

1. trim whitespace, then strip non-alphanumeric characters from both ends;
2. insert a space at every lowercase-to-uppercase boundary (``myProtocol`` ->
   ``my Protocol``);
3. drop a leading acronym prefix that precedes the first word
   (``UITableViewDelegate`` -> ``Table View Delegate``).

Step 3 locates the prefix on the raw token and maps its end offset onto the
expanded string before slicing, so the spaces inserted in step 2 never shift
the cut.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from protomark.config.logging import get_logger
from protomark.constants import CLAUSE_SEPARATOR, CONFORMANCE_SEPARATOR

if TYPE_CHECKING:
    from protomark.config.logging import ProtomarkLogger

logger: ProtomarkLogger = get_logger(__name__)

CONFORMANCE_CLAUSE_RE: Final[re.Pattern[str]] = re.compile(r":.*", re.IGNORECASE)
CAMEL_BOUNDARY_RE: Final[re.Pattern[str]] = re.compile(r"([a-z])([A-Z])")
_OUTER_NON_ALNUM_RE: Final[re.Pattern[str]] = re.compile(r"^[^A-Za-z0-9]+|[^A-Za-z0-9]+$")


def find_conformance_clause(line: str) -> str | None:
    """Return the text from the first ``:`` to the end of the line, or None."""
    m: re.Match[str] | None = CONFORMANCE_CLAUSE_RE.search(line)
    return m.group(0) if m else None


def split_conformance_names(fragment: str) -> list[str]:
    """Split the text after the last ``:`` of ``fragment`` into raw name tokens.

    A fragment without a colon is split as a whole. The result always has at
    least one (possibly empty) token.
    """
    names: str = fragment.rsplit(CLAUSE_SEPARATOR, 1)[-1]
    return names.split(CONFORMANCE_SEPARATOR)


def alphanumeric_core(token: str) -> str:
    """Trim whitespace, then strip non-ASCII-alphanumerics from both ends."""
    return _OUTER_NON_ALNUM_RE.sub("", token.strip())


def expand_camel_case(name: str) -> str:
    """Insert a space between each lowercase letter and a following uppercase letter."""
    return CAMEL_BOUNDARY_RE.sub(r"\1 \2", name)


def acronym_prefix_length(name: str) -> int:
    """Return the length of the leading prefix to drop from ``name``.

    The first character at index ``i > 0`` that equals its own lowercase form
    marks the start of the first word; the prefix is ``name[: i - 1]``, so the
    capital letter opening that word is kept. Returns 0 when there is nothing to drop.
    """
    for idx, chr_ in enumerate(name):
        if idx > 0 and chr_.lower() == chr_:
            return max(idx - 1, 0)
    return 0


def _expanded_offset(name: str, raw_offset: int) -> int:
    """Map ``raw_offset`` in ``name`` onto the camel-case-expanded string.

    Each boundary at a raw position ``<= raw_offset`` adds one inserted space.
    """
    inserted: int = sum(
        1
        for pos in range(1, min(raw_offset, len(name) - 1) + 1)
        if "a" <= name[pos - 1] <= "z" and "A" <= name[pos] <= "Z"
    )
    return raw_offset + inserted


def from_camel_case(name: str) -> str:
    """Expand camel case in ``name`` and drop its leading acronym prefix."""
    expanded: str = expand_camel_case(name)
    prefix_len: int = acronym_prefix_length(name)
    if prefix_len == 0:
        return expanded
    cut: int = _expanded_offset(name, prefix_len)
    logger.trace("Dropping prefix %r from %r", expanded[:cut], expanded)
    return expanded[cut:]


def normalize_conformance_name(token: str) -> str:
    """Turn a raw conformance token into a readable label."""
    return from_camel_case(alphanumeric_core(token))


def extract_conformance_names(fragment: str) -> list[str]:
    """Return the normalized conformance labels of ``fragment``, in source order.

    No de-duplication or identifier validation is performed; an empty entry
    (e.g. from a trailing comma) yields an empty label.
    """
    labels: list[str] = [normalize_conformance_name(t) for t in split_conformance_names(fragment)]
    logger.debug("Conformances in %r: %s", fragment, labels)
    return labels
