# topmark:header:start
#
#   project      : ProtoMark
#   file         : keys.py
#   file_relpath : src/protomark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ProtoMark configuration.

These constants are the external configuration schema as it appears in
``protomark.toml`` and in ``[tool.protomark]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ProtoMark configuration."""

    # [formatting]
    SECTION_FORMATTING: Final[str] = "formatting"

    KEY_INDENT: Final[str] = "indent"
    KEY_MARK_PREFIX: Final[str] = "mark_prefix"
    KEY_EXTENSION_SEPARATOR: Final[str] = "extension_separator"

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset({SECTION_FORMATTING})

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_FORMATTING: frozenset(
            {
                KEY_INDENT,
                KEY_MARK_PREFIX,
                KEY_EXTENSION_SEPARATOR,
            }
        ),
    }
