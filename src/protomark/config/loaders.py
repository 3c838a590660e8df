# topmark:header:start
#
#   project      : ProtoMark
#   file         : loaders.py
#   file_relpath : src/protomark/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

Parsing and rendering use `tomlkit`; results are returned as plain `dict`
structures so the config model stays free of tomlkit types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from protomark.config.keys import Toml
from protomark.config.logging import get_logger
from protomark.constants import DEFAULT_INDENT, DEFAULT_MARK_PREFIX, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from protomark.config.logging import ProtomarkLogger

TomlTable = dict[str, Any]

logger: ProtomarkLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return ProtoMark's runtime defaults as a new TOML-shaped dict (no I/O)."""
    return {
        Toml.SECTION_FORMATTING: {
            Toml.KEY_INDENT: DEFAULT_INDENT,
            Toml.KEY_MARK_PREFIX: DEFAULT_MARK_PREFIX,
            Toml.KEY_EXTENSION_SEPARATOR: False,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to ``protomark.toml`` or ``pyproject.toml``.

    Returns:
        TomlTable: The parsed content; an empty dict if the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.protomark]`` table of a parsed ``pyproject.toml``, if any."""
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return None
    section: Any = cast("TomlTable", tool).get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def to_toml(data: TomlTable) -> str:
    """Render a TOML-shaped dict as TOML text."""
    return cast("str", cast("Any", tomlkit).dumps(data))


def unknown_keys(data: TomlTable) -> list[str]:
    """Return dotted names of keys that are not part of the configuration schema."""
    unknown: list[str] = []
    for key, value in data.items():
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            unknown.append(key)
            continue
        allowed: frozenset[str] = Toml.ALLOWED_SECTION_KEYS.get(key, frozenset())
        if isinstance(value, dict):
            unknown.extend(f"{key}.{k}" for k in cast("TomlTable", value) if k not in allowed)
    return unknown
