# topmark:header:start
#
#   project      : ProtoMark
#   file         : constants.py
#   file_relpath : src/protomark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProtoMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PROTOMARK_VERSION: str = get_version("protomark")

# Config files looked up in the working directory:
PROTOMARK_TOML_NAME: str = "protomark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "protomark"

# Environment variable overriding the internal log level:
LOG_LEVEL_ENV_VAR: str = "PROTOMARK_LOG_LEVEL"

DEFAULT_INDENT: str = "    "
DEFAULT_MARK_PREFIX: str = "// MARK: - "

# Keywords introducing a type declaration with a conformance list:
DECLARATION_KEYWORDS: tuple[str, ...] = ("class", "struct", "extension", "protocol", "enum")
EXTENSION_KEYWORD: str = "extension"

CONFORMANCE_SEPARATOR: str = ","
CLAUSE_SEPARATOR: str = ":"
