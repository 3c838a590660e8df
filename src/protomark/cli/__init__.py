# topmark:header:start
#
#   project      : ProtoMark
#   file         : __init__.py
#   file_relpath : src/protomark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProtoMark CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    protomark = "protomark.cli.main:cli"

All subcommands live in `protomark.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
