# topmark:header:start
#
#   project      : ProtoMark
#   file         : __init__.py
#   file_relpath : src/protomark/editing/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Buffer editing helpers that apply planned markers."""

from __future__ import annotations

from protomark.editing.applier import apply_insertions, detect_newline

__all__ = [
    "apply_insertions",
    "detect_newline",
]
