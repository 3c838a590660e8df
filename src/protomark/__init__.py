# topmark:header:start
#
#   project      : ProtoMark
#   file         : __init__.py
#   file_relpath : src/protomark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProtoMark package.

ProtoMark scans Swift-style source text for type declarations and extensions
that list protocol conformances, and generates one ``// MARK: - <Label>``
navigation comment per conformance. It exposes a small typed parsing API and a
CLI that applies the generated markers to files.
"""

from __future__ import annotations
