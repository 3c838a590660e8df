# topmark:header:start
#
#   project      : ProtoMark
#   file         : __init__.py
#   file_relpath : src/protomark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProtoMark configuration: immutable `Config` snapshots and the `MutableConfig` builder."""

from __future__ import annotations

from protomark.config.model import DEFAULT_CONFIG, Config, MutableConfig

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "MutableConfig",
]
