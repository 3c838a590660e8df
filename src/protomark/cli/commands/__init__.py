# topmark:header:start
#
#   project      : ProtoMark
#   file         : __init__.py
#   file_relpath : src/protomark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProtoMark CLI subcommands."""
