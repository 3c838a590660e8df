# topmark:header:start
#
#   project      : ProtoMark
#   file         : __main__.py
#   file_relpath : src/protomark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ProtoMark via ``python -m protomark``.

It delegates directly to :func:`protomark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ProtoMark is launched.

Examples:
    Preview the markers for a Swift file::

        python -m protomark mark Sources/App/ViewController.swift
"""

from __future__ import annotations

from protomark.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
