# topmark:header:start
#
#   project      : ProtoMark
#   file         : diff.py
#   file_relpath : src/protomark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering for marker previews."""

from __future__ import annotations

import difflib
import io
from typing import TYPE_CHECKING

from yachalk import chalk

from protomark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from protomark.config.logging import ProtomarkLogger

logger: ProtomarkLogger = get_logger(__name__)


def unified_diff(
    current: Sequence[str],
    updated: Sequence[str],
    *,
    path: str,
    newline: str = "\n",
) -> str:
    """Return a unified diff between two line images, or an empty string if equal."""
    patch_lines: list[str] = list(
        difflib.unified_diff(
            list(current),
            list(updated),
            fromfile=f"{path} (current)",
            tofile=f"{path} (updated)",
            n=3,
            lineterm=newline,
        )
    )
    logger.trace("Diff for %s: %d line(s)", path, len(patch_lines))
    return "".join(patch_lines)


def render_patch(patch: Sequence[str] | str) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as a sequence of lines or a single multiline string.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        patch = io.StringIO(patch, newline="").readlines()
    lines: list[str] = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        match line[:1]:
            case "-":
                return chalk.bold.red(line)
            case "+":
                return chalk.bold.green(line)
            case "@":
                return chalk.cyan(line)
            case _:
                return chalk.white(line)

    return "".join(f"{process_line(line)}\n" for line in lines)
