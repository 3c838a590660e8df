# topmark:header:start
#
#   project      : ProtoMark
#   file         : mark.py
#   file_relpath : src/protomark/cli/commands/mark.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ProtoMark ``mark`` command.

Scans source files for type declarations and extensions with protocol
conformances and adds one ``// MARK: - <Label>`` comment per conformance.
Performs a dry run by default and writes files when ``--apply`` is given.

Input modes:
  • **Buffer mode (default)**: every matching line of every PATH is processed.
  • **Selection mode**: ``--selection LINE:COL[-LINE:COL]`` (repeatable, zero-based)
    parses only the selected text of a single PATH.
  • **STDIN**: a single ``-`` as PATH reads content from STDIN and writes the
    updated content to STDOUT.

Examples:

    $ protomark mark Sources/App/ViewController.swift

    $ protomark mark --apply Sources/App/*.swift

    $ protomark mark --selection 3:20-3:58 --stdout Model.swift
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from protomark.cli.cli_types import SelectionParam
from protomark.cli.cmd_common import (
    STDIN_MARKER,
    build_config,
    get_console,
    get_effective_verbosity,
    read_source,
    write_source,
)
from protomark.cli.errors import ProtomarkUsageError
from protomark.cli.exit_codes import ExitCode
from protomark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_formatting_options,
)
from protomark.config.logging import get_logger
from protomark.editing.applier import apply_insertions, detect_newline
from protomark.parser.engine import parse
from protomark.parser.types import ParseMode, SourceBuffer
from protomark.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from protomark.cli.console import ConsoleLike
    from protomark.config import Config
    from protomark.config.logging import ProtomarkLogger
    from protomark.parser.types import MarkerInsertion, SelectionRange

logger: ProtomarkLogger = get_logger(__name__)


def _report_file(
    console: ConsoleLike,
    path: str,
    insertions: list[MarkerInsertion],
    *,
    applied: bool,
    vlevel: int,
) -> None:
    markers: int = sum(ins.marker_count for ins in insertions)
    if vlevel < 0:
        return
    if markers == 0:
        if vlevel > 0:
            console.print(f"{path}: no markers to add")
        return

    verb: str = "added" if applied else "would add"
    console.print(f"{console.styled(path, bold=True)}: {verb} {markers} marker(s)")
    if vlevel > 0:
        for ins in insertions:
            for line in ins.lines:
                if line.strip():
                    console.print(f"  after line {ins.line_index + 1}: {line.strip()}")


@click.command(
    name="mark",
    help="Add '// MARK: -' comments for protocol conformances.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--selection",
    "selections",
    type=SelectionParam(),
    multiple=True,
    help="Parse only the selected text, as zero-based LINE:COL[-LINE:COL] (repeatable).",
)
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", is_flag=True, help="Show unified diffs of the changes.")
@click.option(
    "--stdout", "to_stdout", is_flag=True, help="Print the updated content instead of a summary."
)
@common_config_options
@common_formatting_options
def mark_command(
    *,
    paths: tuple[str, ...],
    selections: tuple[SelectionRange, ...],
    apply_changes: bool,
    diff: bool,
    to_stdout: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
    indent: str | None,
    mark_prefix: str | None,
) -> None:
    """Plan and (optionally) apply markers for each PATH.

    Args:
        paths (tuple[str, ...]): Source files, or ``-`` for STDIN.
        selections (tuple[SelectionRange, ...]): Selections; switches to selection mode.
        apply_changes (bool): Write changes to files; otherwise perform a dry run.
        diff (bool): Show unified diffs.
        to_stdout (bool): Print the updated content.
        config_paths (tuple[str, ...]): Extra config files to merge.
        no_config (bool): Skip config discovery in the working directory.
        indent (str | None): Indentation override.
        mark_prefix (str | None): Mark prefix override.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    color_enabled: bool = bool(ctx.obj.get("color_enabled"))

    use_stdin: bool = STDIN_MARKER in paths
    if use_stdin and len(paths) > 1:
        raise ProtomarkUsageError("'-' (STDIN) must be the only PATH.")
    if use_stdin and apply_changes:
        raise ProtomarkUsageError("--apply cannot be used when reading from STDIN.")
    if selections and len(paths) > 1:
        raise ProtomarkUsageError("--selection requires exactly one PATH.")

    config: Config = build_config(
        config_paths=config_paths,
        no_config=no_config,
        overrides={"indent": indent, "mark_prefix": mark_prefix},
    )
    mode: ParseMode = ParseMode.SELECTION_ONLY if selections else ParseMode.IGNORE_SELECTION
    print_content: bool = to_stdout or use_stdin

    pending_changes: int = 0
    for path in paths:
        text: str = read_source(path)
        buffer: SourceBuffer = SourceBuffer.from_text(text, selections)
        insertions: list[MarkerInsertion] = parse(buffer, mode, config)
        updated: list[str] = apply_insertions(buffer.lines, insertions)
        changed: bool = updated != list(buffer.lines)
        logger.info("%s: %d insertion(s), changed=%s", path, len(insertions), changed)

        if diff and changed:
            patch: str = unified_diff(
                buffer.lines, updated, path=path, newline=detect_newline(buffer.lines)
            )
            console.print(render_patch(patch) if color_enabled else patch, nl=False)

        if print_content:
            console.print("".join(updated), nl=False)
            continue

        if apply_changes and changed:
            write_source(path, updated)
        elif changed:
            pending_changes += 1
        _report_file(console, path, insertions, applied=apply_changes, vlevel=vlevel)

    if pending_changes and not apply_changes:
        ctx.exit(ExitCode.WOULD_CHANGE)
