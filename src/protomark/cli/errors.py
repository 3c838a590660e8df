# topmark:header:start
#
#   project      : ProtoMark
#   file         : errors.py
#   file_relpath : src/protomark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ProtoMark CLI.

Each exception carries the `ExitCode` Click exits with. They are shown through
the project console when one is present in the Click context.
"""

from __future__ import annotations

from typing import IO, Any

import click

from protomark.cli.exit_codes import ExitCode


class ProtomarkError(click.ClickException):
    """Base class for all ProtoMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ProtomarkUsageError(ProtomarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ProtomarkConfigError(ProtomarkError):
    """Error for configuration errors (invalid values in a config source)."""

    exit_code = ExitCode.CONFIG_ERROR


class ProtomarkFileNotFoundError(ProtomarkError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ProtomarkIOError(ProtomarkError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class ProtomarkEncodingError(ProtomarkError):
    """Error for files that are not valid UTF-8 text."""

    exit_code = ExitCode.ENCODING_ERROR
