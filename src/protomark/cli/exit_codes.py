# topmark:header:start
#
#   project      : ProtoMark
#   file         : exit_codes.py
#   file_relpath : src/protomark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ProtoMark CLI.

Values follow the BSD `sysexits` convention where practical. ``WOULD_CHANGE=2``
signals a dry run that found markers to add; Click's own usage errors also exit
with 2, so tests check ``result.exception is None`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ProtoMark CLI."""

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # dry run: markers would be added

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
