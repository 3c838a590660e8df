# topmark:header:start
#
#   project      : ProtoMark
#   file         : test_mark.py
#   file_relpath : tests/cli/test_mark.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ``protomark mark`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_SUCCESS,
    assert_USAGE_ERROR,
    assert_WOULD_CHANGE,
    run_cli_in,
)
from tests.conftest import SWIFT_SOURCE, mark_cli
from protomark.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

MARKED_SOURCE: str = (
    "import UIKit\n"
    "\n"
    "class ViewController: UIViewController, UITableViewDelegate {\n"
    "\n"
    "    // MARK: - View Controller\n"
    "\n"
    "    // MARK: - Table View Delegate\n"
    "    var items: [String] = []\n"
    "}\n"
    "\n"
    "// MARK: - Table View Data Source\n"
    "extension ViewController: UITableViewDataSource {\n"
    "}\n"
)


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path: Path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


@mark_cli
def test_dry_run_reports_and_leaves_file(tmp_path: Path) -> None:
    """A dry run exits WOULD_CHANGE and does not touch the file."""
    path: Path = _write(tmp_path, "ViewController.swift", SWIFT_SOURCE)
    result: Result = run_cli_in(tmp_path, ["mark", "ViewController.swift"])

    assert_WOULD_CHANGE(result)
    assert "ViewController.swift: would add 3 marker(s)" in result.output
    assert path.read_text(encoding="utf-8") == SWIFT_SOURCE


@mark_cli
def test_verbose_dry_run_lists_markers(tmp_path: Path) -> None:
    """With -v each planned marker is listed."""
    _write(tmp_path, "ViewController.swift", SWIFT_SOURCE)
    result: Result = run_cli_in(tmp_path, ["-v", "mark", "ViewController.swift"])

    assert_WOULD_CHANGE(result)
    assert "after line 3: // MARK: - View Controller" in result.output
    assert "after line 6: // MARK: - Table View Data Source" in result.output


@mark_cli
def test_apply_writes_markers(tmp_path: Path) -> None:
    """--apply writes the markers in place."""
    path: Path = _write(tmp_path, "ViewController.swift", SWIFT_SOURCE)
    result: Result = run_cli_in(tmp_path, ["mark", "--apply", "ViewController.swift"])

    assert_SUCCESS(result)
    assert "added 3 marker(s)" in result.output
    assert path.read_text(encoding="utf-8") == MARKED_SOURCE


@mark_cli
def test_apply_preserves_crlf(tmp_path: Path) -> None:
    """Files with CRLF line endings keep them, including the generated lines."""
    path: Path = tmp_path / "Model.swift"
    path.write_bytes(b"extension Model: Codable {\r\n}\r\n")
    result: Result = run_cli_in(tmp_path, ["mark", "--apply", "Model.swift"])

    assert_SUCCESS(result)
    assert path.read_bytes() == b"// MARK: - Codable\r\nextension Model: Codable {\r\n}\r\n"


@mark_cli
def test_nothing_to_mark(tmp_path: Path) -> None:
    """Files without conformances exit SUCCESS with no report."""
    _write(tmp_path, "main.swift", "print(\"hello\")\n")
    result: Result = run_cli_in(tmp_path, ["mark", "main.swift"])

    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_stdout_prints_updated_content(tmp_path: Path) -> None:
    """--stdout prints the updated content instead of a summary."""
    _write(tmp_path, "ViewController.swift", SWIFT_SOURCE)
    result: Result = run_cli_in(tmp_path, ["mark", "--stdout", "ViewController.swift"])

    assert_SUCCESS(result)
    assert result.output == MARKED_SOURCE


@mark_cli
def test_stdin_content(tmp_path: Path) -> None:
    """`-` reads content from STDIN and writes the result to STDOUT."""
    result: Result = run_cli_in(tmp_path, ["mark", "-"], input_text="extension A: Equatable {}\n")

    assert_SUCCESS(result)
    assert result.output == "// MARK: - Equatable\nextension A: Equatable {}\n"


@mark_cli
def test_stdin_with_apply_is_rejected(tmp_path: Path) -> None:
    """STDIN content cannot be written in place."""
    result: Result = run_cli_in(tmp_path, ["mark", "--apply", "-"], input_text="")
    assert_USAGE_ERROR(result)


@mark_cli
def test_selection_mode(tmp_path: Path) -> None:
    """--selection parses only the selected conformance list."""
    _write(
        tmp_path,
        "VC.swift",
        "class ViewController: UIViewController, UITableViewDelegate {\n}\n",
    )
    result: Result = run_cli_in(
        tmp_path, ["mark", "--selection", "0:22-0:58", "--stdout", "VC.swift"]
    )

    assert_SUCCESS(result)
    assert result.output == (
        "class ViewController: UIViewController, UITableViewDelegate {\n"
        "\n"
        "    // MARK: - View Controller\n"
        "\n"
        "    // MARK: - Table View Delegate\n"
        "}\n"
    )


@mark_cli
def test_selection_requires_single_path(tmp_path: Path) -> None:
    """Selections apply to exactly one file."""
    _write(tmp_path, "A.swift", SWIFT_SOURCE)
    _write(tmp_path, "B.swift", SWIFT_SOURCE)
    result: Result = run_cli_in(tmp_path, ["mark", "--selection", "0:0", "A.swift", "B.swift"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_malformed_selection(tmp_path: Path) -> None:
    """A malformed selection is rejected by Click's parameter validation."""
    _write(tmp_path, "A.swift", SWIFT_SOURCE)
    result: Result = run_cli_in(tmp_path, ["mark", "--selection", "line3", "A.swift"])
    assert result.exit_code == 2
    assert "Invalid selection" in result.output


@mark_cli
def test_diff_output(tmp_path: Path) -> None:
    """--diff prints a unified diff of the added markers."""
    _write(tmp_path, "ViewController.swift", SWIFT_SOURCE)
    result: Result = run_cli_in(tmp_path, ["mark", "--diff", "ViewController.swift"])

    assert_WOULD_CHANGE(result)
    assert "+++ ViewController.swift (updated)" in result.output
    assert "+    // MARK: - View Controller" in result.output


@mark_cli
def test_missing_file(tmp_path: Path) -> None:
    """A missing input file exits FILE_NOT_FOUND."""
    result: Result = run_cli_in(tmp_path, ["mark", "Missing.swift"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND


@mark_cli
def test_invalid_indent_is_config_error(tmp_path: Path) -> None:
    """A non-whitespace indent exits CONFIG_ERROR."""
    _write(tmp_path, "A.swift", SWIFT_SOURCE)
    result: Result = run_cli_in(tmp_path, ["mark", "--indent", "xx", "A.swift"])
    assert result.exit_code == ExitCode.CONFIG_ERROR


@mark_cli
def test_config_file_in_working_directory(tmp_path: Path) -> None:
    """protomark.toml in the working directory changes the output."""
    _write(tmp_path, "protomark.toml", '[formatting]\nmark_prefix = "// MARK: "\n')
    _write(tmp_path, "A.swift", "extension A: Equatable {}\n")
    result: Result = run_cli_in(tmp_path, ["mark", "--stdout", "A.swift"])

    assert_SUCCESS(result)
    assert result.output.startswith("// MARK: Equatable\n")

    result = run_cli_in(tmp_path, ["mark", "--no-config", "--stdout", "A.swift"])
    assert result.output.startswith("// MARK: - Equatable\n")


@mark_cli
def test_form_feed_keeps_reported_line_numbers(tmp_path: Path) -> None:
    """A form feed inside a line does not shift the reported target line."""
    _write(tmp_path, "A.swift", "// page\x0c break\nclass A: B, C {\n}\n")
    result: Result = run_cli_in(tmp_path, ["-v", "mark", "A.swift"])

    assert_WOULD_CHANGE(result)
    assert "after line 2: // MARK: - B" in result.output
