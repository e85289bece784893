# topmark:header:start
#
#   project      : UtilCore
#   file         : test_files.py
#   file_relpath : tests/cli/test_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `count-lines` and `offsets` commands."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import (
    assert_FILE_NOT_FOUND,
    assert_IO_ERROR,
    assert_SOFTWARE_ERROR,
    assert_SUCCESS,
    output_lines,
    run_cli_in,
)
from tests.conftest import write
from utilcore.cli.commands.files import line_offsets
from utilcore.cli.console import ClickConsole
from utilcore.core.varray import IntVarray

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_count_lines_single_file(tmp_path: Path) -> None:
    write(tmp_path / "a.txt", "a\nb\nc")

    result = run_cli_in(tmp_path, ["--no-color", "count-lines", "a.txt"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["2\ta.txt"]


def test_count_lines_total_when_verbose(tmp_path: Path) -> None:
    write(tmp_path / "a.txt", "1\n2\n")
    write(tmp_path / "b.txt", "1\n")

    result = run_cli_in(tmp_path, ["--no-color", "-v", "count-lines", "a.txt", "b.txt"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["2\ta.txt", "1\tb.txt", "3\ttotal"]


def test_count_lines_requires_files(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "count-lines"])

    assert result.exit_code == 2


def test_count_lines_missing_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "count-lines", "missing.txt"])

    assert_FILE_NOT_FOUND(result)
    assert "missing.txt" in result.output


def test_count_lines_directory_is_io_error(tmp_path: Path) -> None:
    (tmp_path / "d").mkdir()

    result = run_cli_in(tmp_path, ["--no-color", "count-lines", "d"])

    assert_IO_ERROR(result)


def test_count_lines_limit_from_config(tmp_path: Path) -> None:
    """A line_count_limit below the actual count is a fatal overflow."""
    write(tmp_path / "utilcore.toml", "[files]\nline_count_limit = 1\n")
    write(tmp_path / "a.txt", "1\n2\n")

    result = run_cli_in(tmp_path, ["--no-color", "count-lines", "a.txt"])

    assert_SOFTWARE_ERROR(result)


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"", []),
        (b"abc", [0]),
        (b"abc\n", [0]),
        (b"a\nbc\n\nd", [0, 2, 5, 6]),
        (b"\n\n", [0, 1]),
    ],
)
def test_line_offsets(data: bytes, expected: list[int]) -> None:
    assert line_offsets(data).tolist() == expected
    assert line_offsets(data, growth_increment=3).tolist() == expected


def test_offsets_command(tmp_path: Path) -> None:
    write(tmp_path / "f.txt", b"ab\ncdef\ng\n")

    result = run_cli_in(tmp_path, ["--no-color", "offsets", "f.txt"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["0", "3", "8"]


def test_offsets_verbose_reports_longest_line(tmp_path: Path) -> None:
    write(tmp_path / "utilcore.toml", "[varray]\ngrowth_increment = 2\n")
    write(tmp_path / "f.txt", b"ab\ncdef\ng\n")

    result = run_cli_in(tmp_path, ["--no-color", "-v", "offsets", "f.txt"])

    assert_SUCCESS(result)
    assert output_lines(result)[-1] == "longest line: 2 (5 bytes)"


def test_offsets_missing_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "offsets", "nope.bin"])

    assert_FILE_NOT_FOUND(result)


def test_offsets_releases_storage_when_output_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The offset buffer is released even if printing raises."""
    write(tmp_path / "f.txt", b"a\nb\n")
    released: list[bool] = []
    original_release = IntVarray.release

    def _release(self: IntVarray) -> None:
        released.append(True)
        original_release(self)

    def _broken_print(self: ClickConsole, text: str = "", *, nl: bool = True) -> None:
        raise RuntimeError("stdout closed")

    monkeypatch.setattr(IntVarray, "release", _release)
    monkeypatch.setattr(ClickConsole, "print", _broken_print)

    result = run_cli_in(tmp_path, ["--no-color", "offsets", "f.txt"])

    assert isinstance(result.exception, RuntimeError)
    assert released == [True]


def test_offsets_non_seekable_source_is_io_error(tmp_path: Path) -> None:
    """A pipe maps to an I/O exit code instead of a traceback."""
    if not os.path.isdir("/dev/fd"):
        pytest.skip("requires /dev/fd")
    r, w = os.pipe()
    try:
        os.write(w, b"abc\n")
        result = run_cli_in(tmp_path, ["--no-color", "offsets", f"/dev/fd/{r}"])
    finally:
        os.close(r)
        os.close(w)

    assert_IO_ERROR(result)
