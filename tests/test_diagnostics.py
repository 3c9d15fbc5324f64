"""Tests for the stderr diagnostic sink."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from fskit.diagnostics import NOT_A_DIRECTORY, OPEN_FAILED, report
from fskit.size import calculate_directory_size


class TestReport:
    """Tests for report."""

    def test_one_line_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a message is written to stderr with a single newline."""
        report("Failed to allocate memory !")

        captured = capsys.readouterr()
        assert captured.err == "Failed to allocate memory !\n"
        assert captured.out == ""

    def test_paths_written_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test markup-like and emoji-like text is not interpreted."""
        path = "/tmp/[bold]x[/bold]/:smile:/" + "long" * 40

        report(NOT_A_DIRECTORY.format(path=path))

        assert capsys.readouterr().err == f"Path is not a directory: {path}\n"

    @pytest.mark.parametrize("name", ["a\tb", "a\rb"])
    def test_control_characters_kept(
        self, name: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test tabs and carriage returns in paths are not altered."""
        path = f"/tmp/{name}"

        report(NOT_A_DIRECTORY.format(path=path))

        assert capsys.readouterr().err == f"Path is not a directory: {path}\n"

    @pytest.mark.skipif(sys.platform == "win32", reason="control characters in filenames")
    @pytest.mark.parametrize("name", ["a\tb", "a\rb"])
    def test_walk_reports_exact_path(
        self, tmp_path: Path, allocator, name: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a non-directory root with control characters is reported verbatim."""
        target = tmp_path / name
        target.write_text("x")

        assert calculate_directory_size(str(target), allocator) == 0
        assert capsys.readouterr().err == f"Path is not a directory: {target}\n"

    def test_open_failure_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the open-failure message carries the path and code."""
        report(OPEN_FAILED.format(path="/data", code=13))

        assert capsys.readouterr().err == "Can't open directory /data. Error code: 13\n"
