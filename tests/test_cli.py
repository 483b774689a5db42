"""Tests for the command-line interface."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from mdlistsort.cli import main

ROOT = Path(__file__).resolve().parents[1]


class TestMain:
    """Tests for the CLI main function."""

    def test_writes_to_stdout(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Sorted text goes to stdout, the new cursor to stderr."""
        source = tmp_path / "notes.md"
        source.write_text("# Todo\n- b\n- a\n", encoding="utf-8")

        assert main([str(source), "--line", "1", "--column", "2"]) == 0

        captured = capsys.readouterr()
        assert captured.out == "# Todo\n- a\n- b\n"
        assert captured.err.strip().splitlines()[-1] == "2:2"
        assert source.read_text(encoding="utf-8") == "# Todo\n- b\n- a\n"

    def test_descending_to_file(self, tmp_path: Path) -> None:
        source = tmp_path / "notes.md"
        target = tmp_path / "sorted.md"
        source.write_text("- a\n  - x\n  - y\n- b", encoding="utf-8")

        assert main([str(source), "-l", "0", "-d", "-o", str(target)]) == 0

        assert target.read_text(encoding="utf-8") == "- b\n- a\n  - y\n  - x"

    def test_in_place_keeps_crlf(self, tmp_path: Path) -> None:
        """Rewriting in place keeps Windows line endings."""
        source = tmp_path / "notes.md"
        source.write_bytes(b"- b\r\n- a\r\n")

        assert main([str(source), "--line", "0", "--in-place"]) == 0

        assert source.read_bytes() == b"- a\r\n- b\r\n"

    def test_non_list_line_is_noop(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "notes.md"
        source.write_text("text\n- b\n- a", encoding="utf-8")

        assert main([str(source), "--line", "0"]) == 0

        assert capsys.readouterr().out == "text\n- b\n- a"

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.md"), "--line", "0"]) == 1

    def test_line_outside_document(self, tmp_path: Path) -> None:
        source = tmp_path / "notes.md"
        source.write_text("- a\n- b", encoding="utf-8")

        assert main([str(source), "--line", "7"]) == 1

    def test_output_and_in_place_conflict(self, tmp_path: Path) -> None:
        """--output and --in-place are mutually exclusive."""
        source = tmp_path / "notes.md"
        source.write_text("- a", encoding="utf-8")

        with pytest.raises(SystemExit):
            main([str(source), "--line", "0", "-i", "-o", "out.md"])


class TestModuleEntryPoint:
    """End-to-end CLI test using subprocess."""

    @pytest.mark.integration
    def test_python_m_invocation(self, tmp_path: Path) -> None:
        source = tmp_path / "notes.md"
        source.write_text("- cherry\n- apple\n- banana\n", encoding="utf-8")
        env = {**os.environ, "PYTHONPATH": str(ROOT / "src")}

        result = subprocess.run(
            [sys.executable, "-m", "mdlistsort", str(source), "--line", "0", "-o", "-"],
            capture_output=True,
            text=True,
            timeout=60,
            env=env,
        )

        assert result.returncode == 0, f"CLI failed: {result.stderr}"
        assert result.stdout == "- apple\n- banana\n- cherry\n"
        assert result.stderr.strip().splitlines()[-1] == "2:0"
