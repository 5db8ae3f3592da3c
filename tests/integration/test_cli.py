#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_cli.py
"""Integration tests for the md2vim command line.

Tests cover:
- File and stdout output
- Exit codes for file, validation and argument errors
- Environment variable and configuration file option sources
- The skipped element warning

"""

import logging
from pathlib import Path

import pytest

from md2vim.cli import main
from md2vim.cli.builder import EXIT_FILE_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the root logger changes made by ``main``."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def readme(isolated_cwd: Path, sample_markdown: str) -> Path:
    path = isolated_cwd / "README.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path


@pytest.mark.integration
@pytest.mark.cli
class TestConversion:
    """Tests for successful runs."""

    def test_writes_help_file(self, readme: Path, isolated_cwd: Path) -> None:
        target = isolated_cwd / "rigellians.txt"
        assert main([str(readme), str(target)]) == EXIT_SUCCESS
        result = target.read_text(encoding="utf-8")
        assert result.startswith("rigellians.txt\n\n")
        assert "*rigellians-contents* ~" in result

    def test_stdout(self, readme: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(readme), "-", "--notoc"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out.startswith("README.txt\n\n")
        assert "*readme-usage* ~" in out
        assert "CONTENTS" not in out

    def test_options(self, readme: Path, isolated_cwd: Path) -> None:
        target = isolated_cwd / "tool.txt"
        args = [str(readme), str(target), "--cols", "50", "--desc", "Probes", "--norules", "--pascal"]
        assert main(args) == EXIT_SUCCESS
        lines = target.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "tool.txt" + " " * 36 + "Probes"
        assert not any(line.startswith("=") for line in lines)
        assert any(line.endswith("*Tool-Installation* ~") for line in lines)

    def test_skipped_elements_are_reported(
        self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = isolated_cwd / "table.md"
        source.write_text("| a |\n|---|\n| 1 |\n", encoding="utf-8")
        assert main([str(source), str(isolated_cwd / "t.txt")]) == EXIT_SUCCESS
        err = capsys.readouterr().err
        assert "Warning:" in err
        assert "Table" in err


@pytest.mark.integration
@pytest.mark.cli
class TestErrors:
    """Tests for failing runs and their exit codes."""

    def test_missing_input(self, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(isolated_cwd / "missing.md"), "out.txt"]) == EXIT_FILE_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_unwritable_output(self, readme: Path, isolated_cwd: Path) -> None:
        assert main([str(readme), str(isolated_cwd / "no" / "such" / "dir.txt")]) == EXIT_FILE_ERROR

    def test_invalid_column_width(self, readme: Path) -> None:
        assert main([str(readme), "out.txt", "--cols", "0"]) == EXIT_VALIDATION_ERROR

    def test_non_integer_column_width(self, readme: Path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([str(readme), "out.txt", "--cols", "wide"])
        assert excinfo.value.code == 2

    def test_missing_output_argument(self, readme: Path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([str(readme)])
        assert excinfo.value.code == 2

    def test_bad_config_file(self, readme: Path, isolated_cwd: Path) -> None:
        config = isolated_cwd / "broken.toml"
        config.write_text("cols = \n", encoding="utf-8")
        assert main([str(readme), "out.txt", "--config", str(config)]) == EXIT_VALIDATION_ERROR

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert capsys.readouterr().out.startswith("md2vim ")


@pytest.mark.integration
@pytest.mark.cli
class TestOptionSources:
    """Tests for environment variables and configuration files."""

    def test_environment_flag(
        self, readme: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("MD2VIM_NOTOC", "1")
        assert main([str(readme), "-"]) == EXIT_SUCCESS
        assert "CONTENTS" not in capsys.readouterr().out

    def test_environment_value(
        self, readme: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("MD2VIM_COLS", "30")
        assert main([str(readme), "-"]) == EXIT_SUCCESS
        assert "\n" + "=" * 30 + "\n" in capsys.readouterr().out

    def test_discovered_config_file(
        self, readme: Path, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (isolated_cwd / ".md2vim.toml").write_text("cols = 30\nno_toc = true\n", encoding="utf-8")
        assert main([str(readme), "-"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "\n" + "=" * 30 + "\n" in out
        assert "CONTENTS" not in out

    def test_no_config_ignores_config_file(
        self, readme: Path, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (isolated_cwd / ".md2vim.toml").write_text("no_toc = true\n", encoding="utf-8")
        assert main([str(readme), "-", "--no-config"]) == EXIT_SUCCESS
        assert "CONTENTS" in capsys.readouterr().out

    def test_command_line_beats_config_file(
        self, readme: Path, isolated_cwd: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (isolated_cwd / ".md2vim.yaml").write_text("cols: 30\n", encoding="utf-8")
        assert main([str(readme), "-", "--cols", "35"]) == EXIT_SUCCESS
        assert "\n" + "=" * 35 + "\n" in capsys.readouterr().out

    def test_environment_config_path(
        self, readme: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "elsewhere.json"
        config.write_text('{"pascal_tags": true}', encoding="utf-8")
        monkeypatch.setenv("MD2VIM_CONFIG", str(config))
        assert main([str(readme), "-"]) == EXIT_SUCCESS
        assert "*README-Usage* ~" in capsys.readouterr().out
