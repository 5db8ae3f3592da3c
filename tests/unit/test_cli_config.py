#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cli_config.py
"""Unit tests for configuration loading and CLI option resolution.

Tests cover:
- Loading TOML, YAML, JSON and pyproject.toml configuration
- Configuration errors
- Parent directory discovery
- Precedence of command line, environment and configuration values
- Exit code mapping

"""

import json
from pathlib import Path

import pytest

from md2vim.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
    DynamicCLIBuilder,
    get_exit_code_for_exception,
)
from md2vim.cli.config import find_config_in_parents, load_config_file, load_config_with_priority
from md2vim.cli.custom_actions import env_key_for
from md2vim.exceptions import (
    ConfigError,
    FileNotFoundError,
    ListStateError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2vim.options import MarkdownParserOptions, VimDocOptions


@pytest.mark.unit
class TestLoadConfigFile:
    """Tests for the individual configuration formats."""

    def test_toml(self, tmp_path: Path) -> None:
        path = tmp_path / ".md2vim.toml"
        path.write_text('column_width = 78\ndescription = "Does things"\n', encoding="utf-8")
        assert load_config_file(path) == {"column_width": 78, "description": "Does things"}

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / ".md2vim.yaml"
        path.write_text("cols: 60\nnotoc: true\n", encoding="utf-8")
        assert load_config_file(path) == {"cols": 60, "notoc": True}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / ".md2vim.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / ".md2vim.json"
        path.write_text(json.dumps({"pascal_tags": True}), encoding="utf-8")
        assert load_config_file(str(path)) == {"pascal_tags": True}

    def test_pyproject_section(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.md2vim]\nno_rules = true\n', encoding="utf-8")
        assert load_config_file(path) == {"no_rules": True}

    def test_pyproject_without_section(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not a file"):
            load_config_file(tmp_path)

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        path = tmp_path / "config.ini"
        path.write_text("[x]\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Unsupported"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "name,content",
        [
            (".md2vim.toml", "column_width = \n"),
            (".md2vim.yaml", "key: [unclosed\n"),
            (".md2vim.json", "{not json"),
            (".md2vim.json", "[1, 2]"),
            (".md2vim.yaml", "- a\n- b\n"),
        ],
    )
    def test_malformed(self, tmp_path: Path, name: str, content: str) -> None:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config_file(path)

    def test_config_error_is_validation_error(self) -> None:
        assert issubclass(ConfigError, ValidationError)


@pytest.mark.unit
class TestDiscovery:
    """Tests for locating configuration files."""

    def test_found_in_parent(self, tmp_path: Path) -> None:
        config = tmp_path / ".md2vim.toml"
        config.write_text("no_toc = true\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_dedicated_file_preferred_over_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.md2vim]\nno_toc = true\n", encoding="utf-8")
        (tmp_path / ".md2vim.yaml").write_text("no_toc: true\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path).name == ".md2vim.yaml"

    def test_pyproject_without_section_is_skipped(self, tmp_path: Path) -> None:
        config = tmp_path / ".md2vim.toml"
        config.write_text("no_toc = true\n", encoding="utf-8")
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert find_config_in_parents(project) == config.resolve()

    def test_explicit_path_wins(self, tmp_path: Path, isolated_cwd: Path) -> None:
        (isolated_cwd / ".md2vim.toml").write_text("column_width = 10\n", encoding="utf-8")
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"column_width": 20}', encoding="utf-8")
        assert load_config_with_priority(str(explicit), None) == {"column_width": 20}

    def test_env_path_used_before_discovery(self, tmp_path: Path, isolated_cwd: Path) -> None:
        (isolated_cwd / ".md2vim.toml").write_text("column_width = 10\n", encoding="utf-8")
        env_config = tmp_path / "env.yaml"
        env_config.write_text("column_width: 30\n", encoding="utf-8")
        assert load_config_with_priority(None, str(env_config)) == {"column_width": 30}

    def test_discovered_from_cwd(self, isolated_cwd: Path) -> None:
        (isolated_cwd / ".md2vim.toml").write_text("column_width = 10\n", encoding="utf-8")
        assert load_config_with_priority() == {"column_width": 10}


@pytest.mark.unit
class TestBuildOptions:
    """Tests for layering command line, environment and config values."""

    def _parse(self, argv: list[str]) -> tuple[DynamicCLIBuilder, object]:
        builder = DynamicCLIBuilder()
        parser = builder.build_parser()
        return builder, parser.parse_args(["in.md", "out.txt", *argv])

    def test_defaults(self) -> None:
        builder, args = self._parse([])
        assert builder.build_options(args, VimDocOptions, {}) == VimDocOptions()
        assert builder.build_options(args, MarkdownParserOptions, {}) == MarkdownParserOptions()

    def test_command_line_values(self) -> None:
        builder, args = self._parse(["--cols", "60", "--desc", "Hi", "--notoc", "--pascal", "--tabs", "2"])
        options = builder.build_options(args, VimDocOptions, {})
        assert options == VimDocOptions(column_width=60, description="Hi", no_toc=True, pascal_tags=True, indent_width=2)

    def test_negated_parser_flags(self) -> None:
        builder, args = self._parse(["--no-parse-tables", "--no-parse-frontmatter"])
        options = builder.build_options(args, MarkdownParserOptions, {})
        assert options.parse_tables is False
        assert options.parse_frontmatter is False
        assert options.parse_footnotes is True

    def test_config_values_by_field_and_cli_name(self) -> None:
        builder, args = self._parse([])
        options = builder.build_options(args, VimDocOptions, {"cols": 70, "no-rules": True, "pascal_tags": True})
        assert options.column_width == 70
        assert options.no_rules is True
        assert options.pascal_tags is True

    def test_command_line_beats_config(self) -> None:
        builder, args = self._parse(["--cols", "50"])
        assert builder.build_options(args, VimDocOptions, {"column_width": 70}).column_width == 50

    def test_environment_beats_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MD2VIM_COLS", "66")
        monkeypatch.setenv("MD2VIM_NOTOC", "yes")
        builder, args = self._parse([])
        options = builder.build_options(args, VimDocOptions, {"column_width": 70, "no_toc": False})
        assert options.column_width == 66
        assert options.no_toc is True

    def test_command_line_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MD2VIM_COLS", "66")
        builder, args = self._parse(["--cols", "40"])
        assert builder.build_options(args, VimDocOptions, {}).column_width == 40

    def test_invalid_environment_value_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MD2VIM_COLS", "wide")
        builder, args = self._parse([])
        assert builder.build_options(args, VimDocOptions, {}).column_width == 80

    def test_invalid_value_raises_validation_error(self) -> None:
        builder, args = self._parse(["--cols", "0"])
        with pytest.raises(ValidationError):
            builder.build_options(args, VimDocOptions, {})


@pytest.mark.unit
class TestCliHelpers:
    """Tests for environment names and exit codes."""

    @pytest.mark.parametrize(
        "option_strings,dest,expected",
        [
            (["--cols"], "column_width", "MD2VIM_COLS"),
            (["--log-level"], "log_level", "MD2VIM_LOG_LEVEL"),
            (["--verbose", "-v"], "verbose", "MD2VIM_VERBOSE"),
            (["-x"], "extra", "MD2VIM_EXTRA"),
        ],
    )
    def test_env_key_for(self, option_strings: list[str], dest: str, expected: str) -> None:
        assert env_key_for(option_strings, dest) == expected

    @pytest.mark.parametrize(
        "exception,code",
        [
            (ValidationError("bad"), EXIT_VALIDATION_ERROR),
            (ConfigError("bad"), EXIT_VALIDATION_ERROR),
            (FileNotFoundError("x.md"), EXIT_FILE_ERROR),
            (OutputWriteError("x.txt"), EXIT_FILE_ERROR),
            (ParsingError("bad"), EXIT_PARSING_ERROR),
            (RenderingError("bad"), EXIT_RENDERING_ERROR),
            (ListStateError("bad"), EXIT_RENDERING_ERROR),
            (RuntimeError("bad"), EXIT_ERROR),
        ],
    )
    def test_exit_codes(self, exception: Exception, code: int) -> None:
        assert get_exit_code_for_exception(exception) == code
