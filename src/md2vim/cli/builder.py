#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Dynamic CLI argument builder for md2vim.

This module generates the command line options from the option dataclasses'
field metadata (``help``, ``cli_name``, ``type``) and builds option objects
back from the parsed arguments, ranking values as

    command line > environment (``MD2VIM_*``) > configuration file > defaults

It also maps exceptions to process exit codes.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, fields
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, Optional, Type

from md2vim.cli.custom_actions import TrackingStoreAction, TrackingStoreFalseAction, TrackingStoreTrueAction
from md2vim.constants import DEFAULT_LOG_LEVEL
from md2vim.exceptions import FileError, OutputWriteError, ParsingError, RenderingError, ValidationError
from md2vim.options.base import CloneFrozenMixin
from md2vim.options.markdown import MarkdownParserOptions
from md2vim.options.vimdoc import VimDocOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


class DynamicCLIBuilder:
    """Builds CLI arguments dynamically from options dataclasses."""

    def __init__(self) -> None:
        """Initialize the CLI builder."""
        self.parser: Optional[argparse.ArgumentParser] = None
        self.dest_to_cli_flag: Dict[str, str] = {}

    def add_options_arguments(self, parser: argparse.ArgumentParser, options_class: Type[Any], title: str) -> None:
        """Add one argument per field of ``options_class`` to ``parser``.

        Parameters
        ----------
        parser : ArgumentParser
            Parser to extend
        options_class : type
            Frozen options dataclass with CLI field metadata
        title : str
            Title of the argument group

        """
        group = parser.add_argument_group(title)
        for field in fields(options_class):
            metadata = field.metadata
            flag = f"--{metadata.get('cli_name', field.name.replace('_', '-'))}"
            help_text = metadata.get("help", "")
            self.dest_to_cli_flag[field.name] = flag

            if field.default is MISSING:
                raise TypeError(f"Option field {options_class.__name__}.{field.name} needs a default")

            if isinstance(field.default, bool):
                action = TrackingStoreFalseAction if field.default else TrackingStoreTrueAction
                group.add_argument(flag, dest=field.name, action=action, default=field.default, help=help_text)
            else:
                group.add_argument(
                    flag,
                    dest=field.name,
                    action=TrackingStoreAction,
                    type=metadata.get("type", str),
                    default=field.default,
                    help=f"{help_text} (default: {field.default!r})",
                )

    def build_parser(self) -> argparse.ArgumentParser:
        """Build the complete argument parser.

        Returns
        -------
        ArgumentParser
            Configured parser

        """
        parser = argparse.ArgumentParser(
            prog="md2vim",
            description="Convert a Markdown file to a Vim help file",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  md2vim README.md doc/myplugin.txt
  md2vim README.md doc/myplugin.txt --desc "Does things" --cols 78
  md2vim README.md - --notoc > doc/myplugin.txt

Every option can also be set with an MD2VIM_<OPTION> environment variable
(e.g. MD2VIM_COLS=78) or in .md2vim.toml, .md2vim.yaml, .md2vim.json or the
[tool.md2vim] table of pyproject.toml.
""",
        )

        parser.add_argument("input", help="Markdown file to convert")
        parser.add_argument("output", help="Vim help file to write, or '-' for stdout")

        self.add_options_arguments(parser, VimDocOptions, "Vimdoc output options")
        self.add_options_arguments(parser, MarkdownParserOptions, "Markdown parsing options")

        config_group = parser.add_argument_group("Configuration")
        config_group.add_argument(
            "--config",
            action=TrackingStoreAction,
            type=str,
            help="Configuration file (TOML, YAML, JSON or pyproject.toml). Overrides the MD2VIM_CONFIG "
            "environment variable and automatic discovery.",
        )
        config_group.add_argument(
            "--no-config",
            action=TrackingStoreTrueAction,
            help="Ignore configuration files",
        )

        logging_group = parser.add_argument_group("Logging")
        logging_group.add_argument(
            "--log-level",
            action=TrackingStoreAction,
            type=str.upper,
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            default=DEFAULT_LOG_LEVEL,
            help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
        )
        logging_group.add_argument("--log-file", action=TrackingStoreAction, type=str, help="Also write logs to a file")
        logging_group.add_argument(
            "--verbose", "-v", action=TrackingStoreTrueAction, help="Verbose output (same as --log-level DEBUG)"
        )
        logging_group.add_argument(
            "--trace", action=TrackingStoreTrueAction, help="Debug logging with timestamps and logger names"
        )

        parser.add_argument("--version", "-V", action="version", version=f"md2vim {get_version()}")

        self.parser = parser
        return parser

    def build_options(
        self,
        parsed_args: argparse.Namespace,
        options_class: Type[CloneFrozenMixin],
        config: Dict[str, Any],
    ) -> Any:
        """Build an options object for ``options_class`` from all sources.

        Parameters
        ----------
        parsed_args : argparse.Namespace
            Parsed command line
        options_class : type
            Options dataclass to instantiate
        config : dict
            Values loaded from a configuration file

        Returns
        -------
        options_class
            Options with command line and environment values layered over
            the configuration file values

        Raises
        ------
        ValidationError
            If a value is rejected by the options class

        """
        explicit = set(getattr(parsed_args, "_provided_args", set()))
        if self.parser is not None:
            explicit.update(a.dest for a in self.parser._actions if getattr(a, "env_provided", False))

        # Non-negated CLI names (cols, norules, ...) are accepted as config keys too
        cli_names = {
            f.metadata["cli_name"]: f.name
            for f in fields(options_class)
            if f.metadata.get("cli_name") and not f.metadata["cli_name"].startswith("no-")
        }
        values = {cli_names.get(str(k), str(k)).replace("-", "_"): v for k, v in config.items()}
        for name in options_class.field_names():
            if name in explicit:
                values[name] = getattr(parsed_args, name)

        try:
            return options_class.from_mapping(values)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid {options_class.__name__} value: {e}", original_error=e) from e


def get_version() -> str:
    """Get the version of the md2vim package."""
    try:
        return version("md2vim")
    except PackageNotFoundError:
        from md2vim import __version__

        return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser using dynamic generation."""
    return DynamicCLIBuilder().build_parser()


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileError, OutputWriteError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
