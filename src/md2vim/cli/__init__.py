"""Command-line interface for md2vim.

Converts one Markdown file into one Vim help file.

Environment Variable Support
----------------------------
All options support environment variable defaults named after the long
option: MD2VIM_<OPTION> with hyphens replaced by underscores (``--cols``
reads MD2VIM_COLS, ``--log-level`` reads MD2VIM_LOG_LEVEL). MD2VIM_CONFIG
names a configuration file. Command line arguments always override
environment variables, which override configuration files.

Examples
--------
Basic conversion::

    $ md2vim README.md doc/myplugin.txt

Narrower output with a description on the first line::

    $ md2vim README.md doc/myplugin.txt --cols 78 --desc "Fuzzy finding for Vim"

Write to stdout without a table of contents::

    $ md2vim README.md - --notoc

Use environment variables for defaults::

    $ export MD2VIM_PASCAL=true
    $ md2vim README.md doc/MyPlugin.txt

"""

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from md2vim.api import convert_file
from md2vim.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    DynamicCLIBuilder,
    create_parser,
    get_exit_code_for_exception,
)
from md2vim.cli.config import load_config_with_priority
from md2vim.constants import DEFAULT_OUTPUT_EXTENSION, ENV_PREFIX, STDOUT_MARKER
from md2vim.exceptions import Md2VimError
from md2vim.logging_utils import configure_logging
from md2vim.options.markdown import MarkdownParserOptions
from md2vim.options.vimdoc import VimDocOptions

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "DynamicCLIBuilder"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _run(parsed_args: argparse.Namespace, builder: DynamicCLIBuilder, console: Console) -> int:
    if parsed_args.no_config:
        config = {}
    else:
        config = load_config_with_priority(parsed_args.config, os.environ.get(f"{ENV_PREFIX}CONFIG"))

    options: VimDocOptions = builder.build_options(parsed_args, VimDocOptions, config)
    parser_options: MarkdownParserOptions = builder.build_options(parsed_args, MarkdownParserOptions, config)
    logger.debug(f"Resolved options: {options}, {parser_options}")

    input_path = Path(parsed_args.input)
    if parsed_args.output == STDOUT_MARKER:
        filename = input_path.with_suffix(DEFAULT_OUTPUT_EXTENSION).name
        diagnostics = convert_file(input_path, sys.stdout, options, parser_options, filename=filename)
    else:
        diagnostics = convert_file(input_path, parsed_args.output, options, parser_options)

    if diagnostics:
        skipped = sorted({d.node_type for d in diagnostics})
        console.print(
            f"[yellow]Warning:[/yellow] {len(diagnostics)} element(s) have no vimdoc form and were skipped: "
            f"{escape(', '.join(skipped))}"
        )

    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the main CLI entry point."""
    builder = DynamicCLIBuilder()
    parser = builder.build_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)
    console = Console(stderr=True)

    try:
        return _run(parsed_args, builder, console)
    except Md2VimError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        logger.debug("Conversion failed", exc_info=True)
        return get_exit_code_for_exception(e)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_VALIDATION_ERROR
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        logger.debug("Unexpected failure", exc_info=True)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
