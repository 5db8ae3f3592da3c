"""The major exported API functions for Markdown to vimdoc conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2vim/api.py
import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from md2vim.ast.nodes import Document
from md2vim.constants import MARKDOWN_EXTENSIONS
from md2vim.exceptions import OutputWriteError
from md2vim.options.markdown import MarkdownParserOptions
from md2vim.options.vimdoc import VimDocOptions
from md2vim.parsers.markdown import MarkdownToAstConverter
from md2vim.renderers.vimdoc import RenderDiagnostic, VimDocRenderer
from md2vim.utils.io_utils import write_content

logger = logging.getLogger(__name__)

Source = Union[str, Path, IO[bytes], IO[str], bytes, Document]


def _split_kwargs(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split kwargs between parser and renderer based on their field names.

    Returns
    -------
    tuple[dict, dict]
        (parser_kwargs, renderer_kwargs)

    """
    parser_fields = set(MarkdownParserOptions.field_names())
    renderer_fields = set(VimDocOptions.field_names())

    parser_kwargs = {}
    renderer_kwargs = {}
    unmatched = []
    for k, v in kwargs.items():
        if k in parser_fields:
            parser_kwargs[k] = v
        elif k in renderer_fields:
            renderer_kwargs[k] = v
        else:
            unmatched.append(k)

    if unmatched:
        logger.warning(f"Ignoring options that match neither parser nor renderer fields: {unmatched}")

    return parser_kwargs, renderer_kwargs


def _merge_options(base: Any, default_class: type, overrides: dict[str, Any]) -> Any:
    if base is None:
        return default_class(**overrides)
    if overrides:
        return base.create_updated(**overrides)
    return base


def to_ast(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    parser_options: Optional[MarkdownParserOptions] = None,
) -> Document:
    """Parse Markdown into an AST Document.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, a path to a Markdown file, a stream, or raw bytes
    parser_options : MarkdownParserOptions, optional
        Markdown parsing options

    Returns
    -------
    Document
        AST document node

    """
    return MarkdownToAstConverter(parser_options).parse(source)


def render_vimdoc(
    document: Document, filename: str, options: Optional[VimDocOptions] = None
) -> tuple[str, list[RenderDiagnostic]]:
    """Render an AST Document to vimdoc, returning the text and its diagnostics.

    A ``description`` key in the document metadata (from YAML front matter)
    fills in the description when ``options`` does not set one.

    Parameters
    ----------
    document : Document
        AST document to render
    filename : str
        Name of the help file; its stem prefixes every help tag
    options : VimDocOptions, optional
        Rendering options

    Returns
    -------
    tuple[str, list[RenderDiagnostic]]
        Rendered help text and the diagnostics for skipped nodes

    """
    options = options or VimDocOptions()
    front_matter_description = document.metadata.get("description")
    if not options.description and isinstance(front_matter_description, str) and front_matter_description:
        logger.debug("Using description from document front matter")
        options = options.create_updated(description=front_matter_description.strip())

    renderer = VimDocRenderer(filename, options)
    text = renderer.render_to_string(document)
    return text, list(renderer.diagnostics)


def to_vimdoc(
    source: Source,
    filename: str,
    options: Optional[VimDocOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert Markdown to Vim help text.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], bytes, or Document
        Markdown text, a path to a Markdown file, a stream, raw bytes, or an
        already parsed AST Document
    filename : str
        Name of the help file being produced, e.g. ``"myplugin.txt"``
    options : VimDocOptions, optional
        Vimdoc rendering options
    parser_options : MarkdownParserOptions, optional
        Markdown parsing options
    kwargs : Any
        Individual options, split between parser and renderer by field
        name. They override the corresponding fields of ``options`` and
        ``parser_options``.

    Returns
    -------
    str
        Vim help file content

    Raises
    ------
    ParsingError
        If the Markdown cannot be parsed
    RenderingError
        If rendering fails

    Examples
    --------
    Basic conversion:
        >>> help_text = to_vimdoc("# Usage\\n\\nRun it.", "tool.txt")

    With options:
        >>> help_text = to_vimdoc("README.md", "tool.txt", VimDocOptions(no_toc=True))

    Using kwargs:
        >>> help_text = to_vimdoc("README.md", "tool.txt", column_width=78, pascal_tags=True)

    """
    parser_kwargs, renderer_kwargs = _split_kwargs(kwargs)
    options = _merge_options(options, VimDocOptions, renderer_kwargs)

    if isinstance(source, Document):
        document = source
    else:
        document = to_ast(source, _merge_options(parser_options, MarkdownParserOptions, parser_kwargs))

    text, _ = render_vimdoc(document, filename, options)
    return text


def convert_file(
    input_path: Union[str, Path],
    output: Union[str, Path, IO[bytes], IO[str]],
    options: Optional[VimDocOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    filename: Optional[str] = None,
) -> list[RenderDiagnostic]:
    """Convert a Markdown file into a Vim help file.

    Parameters
    ----------
    input_path : str or Path
        Markdown file to read
    output : str, Path, IO[bytes], or IO[str]
        Destination path or stream
    options : VimDocOptions, optional
        Vimdoc rendering options
    parser_options : MarkdownParserOptions, optional
        Markdown parsing options
    filename : str, optional
        Help file name used for the first line and the tags. Defaults to the
        name of ``output`` when it is a path.

    Returns
    -------
    list[RenderDiagnostic]
        Diagnostics for nodes that could not be represented in vimdoc

    Raises
    ------
    FileNotFoundError
        If the input file does not exist
    OutputWriteError
        If the output cannot be written

    """
    input_path = Path(input_path)
    if input_path.suffix.lower() not in MARKDOWN_EXTENSIONS:
        logger.info(f"Input {input_path} has no Markdown extension; parsing it as Markdown anyway")

    if filename is None:
        if not isinstance(output, (str, Path)):
            raise ValueError("filename is required when writing to a stream")
        filename = Path(output).name

    document = to_ast(input_path, parser_options)
    text, diagnostics = render_vimdoc(document, filename, options)

    try:
        write_content(text, output)
    except OSError as e:
        raise OutputWriteError(str(output), original_error=e) from e

    logger.info(f"Wrote {filename} ({len(diagnostics)} skipped elements)")
    return diagnostics
