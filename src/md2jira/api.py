"""The major exported API functions for Markdown to Jira conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2jira/api.py
import logging
from pathlib import Path
from typing import IO, Any, Optional, TypeVar, Union

from md2jira.ast.nodes import Document, Node
from md2jira.exceptions import InvalidOptionsError
from md2jira.options.base import BaseParserOptions, BaseRendererOptions
from md2jira.options.jira import JiraRendererOptions
from md2jira.options.markdown import MarkdownParserOptions
from md2jira.parsers.base import InputData
from md2jira.parsers.markdown import MarkdownToAstConverter
from md2jira.renderers.jira import JiraRenderer

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", BaseParserOptions, BaseRendererOptions)

Source = Union[str, Path, IO[bytes], IO[str], bytes, Node]


def _split_kwargs_for_parser_and_renderer(kwargs: dict) -> tuple[dict, dict]:
    """Split kwargs between parser and renderer based on their field names.

    Unknown names are logged and dropped.

    Returns
    -------
    tuple[dict, dict]
        (parser_kwargs, renderer_kwargs)

    """
    parser_fields = MarkdownParserOptions.field_names()
    renderer_fields = JiraRendererOptions.field_names()

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


def _merge_options(
    options: Optional[OptionsT], options_class: type[OptionsT], overrides: dict[str, Any], name: str
) -> OptionsT:
    """Apply keyword overrides on top of an options object (or the defaults)."""
    if options is not None and not isinstance(options, options_class):
        raise InvalidOptionsError(converter_name=name, expected_type=options_class, received_type=type(options))
    base = options if options is not None else options_class()
    return base.create_updated(**overrides) if overrides else base


def to_ast(
    source: InputData,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> Document:
    r"""Parse Markdown into an AST Document.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, a file path, a file-like object or raw UTF-8 bytes.
    parser_options : MarkdownParserOptions, optional
        Pre-configured parser options.
    kwargs : Any
        Individual ``MarkdownParserOptions`` fields overriding ``parser_options``.

    Returns
    -------
    Document
        Parsed document tree.

    Examples
    --------
    >>> doc = to_ast("* one\n* two", parse_tables=False)
    >>> type(doc.children[0]).__name__
    'List'

    """
    parser_kwargs, _ = _split_kwargs_for_parser_and_renderer(kwargs)
    options = _merge_options(parser_options, MarkdownParserOptions, parser_kwargs, "markdown")
    return MarkdownToAstConverter(options).parse(source)


def _resolve(
    source: Source,
    parser_options: Optional[MarkdownParserOptions],
    renderer_options: Optional[JiraRendererOptions],
    kwargs: dict[str, Any],
) -> tuple[Node, JiraRenderer]:
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    renderer = JiraRenderer(_merge_options(renderer_options, JiraRendererOptions, renderer_kwargs, "jira"))

    if isinstance(source, Node):
        logger.debug("Rendering pre-built AST rooted at %s", type(source).__name__)
        return source, renderer

    parser = MarkdownToAstConverter(_merge_options(parser_options, MarkdownParserOptions, parser_kwargs, "markdown"))
    return parser.parse(source), renderer


def to_jira(
    source: Source,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[JiraRendererOptions] = None,
    **kwargs: Any,
) -> str:
    r"""Convert Markdown to Jira wiki markup.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], bytes, or Node
        Markdown text, a file path, a file-like object, raw UTF-8 bytes, or an
        already parsed AST.
    parser_options : MarkdownParserOptions, optional
        Pre-configured parser options.
    renderer_options : JiraRendererOptions, optional
        Pre-configured renderer options.
    kwargs : Any
        Individual option fields. Kwargs are split between parser and renderer
        based on field names and override the matching options object.

    Returns
    -------
    str
        Jira markup without a trailing newline.

    Raises
    ------
    DependencyError
        If mistune is not installed.
    ParsingError
        If the input is not valid UTF-8.
    FileError
        If an input file cannot be found or read.

    Examples
    --------
    >>> to_jira("# Title\n\nSome **bold** text")
    'h1. Title\nSome *bold* text'
    >>> to_jira("<div>\nx\n</div>", safe=True)
    '<!-- raw HTML omitted -->'

    """
    root, renderer = _resolve(source, parser_options, renderer_options, kwargs)
    return renderer.render_to_string(root)


def convert(
    source: Source,
    output: Union[str, Path, IO[bytes], IO[str]],
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[JiraRendererOptions] = None,
    **kwargs: Any,
) -> None:
    """Convert Markdown to Jira markup and write it to ``output``.

    The document is fully rendered before anything is written, so a failed
    conversion leaves the destination untouched. The written text ends with a
    single newline.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], bytes, or Node
        Same as for :func:`to_jira`.
    output : str, Path, IO[bytes], or IO[str]
        Output file path or stream.

    Raises
    ------
    OutputWriteError
        If the output path cannot be written.

    """
    root, renderer = _resolve(source, parser_options, renderer_options, kwargs)
    renderer.render(root, output)
