#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/parsers/markdown.py
"""Markdown parsing on top of mistune's token stream.

Mistune is created with ``renderer=None``, which makes ``parse`` return plain
token dictionaries with inline children already expanded. This module maps
each token type onto a node class; token types with no mapping (such as
``blank_line``) are skipped. Mistune leaves character references such as
``&amp;`` undecoded in text tokens, so they are decoded here.

"""

from __future__ import annotations

import html
import logging
from typing import Any, Callable

from md2jira.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SoftBreak,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
    ThematicBreak,
)
from md2jira.constants import DEPS_MARKDOWN
from md2jira.exceptions import ParsingError
from md2jira.options.markdown import MarkdownParserOptions
from md2jira.parsers.base import BaseParser, InputData
from md2jira.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

Token = dict[str, Any]
TokenHandler = Callable[[Token], "Node | list[Node] | None"]

# Token types whose only payload is their children.
_CONTAINERS: dict[str, type] = {
    "paragraph": Paragraph,
    "block_text": Paragraph,  # tight list items
    "block_quote": BlockQuote,
    "list_item": ListItem,
    "strong": Strong,
    "emphasis": Emphasis,
    "strikethrough": Strikethrough,
}

# Token types whose raw text is kept verbatim.
_LITERALS: dict[str, type] = {
    "codespan": Code,
    "inline_html": HTMLInline,
    "block_html": HTMLBlock,
}

_MARKERS: dict[str, type] = {
    "thematic_break": ThematicBreak,
    "linebreak": LineBreak,
    "softbreak": SoftBreak,
}

_PLUGIN_SWITCHES = (
    ("parse_strikethrough", "strikethrough"),
    ("parse_tables", "table"),
    ("parse_footnotes", "footnotes"),
)

_SILENT_TOKENS = frozenset({"blank_line"})


def _attrs(token: Token) -> dict[str, Any]:
    attrs = token.get("attrs")
    return attrs if isinstance(attrs, dict) else {}


def _children(token: Token) -> list[Token]:
    children = token.get("children")
    if not isinstance(children, list):
        return []
    return [child for child in children if isinstance(child, dict)]


class MarkdownToAstConverter(BaseParser):
    r"""Markdown parser producing md2jira document trees.

    Parameters
    ----------
    options : MarkdownParserOptions, optional
        Which mistune plugins to enable; defaults to ``MarkdownParserOptions()``

    Examples
    --------
        >>> doc = MarkdownToAstConverter().parse("# Hello\n\nThis is **bold**.")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    Tables are plain paragraphs once the table plugin is off:

        >>> doc = MarkdownToAstConverter(MarkdownParserOptions(parse_tables=False)).parse("| a |\n|---|\n| 1 |")
        >>> type(doc.children[0]).__name__
        'Paragraph'

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

        self._handlers: dict[str, TokenHandler] = {
            "heading": self._heading,
            "block_code": self._code_block,
            "list": self._list,
            "table": self._table,
            "footnotes": lambda token: self._convert(_children(token)),
            "footnote_item": self._footnote_definition,
            "footnote_ref": lambda token: FootnoteReference(identifier=str(token.get("raw", ""))),
            "link": self._link,
            "image": self._image,
        }
        for token_type, container in _CONTAINERS.items():
            self._handlers[token_type] = self._make_container(container)
        for token_type, literal in _LITERALS.items():
            self._handlers[token_type] = self._make_literal(literal)
        self._handlers["text"] = lambda token: Text(content=html.unescape(token.get("raw", "")))
        for token_type, marker in _MARKERS.items():
            self._handlers[token_type] = self._make_marker(marker)

    def _plugins(self) -> list[str]:
        return [plugin for option, plugin in _PLUGIN_SWITCHES if getattr(self.options, option)]

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: InputData) -> Document:
        """Parse Markdown from text, bytes, a path or a stream.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            A ``str`` naming an existing file is read from that file; any
            other ``str`` is the Markdown itself. Bytes must be UTF-8.

        Returns
        -------
        Document

        Raises
        ------
        DependencyError
            mistune is not installed or is older than 3.0
        FileError
            A named file is missing or unreadable
        ParsingError
            The input is not UTF-8, or mistune raised

        """
        text = self._load_text_content(input_data)

        import mistune

        plugins = self._plugins()
        logger.debug("Parsing %d characters of Markdown with plugins %s", len(text), plugins)
        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            try:
                tokens, _state = markdown.parse(text)
            except (ValueError, TypeError, IndexError, KeyError) as e:
                raise ParsingError(
                    f"Failed to parse Markdown: {e}", parsing_stage="tokenizing", original_error=e
                ) from e
            children = self._convert(tokens) if isinstance(tokens, list) else []

        logger.debug("Parsed %d top-level nodes", len(children))
        return Document(children=children)

    def _convert(self, tokens: list[Token]) -> list[Node]:
        """Map a run of sibling tokens, block or inline, to nodes."""
        nodes: list[Node] = []
        for token in tokens:
            if not isinstance(token, dict):
                continue
            token_type = token.get("type", "")
            handler = self._handlers.get(token_type)
            if handler is None:
                if token_type not in _SILENT_TOKENS:
                    logger.debug("Ignoring unsupported token %r", token_type)
                continue
            result = handler(token)
            if isinstance(result, list):
                nodes.extend(result)
            elif result is not None:
                nodes.append(result)
        return nodes

    def _make_container(self, node_class: type) -> TokenHandler:
        return lambda token: node_class(children=self._convert(_children(token)))

    @staticmethod
    def _make_literal(node_class: type) -> TokenHandler:
        return lambda token: node_class(content=token.get("raw", ""))

    @staticmethod
    def _make_marker(node_class: type) -> TokenHandler:
        return lambda token: node_class()

    def _heading(self, token: Token) -> Heading:
        level = _attrs(token).get("level", 1)
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return Heading(level=level, children=self._convert(_children(token)))

    def _code_block(self, token: Token) -> CodeBlock:
        # The whole info string is kept; the renderer picks the language out of it.
        info = _attrs(token).get("info")
        info = info.strip() if isinstance(info, str) else ""
        return CodeBlock(content=token.get("raw", ""), fence_info=info or None)

    def _list(self, token: Token) -> List:
        attrs = _attrs(token)
        return List(
            ordered=bool(attrs.get("ordered", False)),
            children=self._convert([child for child in _children(token) if child.get("type") == "list_item"]),
            start=attrs.get("start", 1),
            tight=bool(token.get("tight", True)),
        )

    def _table(self, token: Token) -> Table:
        """Flatten ``table_head`` and ``table_body``/``table_row`` into header and rows.

        Mistune puts the header cells directly under ``table_head``.
        """
        table = Table()
        for section in _children(token):
            kind = section.get("type")
            if kind == "table_head":
                table.children.append(TableHeader(children=self._cells(section)))
            elif kind == "table_body":
                table.children.extend(TableRow(children=self._cells(row)) for row in _children(section))
        return table

    def _cells(self, row: Token) -> list[Node]:
        return [
            TableCell(children=self._convert(_children(cell)), alignment=_attrs(cell).get("align"))
            for cell in _children(row)
            if cell.get("type") == "table_cell"
        ]

    def _footnote_definition(self, token: Token) -> FootnoteDefinition:
        return FootnoteDefinition(
            identifier=str(_attrs(token).get("key", "")),
            children=self._convert(_children(token)),
        )

    def _link(self, token: Token) -> Link:
        attrs = _attrs(token)
        return Link(url=attrs.get("url", ""), children=self._convert(_children(token)), title=attrs.get("title"))

    def _image(self, token: Token) -> Image:
        # Alt text arrives as child tokens.
        attrs = _attrs(token)
        return Image(url=attrs.get("url", ""), children=self._convert(_children(token)), title=attrs.get("title"))


def markdown_to_ast(markdown_content: InputData, options: MarkdownParserOptions | None = None) -> Document:
    r"""Parse ``markdown_content`` with a fresh ``MarkdownToAstConverter``.

    Examples
    --------
    >>> len(markdown_to_ast("# Hello\n\nWorld").children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)


__all__ = ["MarkdownToAstConverter", "markdown_to_ast"]
