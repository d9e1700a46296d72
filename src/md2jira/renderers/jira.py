#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/renderers/jira.py
"""Jira wiki markup rendering from AST.

This module provides the JiraRenderer class which converts AST nodes to Jira
wiki markup. Traversal state (list depth, tight paragraphs, table header
cells) lives on an explicit stack of immutable ``RenderContext`` values that
is created fresh for every render call.

"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Generator

from md2jira.ast.nodes import (
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
from md2jira.ast.visitors import NodeVisitor
from md2jira.constants import (
    FORCE_UNORDERED_LISTS,
    JIRA_CELL_DELIMITER,
    JIRA_CODE_CLOSE,
    JIRA_HARD_BREAK,
    JIRA_HEADER_CELL_DELIMITER,
    JIRA_HORIZONTAL_RULE,
    JIRA_ORDERED_MARKER,
    JIRA_QUOTE_CLOSE,
    JIRA_QUOTE_OPEN,
    JIRA_SOFT_BREAK,
    JIRA_UNORDERED_MARKER,
)
from md2jira.options.jira import JiraRendererOptions
from md2jira.renderers.base import BaseRenderer
from md2jira.renderers.buffer import BlockOutputBuffer
from md2jira.utils.code_languages import code_language_from_fence_info
from md2jira.utils.decorators import debug_timer
from md2jira.utils.html_sanitizer import sanitize_raw_html

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """Traversal state visible to the node being rendered.

    Parameters
    ----------
    in_tight : bool, default False
        Paragraphs render inline, without block separation (inside lists)
    list_item_level : int, default 0
        Nesting depth of the enclosing list; 0 outside any list
    list_item_ordered : bool, default False
        Whether list items use the ordered marker
    in_table_header : bool, default False
        Cells render with the header delimiter
    last_in_row : bool, default False
        The cell being rendered is the last one of its row
    footnote_index : int, default 0
        Number of footnotes emitted so far; stays 0 while footnotes render
        as nothing

    """

    in_tight: bool = False
    list_item_level: int = 0
    list_item_ordered: bool = False
    in_table_header: bool = False
    last_in_row: bool = False
    footnote_index: int = 0


class JiraRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to Jira wiki markup.

    A renderer instance holds only its options. Each ``render_to_string`` call
    gets its own output buffer and context stack, so one instance can render
    any number of documents.

    Parameters
    ----------
    options : JiraRendererOptions or None, default = None
        Jira rendering options

    Examples
    --------
        >>> from md2jira.ast import Document, Heading, Strong, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, children=[Text(content="Hello")])
        ... ])
        >>> JiraRenderer().render_to_string(doc)
        'h1. Hello'
        >>> JiraRenderer().render_to_string(Strong(children=[Text(content="bold")]))
        '*bold*'

    """

    def __init__(self, options: JiraRendererOptions | None = None):
        """Initialize the Jira renderer with options."""
        BaseRenderer._validate_options_type(options, JiraRendererOptions, "jira")
        options = options or JiraRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JiraRendererOptions = options
        self._buffer = BlockOutputBuffer()
        self._context_stack: list[RenderContext] = [RenderContext()]

    def render_to_string(self, doc: Node) -> str:
        """Render an AST to Jira markup.

        Parameters
        ----------
        doc : Node
            Root of the tree to render, usually a Document; any node is accepted

        Returns
        -------
        str
            Jira markup with trailing newlines removed

        """
        self._buffer = BlockOutputBuffer()
        self._context_stack = [RenderContext()]

        with debug_timer(logger, "Rendering (jira)"):
            doc.accept(self)

        return self._buffer.getvalue().rstrip("\n")

    @property
    def context(self) -> RenderContext:
        """The innermost traversal context."""
        return self._context_stack[-1]

    @contextmanager
    def _scoped(self, **changes: Any) -> Generator[RenderContext, None, None]:
        """Push a modified copy of the current context for the enclosed block."""
        scoped = replace(self.context, **changes)
        self._context_stack.append(scoped)
        try:
            yield scoped
        finally:
            self._context_stack.pop()

    def _render_cells(self, cells: list[Node]) -> None:
        last_index = len(cells) - 1
        for i, cell in enumerate(cells):
            with self._scoped(last_in_row=i == last_index):
                cell.accept(self)

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        self.visit_children(node)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node as ``hN. text``."""
        with self._buffer.block():
            self._buffer.out(f"h{node.level}. ")
            self.visit_children(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Inside lists paragraphs run inline with the item marker; elsewhere
        they form a block followed by a blank line.
        """
        if self.context.in_tight:
            self.visit_children(node)
            return

        with self._buffer.block():
            self.visit_children(node)
        self._buffer.blocksep()

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a ``{code:lang}`` macro.

        Languages outside Jira's supported set fall back to ``none``.
        """
        language = code_language_from_fence_info(node.fence_info)
        with self._buffer.block():
            self._buffer.out(f"{{code:{language}}}")
            with self._buffer.block():
                self._buffer.out(node.content)
            self._buffer.out(JIRA_CODE_CLOSE)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node inside ``{quote}`` markers."""
        with self._buffer.block():
            with self._buffer.container(JIRA_QUOTE_OPEN, JIRA_QUOTE_CLOSE):
                self.visit_children(node)

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Items are always tight. Ordered lists use bullet markers too: Jira
        mis-renders nested numbered lists.
        """
        ordered = False if FORCE_UNORDERED_LISTS else node.ordered
        with self._scoped(
            in_tight=True,
            list_item_level=self.context.list_item_level + 1,
            list_item_ordered=ordered,
        ):
            with self._buffer.block():
                self.visit_children(node)

        if self.context.list_item_level == 0:
            self._buffer.blocksep()

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node with one marker per nesting level."""
        marker = JIRA_ORDERED_MARKER if self.context.list_item_ordered else JIRA_UNORDERED_MARKER
        prefix = marker * self.context.list_item_level + " "
        with self._buffer.block():
            with self._buffer.container(prefix, ""):
                self.visit_children(node)

    def visit_table(self, node: Table) -> None:
        """Render the header row, if any, then the body rows."""
        with self._buffer.block():
            if node.header is not None:
                node.header.accept(self)
            for row in node.rows:
                row.accept(self)
        self._buffer.blocksep()

    def visit_table_header(self, node: TableHeader) -> None:
        """Render the header row with ``||`` delimiters."""
        with self._scoped(in_table_header=True):
            with self._buffer.block():
                self._render_cells(node.children)

    def visit_table_row(self, node: TableRow) -> None:
        """Render a body row with ``|`` delimiters."""
        with self._buffer.block():
            self._render_cells(node.children)

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node.

        The last cell of a row also closes the row with its delimiter.
        """
        delimiter = JIRA_HEADER_CELL_DELIMITER if self.context.in_table_header else JIRA_CELL_DELIMITER
        self._buffer.out(delimiter)
        self.visit_children(node)
        if self.context.last_in_row:
            self._buffer.out(delimiter)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node as ``----``."""
        with self._buffer.block():
            self._buffer.out(JIRA_HORIZONTAL_RULE)

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node."""
        with self._buffer.block():
            self._buffer.out(sanitize_raw_html(node.content, safe=self.options.safe))

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Footnote definitions produce no output."""
        logger.debug("Skipping footnote definition %r", node.identifier)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node verbatim."""
        self._buffer.out(node.content)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node as ``_text_``."""
        with self._buffer.container("_", "_"):
            self.visit_children(node)

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node as ``*text*``."""
        with self._buffer.container("*", "*"):
            self.visit_children(node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node as ``-text-``."""
        with self._buffer.container("-", "-"):
            self.visit_children(node)

    def visit_code(self, node: Code) -> None:
        """Render a Code node as ``{{code}}``."""
        self._buffer.out("{{", node.content, "}}")

    def visit_link(self, node: Link) -> None:
        """Render a Link node as ``[text|url]``, or ``[url]`` without text."""
        self._buffer.out("[")
        self.visit_children(node)
        if node.children:
            self._buffer.out("|")
        self._buffer.out(node.url, "]")

    def visit_image(self, node: Image) -> None:
        """Render an Image node as ``!url!``; alt text is dropped."""
        self._buffer.out("!", node.url, "!")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a hard LineBreak node."""
        self._buffer.out(JIRA_HARD_BREAK)

    def visit_soft_break(self, node: SoftBreak) -> None:
        """Render a SoftBreak node as a newline."""
        self._buffer.out(JIRA_SOFT_BREAK)

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node."""
        self._buffer.out(sanitize_raw_html(node.content, safe=self.options.safe))

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Footnote references produce no output."""
        logger.debug("Skipping footnote reference %r", node.identifier)


__all__ = ["JiraRenderer", "RenderContext"]
