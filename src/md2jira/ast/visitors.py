#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/ast/visitors.py
"""Double-dispatch base class for walking the document tree.

``Node.accept`` calls the ``visit_*`` method named after the node kind. All of
them are abstract, so adding a node kind without teaching every visitor about
it fails at instantiation rather than silently dropping output.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    get_node_children,
)


class NodeVisitor(ABC):
    """One handler per node kind, plus ``visit_children`` for containers.

    Return values are up to the subclass; ``JiraRenderer`` writes into its
    output buffer and returns None.

    Examples
    --------
    A visitor that counts words could implement ``visit_text`` as:

        >>> def visit_text(self, node):
        ...     self.words += len(node.content.split())

    and forward every container kind to ``self.visit_children(node)``.

    """

    # blocks

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Handle the tree root."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any: ...

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any: ...

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any: ...

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any: ...

    @abstractmethod
    def visit_list(self, node: List) -> Any: ...

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any: ...

    @abstractmethod
    def visit_table(self, node: Table) -> Any: ...

    @abstractmethod
    def visit_table_header(self, node: TableHeader) -> Any:
        """Handle the header row, which ``Table.header`` returns."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any: ...

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Handle one cell of a header or body row."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any: ...

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any: ...

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any: ...

    # inlines

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Handle literal text."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any: ...

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any: ...

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any: ...

    @abstractmethod
    def visit_code(self, node: Code) -> Any: ...

    @abstractmethod
    def visit_link(self, node: Link) -> Any: ...

    @abstractmethod
    def visit_image(self, node: Image) -> Any: ...

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Handle a hard break."""

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Handle a newline inside a paragraph."""

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any: ...

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference) -> Any: ...

    def visit_children(self, node: Node) -> None:
        """Dispatch each child of ``node`` in source order."""
        for child in get_node_children(node):
            child.accept(self)
