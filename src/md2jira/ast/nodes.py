#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/ast/nodes.py
"""Document tree produced by the Markdown parser.

The tree is format neutral: nothing in it knows about Jira. Containers keep
their nodes, in source order, in a ``children`` list; leaves that carry
literal source text keep it in ``content``.

Blocks
    Document, Heading, Paragraph, CodeBlock, BlockQuote, List, ListItem,
    Table, TableHeader, TableRow, TableCell, ThematicBreak, HTMLBlock,
    FootnoteDefinition

Inlines
    Text, Emphasis, Strong, Strikethrough, Code, Link, Image, LineBreak,
    SoftBreak, HTMLInline, FootnoteReference

Each class names its visitor method in ``visit_name``; ``Node.accept``
dispatches on it.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Optional

Alignment = Literal["left", "center", "right"]


class Node:
    """Base of every tree node.

    ``accept(visitor)`` calls ``visitor.visit_<visit_name>(self)`` and returns
    its result.
    """

    visit_name: ClassVar[str] = ""

    def accept(self, visitor: Any) -> Any:
        if not self.visit_name:
            raise NotImplementedError(f"{type(self).__name__} cannot be visited")
        return getattr(visitor, f"visit_{self.visit_name}")(self)


# Blocks


@dataclass
class Document(Node):
    """Tree root.

    ``metadata`` is free-form and never rendered.
    """

    visit_name: ClassVar[str] = "document"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Heading(Node):
    """ATX or setext heading; ``level`` must be 1 to 6."""

    visit_name: ClassVar[str] = "heading"

    level: int
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass
class Paragraph(Node):
    visit_name: ClassVar[str] = "paragraph"

    children: list[Node] = field(default_factory=list)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code.

    Parameters
    ----------
    content : str
        The code, never parsed further
    fence_info : str, optional
        Everything after the opening fence, verbatim, e.g. ``"python linenums"``.
        None for indented blocks and bare fences.

    """

    visit_name: ClassVar[str] = "code_block"

    content: str
    fence_info: Optional[str] = None


@dataclass
class BlockQuote(Node):
    visit_name: ClassVar[str] = "block_quote"

    children: list[Node] = field(default_factory=list)


@dataclass
class List(Node):
    """Bullet or numbered list whose children are ``ListItem`` nodes.

    ``start`` is the first number of an ordered list. ``tight`` is False when
    blank lines separate the items.
    """

    visit_name: ClassVar[str] = "list"

    ordered: bool
    children: list[Node] = field(default_factory=list)
    start: int = 1
    tight: bool = True


@dataclass
class ListItem(Node):
    """One list entry; its children are blocks, nested lists included."""

    visit_name: ClassVar[str] = "list_item"

    children: list[Node] = field(default_factory=list)


@dataclass
class Table(Node):
    """GFM pipe table.

    ``children`` holds at most one ``TableHeader`` first, then the body
    ``TableRow`` nodes.
    """

    visit_name: ClassVar[str] = "table"

    children: list[Node] = field(default_factory=list)

    @property
    def header(self) -> Optional[TableHeader]:
        return next((child for child in self.children if isinstance(child, TableHeader)), None)

    @property
    def rows(self) -> list[TableRow]:
        return [child for child in self.children if isinstance(child, TableRow)]


@dataclass
class TableHeader(Node):
    """Header row; its children are the header cells."""

    visit_name: ClassVar[str] = "table_header"

    children: list[Node] = field(default_factory=list)


@dataclass
class TableRow(Node):
    visit_name: ClassVar[str] = "table_row"

    children: list[Node] = field(default_factory=list)


@dataclass
class TableCell(Node):
    """Cell of a header or body row.

    ``alignment`` records the column's delimiter-row alignment, if any.
    """

    visit_name: ClassVar[str] = "table_cell"

    children: list[Node] = field(default_factory=list)
    alignment: Alignment | None = None


@dataclass
class ThematicBreak(Node):
    visit_name: ClassVar[str] = "thematic_break"


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, kept verbatim and unsanitized."""

    visit_name: ClassVar[str] = "html_block"

    content: str


@dataclass
class FootnoteDefinition(Node):
    """Body of footnote ``[^identifier]``."""

    visit_name: ClassVar[str] = "footnote_definition"

    identifier: str
    children: list[Node] = field(default_factory=list)


# Inlines


@dataclass
class Text(Node):
    visit_name: ClassVar[str] = "text"

    content: str


@dataclass
class Emphasis(Node):
    visit_name: ClassVar[str] = "emphasis"

    children: list[Node] = field(default_factory=list)


@dataclass
class Strong(Node):
    visit_name: ClassVar[str] = "strong"

    children: list[Node] = field(default_factory=list)


@dataclass
class Strikethrough(Node):
    """``~~text~~``; only produced when strikethrough parsing is on."""

    visit_name: ClassVar[str] = "strikethrough"

    children: list[Node] = field(default_factory=list)


@dataclass
class Code(Node):
    """Inline code span."""

    visit_name: ClassVar[str] = "code"

    content: str


@dataclass
class Link(Node):
    """Hyperlink or autolink; ``children`` is the link text."""

    visit_name: ClassVar[str] = "link"

    url: str
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None


@dataclass
class Image(Node):
    """Image; ``children`` holds the alternative text."""

    visit_name: ClassVar[str] = "image"

    url: str
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None


@dataclass
class LineBreak(Node):
    """Hard break (trailing backslash or two trailing spaces)."""

    visit_name: ClassVar[str] = "line_break"


@dataclass
class SoftBreak(Node):
    """Plain newline inside a paragraph."""

    visit_name: ClassVar[str] = "soft_break"


@dataclass
class HTMLInline(Node):
    visit_name: ClassVar[str] = "html_inline"

    content: str


@dataclass
class FootnoteReference(Node):
    """``[^identifier]`` in running text."""

    visit_name: ClassVar[str] = "footnote_reference"

    identifier: str


def get_node_children(node: Node) -> list[Node]:
    """Return a copy of ``node.children``, or an empty list for leaves.

    Examples
    --------
    >>> len(get_node_children(Heading(level=1, children=[Text("a"), Text("b")])))
    2

    """
    return list(getattr(node, "children", None) or [])
