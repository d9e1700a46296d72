#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The AST is the hand-off point between the Markdown parser and the Jira
renderer: the parser produces a tree of nodes, the renderer walks it with a
visitor.

The module consists of two components:

- nodes: AST node classes representing document structure
- visitors: Visitor base class for AST traversal

Examples
--------
Basic usage:

    >>> from md2jira.ast import Document, Heading, Paragraph, Text
    >>> from md2jira.renderers.jira import JiraRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text(content="Title")]),
    ...     Paragraph(children=[Text(content="Hello world")])
    ... ])
    >>> JiraRenderer().render_to_string(doc)
    'h1. Title\\nHello world'

"""

from __future__ import annotations

from md2jira.ast.nodes import (
    Alignment,
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
from md2jira.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "FootnoteDefinition",
    "FootnoteReference",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "SoftBreak",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableHeader",
    "TableRow",
    "Text",
    "ThematicBreak",
    "get_node_children",
]
