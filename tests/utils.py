"""Test utilities for md2jira test suite.

This module provides small builders for AST fragments so that renderer tests
stay readable.
"""

from md2jira.ast import Document, List, ListItem, Node, Paragraph, Text
from md2jira.options.jira import JiraRendererOptions
from md2jira.renderers.jira import JiraRenderer


def para(text: str) -> Paragraph:
    """Create a paragraph holding a single text node."""
    return Paragraph(children=[Text(content=text)])


def bullet_list(*items: str, ordered: bool = False, tight: bool = True) -> List:
    """Create a flat list whose items each hold one paragraph."""
    return List(ordered=ordered, tight=tight, children=[ListItem(children=[para(item)]) for item in items])


def nested_list(labels: list[str], ordered: list[bool] | None = None) -> List:
    """Create a list nested ``len(labels)`` levels deep, one item per level.

    ``labels[0]`` is the outermost item; ``ordered[i]`` controls the list at
    depth ``i + 1``.
    """
    ordered = ordered or [False] * len(labels)
    inner: List | None = None
    for label, is_ordered in reversed(list(zip(labels, ordered))):
        children: list[Node] = [para(label)]
        if inner is not None:
            children.append(inner)
        inner = List(ordered=is_ordered, children=[ListItem(children=children)])
    assert inner is not None
    return inner


def render(*children: Node, **options) -> str:
    """Render ``children`` wrapped in a Document with a fresh renderer."""
    renderer = JiraRenderer(JiraRendererOptions(**options))
    return renderer.render_to_string(Document(children=list(children)))
