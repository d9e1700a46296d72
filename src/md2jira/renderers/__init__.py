#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2jira/renderers/__init__.py
"""AST renderers for converting documents to Jira wiki markup.

Examples
--------
    >>> from md2jira.ast import Document, Heading, Text
    >>> from md2jira.renderers import JiraRenderer
    >>> doc = Document(children=[Heading(level=2, children=[Text(content="Title")])])
    >>> JiraRenderer().render_to_string(doc)
    'h2. Title'

"""

from md2jira.renderers.base import BaseRenderer
from md2jira.renderers.buffer import BlockOutputBuffer
from md2jira.renderers.jira import JiraRenderer, RenderContext

__all__ = [
    "BaseRenderer",
    "BlockOutputBuffer",
    "JiraRenderer",
    "RenderContext",
]
