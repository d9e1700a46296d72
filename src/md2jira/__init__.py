"""md2jira - Convert Markdown documents to Jira wiki markup.

md2jira parses Markdown (CommonMark plus GFM strikethrough and tables) with
mistune, builds a small AST, and renders it to the markup understood by Jira
issue descriptions and comments.

Rendering rules worth knowing:

- Ordered lists are rendered with bullet markers (``*``, ``**``, ...).
- Fenced code keeps its language only when Jira's ``{code}`` macro supports it;
  otherwise the block is tagged ``{code:none}``.
- Raw HTML is passed through with comments removed, or replaced entirely by a
  placeholder comment in safe mode.
- Footnotes produce no output.

Requirements
------------
- Python 3.10+
- mistune 3

Examples
--------
Convert a Markdown string:

    >>> from md2jira import to_jira
    >>> to_jira("## Steps\\n\\n1. build\\n2. ship")
    'h2. Steps\\n* build\\n* ship'

Render an AST built by hand:

    >>> from md2jira import JiraRenderer
    >>> from md2jira.ast import Code, Paragraph
    >>> JiraRenderer().render_to_string(Paragraph(children=[Code(content="x")]))
    '{{x}}'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2jira requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2jira.api import convert, to_ast, to_jira  # noqa: E402
from md2jira.exceptions import (  # noqa: E402
    ConfigurationError,
    DependencyError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    InvalidOptionsError,
    Md2JiraError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2jira.options import JiraRendererOptions, MarkdownParserOptions  # noqa: E402
from md2jira.parsers.markdown import MarkdownToAstConverter, markdown_to_ast  # noqa: E402
from md2jira.renderers.jira import JiraRenderer  # noqa: E402

__all__ = [
    "ConfigurationError",
    "DependencyError",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "InvalidOptionsError",
    "JiraRenderer",
    "JiraRendererOptions",
    "MarkdownParserOptions",
    "MarkdownToAstConverter",
    "Md2JiraError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "__version__",
    "convert",
    "markdown_to_ast",
    "to_ast",
    "to_jira",
]
