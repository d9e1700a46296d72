#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2jira/options/markdown.py
"""Configuration options for Markdown parsing.

This module defines the options class for turning Markdown text into the
md2jira AST.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2jira.constants import DEFAULT_PARSE_FOOTNOTES, DEFAULT_PARSE_STRIKETHROUGH, DEFAULT_PARSE_TABLES
from md2jira.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_footnotes : bool, default False
        Whether to parse footnote references and definitions. Footnotes
        produce no Jira output, so enabling this only removes the ``[^x]``
        source text from the rendered result.

    Examples
    --------
        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> options.create_updated(parse_footnotes=True).parse_footnotes
        True

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Do not parse strikethrough syntax (~~text~~)",
            "cli_name": "no-strikethrough",
            "importance": "core",
        },
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Do not parse GFM pipe tables", "cli_name": "no-tables", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={
            "help": "Parse footnote references and definitions (they render as nothing)",
            "cli_name": "footnotes",
            "importance": "advanced",
        },
    )
