#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2jira parsing and rendering.

Each stage of the pipeline has its own frozen Options dataclass.
"""

from __future__ import annotations

from md2jira.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2jira.options.jira import JiraRendererOptions
from md2jira.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "JiraRendererOptions",
    "MarkdownParserOptions",
]
