#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2jira/options/jira.py
"""Configuration options for Jira wiki markup rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2jira.constants import DEFAULT_SAFE_MODE
from md2jira.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JiraRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Jira rendering.

    Parameters
    ----------
    safe : bool, default False
        Replace every raw HTML block and inline fragment with
        ``<!-- raw HTML omitted -->`` instead of emitting it.

    """

    safe: bool = field(
        default=DEFAULT_SAFE_MODE,
        metadata={"help": "Replace raw HTML with a placeholder comment", "importance": "security"},
    )
