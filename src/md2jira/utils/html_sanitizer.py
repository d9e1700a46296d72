#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/html_sanitizer.py
"""Raw HTML handling for the Jira renderer.

Jira wiki markup has no HTML passthrough, so raw HTML found in Markdown is
either replaced by a placeholder comment (safe mode) or emitted after HTML
comments have been removed.

The module supports two strategies:
- safe: Replace the raw HTML with ``<!-- raw HTML omitted -->``
- filter: Strip ``<!-- ... -->`` comments, run the tag filter, emit the rest
"""

from __future__ import annotations

import logging
import re

from md2jira.constants import RAW_HTML_PLACEHOLDER

logger = logging.getLogger(__name__)

# Non-greedy and DOTALL so multi-line comments are removed one at a time.
_HTML_COMMENT_PATTERN = re.compile(r"<!--(.*?)-->", re.DOTALL)


def strip_html_comments(content: str) -> str:
    """Remove every HTML comment from ``content``.

    Parameters
    ----------
    content : str
        Raw HTML text

    Returns
    -------
    str
        Text with all ``<!--...-->`` spans removed

    Examples
    --------
        >>> strip_html_comments("<b>x</b><!-- note -->y")
        '<b>x</b>y'
        >>> strip_html_comments("<!--a\\nb-->c<!--d-->")
        'c'

    """
    # Removing one comment can join the halves of another, e.g. "<!<!--x-->--y-->".
    stripped = _HTML_COMMENT_PATTERN.sub("", content)
    while stripped != content:
        content, stripped = stripped, _HTML_COMMENT_PATTERN.sub("", stripped)
    return stripped


def filter_html_tags(content: str) -> str:
    """Filter disallowed HTML tags from ``content``.

    All tags are currently allowed, so the content is returned unchanged.
    """
    return content


def sanitize_raw_html(content: str, safe: bool = False) -> str:
    """Prepare a raw HTML fragment for Jira output.

    Parameters
    ----------
    content : str
        Raw HTML from an HTML block or inline HTML node
    safe : bool, default = False
        Replace the fragment with a placeholder comment instead of emitting it

    Returns
    -------
    str
        The placeholder in safe mode, otherwise the tag-filtered content with
        comments removed

    """
    if safe:
        logger.debug("Omitting raw HTML fragment (%d chars) in safe mode", len(content))
        return RAW_HTML_PLACEHOLDER
    return strip_html_comments(filter_html_tags(content))


__all__ = ["filter_html_tags", "sanitize_raw_html", "strip_html_comments"]
