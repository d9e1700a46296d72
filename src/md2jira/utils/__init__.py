#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/__init__.py
"""Utility modules for md2jira package.

This package contains the code-language whitelist, the raw HTML sanitizer,
dependency and timing decorators, and output helpers.
"""

from md2jira.utils.code_languages import code_language_from_fence_info, validate_code_language
from md2jira.utils.html_sanitizer import filter_html_tags, sanitize_raw_html, strip_html_comments

__all__ = [
    "code_language_from_fence_info",
    "filter_html_tags",
    "sanitize_raw_html",
    "strip_html_comments",
    "validate_code_language",
]
