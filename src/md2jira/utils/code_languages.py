#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/code_languages.py
"""Code block language handling for Jira's ``{code}`` macro."""

from __future__ import annotations

import logging
from typing import Optional

from md2jira.constants import DEFAULT_CODE_LANGUAGE, JIRA_CODE_LANGUAGES

logger = logging.getLogger(__name__)


def validate_code_language(language: Optional[str]) -> str:
    """Return ``language`` if Jira knows it, else ``"none"``.

    Matching is exact and case-sensitive.

    Parameters
    ----------
    language : str or None
        Candidate language tag

    Returns
    -------
    str
        A member of ``JIRA_CODE_LANGUAGES``

    Examples
    --------
        >>> validate_code_language("python")
        'python'
        >>> validate_code_language("Python")
        'none'
        >>> validate_code_language("brainfuck")
        'none'

    """
    if language in JIRA_CODE_LANGUAGES:
        return language
    if language:
        logger.debug("Unsupported code language %r, using %r", language, DEFAULT_CODE_LANGUAGE)
    return DEFAULT_CODE_LANGUAGE


def code_language_from_fence_info(fence_info: Optional[str]) -> str:
    """Derive the Jira language tag from a code fence info string.

    Only the first whitespace-delimited token is considered, so
    ``"python linenums"`` yields ``"python"``. Missing or blank info strings
    yield ``"none"``.
    """
    tokens = fence_info.split() if fence_info else []
    return validate_code_language(tokens[0] if tokens else None)


__all__ = ["code_language_from_fence_info", "validate_code_language"]
