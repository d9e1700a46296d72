#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2jira/parsers/__init__.py
"""Parsers that turn source documents into the md2jira AST."""

from md2jira.parsers.base import BaseParser
from md2jira.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
