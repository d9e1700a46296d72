#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/renderers/base.py
"""Renderer interface.

A renderer turns a document tree into markup. Subclasses implement
``render_to_string``; ``render`` adds the file and stream handling on top.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2jira.ast.nodes import Node
from md2jira.exceptions import InvalidOptionsError
from md2jira.options.base import BaseRendererOptions
from md2jira.utils.io_utils import write_content

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Common surface of md2jira renderers.

    Parameters
    ----------
    options : BaseRendererOptions, optional
        Stored as ``self.options``; subclasses substitute their defaults for None

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Node) -> str:
        """Return the markup for ``doc`` without a trailing newline."""

    def render(self, doc: Node, output: OutputTarget) -> None:
        """Write the markup for ``doc`` to a path or an open stream.

        A non-empty rendering is terminated by exactly one newline. An empty
        document writes nothing, although a path target is still created.

        Raises
        ------
        OutputWriteError
            When a path target cannot be written

        """
        text = self.render_to_string(doc)
        write_content(f"{text}\n" if text else "", output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Raise ``InvalidOptionsError`` unless ``options`` is None or an ``expected_type``."""
        if options is None or isinstance(options, expected_type):
            return
        raise InvalidOptionsError(
            converter_name=renderer_name,
            expected_type=expected_type,
            received_type=type(options),
        )
