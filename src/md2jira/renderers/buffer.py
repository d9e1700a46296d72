#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/renderers/buffer.py
"""Output accumulation with block separation for line-oriented markup.

Jira markup is line oriented: block elements start on a fresh line and
top-level blocks are separated by a blank line. ``BlockOutputBuffer`` keeps the
emitted fragments and answers the "does the output end with a newline / blank
line" questions that block separation needs.

"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator


class BlockOutputBuffer:
    """Append-only text buffer with block and container helpers.

    Examples
    --------
        >>> buf = BlockOutputBuffer()
        >>> with buf.block():
        ...     buf.out("h1. ", "Title")
        >>> buf.blocksep()
        >>> buf.getvalue()
        'h1. Title\\n\\n'

    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        # Last two characters written; enough to answer every tail query.
        self._tail: str = ""

    @property
    def is_empty(self) -> bool:
        """True when nothing has been written yet."""
        return not self._tail

    def ends_with_newline(self) -> bool:
        return self._tail.endswith("\n")

    def ends_with_blank_line(self) -> bool:
        return self._tail == "\n\n"

    def out(self, *fragments: str) -> None:
        """Append ``fragments`` in order; empty fragments are ignored."""
        for fragment in fragments:
            if not fragment:
                continue
            self._parts.append(fragment)
            self._tail = (self._tail + fragment)[-2:]

    def cr(self) -> None:
        """Start a new line unless the output is empty or already on one."""
        if self.is_empty or self.ends_with_newline():
            return
        self.out("\n")

    def blocksep(self) -> None:
        """Separate blocks with a blank line; repeated calls collapse."""
        if self.is_empty or self.ends_with_blank_line():
            return
        self.out("\n")

    @contextmanager
    def block(self) -> Generator[None, None, None]:
        """Emit the enclosed output on its own line(s)."""
        self.cr()
        yield
        self.cr()

    @contextmanager
    def container(self, prefix: str, terminator: str) -> Generator[None, None, None]:
        """Wrap the enclosed output between ``prefix`` and ``terminator``."""
        self.out(prefix)
        yield
        self.out(terminator)

    def getvalue(self) -> str:
        """Return everything written so far as one string."""
        return "".join(self._parts)


__all__ = ["BlockOutputBuffer"]
