#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/io_utils.py
"""Writing rendered markup out.

``write_content`` is the only place md2jira writes output, whether to a path
or to an already open text or binary stream.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from md2jira.exceptions import OutputWriteError


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text content to a path or stream as UTF-8.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are created or truncated; binary streams
        receive UTF-8 encoded bytes; text streams receive the text unchanged.

    Raises
    ------
    OutputWriteError
        If the destination path cannot be written
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_content("h1. Title\\n", buffer)
        >>> buffer.getvalue()
        'h1. Title\\n'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


__all__ = ["write_content"]
