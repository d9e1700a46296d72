#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/parsers/base.py
"""Parser interface and source loading.

Every source a parser accepts is reduced to a ``str`` here before any
parsing happens. Bytes are decoded as strict UTF-8 (a leading BOM is
dropped); anything that is not UTF-8 is a ``ParsingError`` rather than a
guess at some other encoding.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2jira.ast import Document
from md2jira.exceptions import (
    FileAccessError,
    FileNotFoundError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from md2jira.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

InputData = Union[str, Path, IO[bytes], IO[str], bytes]

# Strings longer than this, or spanning lines, are always document text.
_MAX_PATH_LIKE = 260


class BaseParser(ABC):
    """Common surface of md2jira parsers.

    Subclasses implement ``parse`` and call ``_load_text_content`` to accept
    text, bytes, paths and open streams alike.
    """

    def __init__(self, options: BaseParserOptions | None = None):
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Raise ``InvalidOptionsError`` unless ``options`` is None or an ``expected_type``."""
        if options is None or isinstance(options, expected_type):
            return
        raise InvalidOptionsError(
            converter_name=parser_name,
            expected_type=expected_type,
            received_type=type(options),
        )

    @abstractmethod
    def parse(self, input_data: InputData) -> Document:
        """Build a document tree from ``input_data``.

        Raises
        ------
        FileError
            A named file is missing or unreadable
        ParsingError
            The source cannot be decoded or parsed

        """

    @staticmethod
    def _decode(data: bytes, source: str) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParsingError(
                f"Input {source} is not valid UTF-8: {e.reason} at byte {e.start}",
                parsing_stage="decoding",
                original_error=e,
            ) from e

    @staticmethod
    def _read_file(path: Path) -> str:
        if not path.exists():
            raise FileNotFoundError(str(path))
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FileAccessError(str(path), message=f"Cannot read file {path}: {e}", original_error=e) from e
        logger.debug("Read %d bytes from %s", len(data), path)
        return BaseParser._decode(data, str(path))

    @staticmethod
    def _existing_file(text: str) -> Path | None:
        """Return ``text`` as a Path when it names an existing file."""
        if len(text) > _MAX_PATH_LIKE or "\n" in text:
            return None
        try:
            candidate = Path(text)
            return candidate if candidate.is_file() else None
        except (OSError, ValueError):
            return None

    @staticmethod
    def _load_text_content(input_data: InputData) -> str:
        """Reduce any accepted source to document text.

        A ``Path`` must exist. A ``str`` is read from disk only when it names
        an existing file and is otherwise taken as the text itself. Streams
        may be opened in text or binary mode.

        Raises
        ------
        FileNotFoundError, FileAccessError
            The file cannot be read
        ParsingError
            Bytes are not UTF-8
        ValidationError
            ``input_data`` is of no supported type

        """
        if isinstance(input_data, bytes):
            return BaseParser._decode(input_data, "bytes")
        if isinstance(input_data, Path):
            return BaseParser._read_file(input_data)
        if isinstance(input_data, str):
            path = BaseParser._existing_file(input_data)
            return BaseParser._read_file(path) if path is not None else input_data
        if not hasattr(input_data, "read"):
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )

        content = input_data.read()
        if isinstance(content, str):
            return content
        if isinstance(content, bytes):
            return BaseParser._decode(content, str(getattr(input_data, "name", "stream")))
        raise ValidationError(
            f"Stream read returned {type(content).__name__}, expected str or bytes",
            parameter_name="input_data",
            parameter_value=input_data,
        )
