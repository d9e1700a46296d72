#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Errors raised by md2jira.

Rendering a well-formed tree never fails, so every class here belongs to a
boundary of the pipeline: choosing options, reading the Markdown source,
decoding it, loading configuration, checking that mistune is importable and
writing the Jira markup out. The command line tool reports any
``Md2JiraError`` on stderr and exits with status 1.

Hierarchy::

    Md2JiraError
    ├── ValidationError
    │   └── InvalidOptionsError
    ├── ConfigurationError
    ├── FileError
    │   ├── FileNotFoundError
    │   └── FileAccessError
    ├── ParsingError
    ├── RenderingError
    │   └── OutputWriteError
    └── DependencyError

"""

from typing import Any


class Md2JiraError(Exception):
    """Root of the md2jira error hierarchy.

    Parameters
    ----------
    message : str
        Text shown to the user
    original_error : Exception, optional
        Lower-level exception being wrapped

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2JiraError):
    """An argument handed to the API has an unusable value or type.

    ``parameter_name`` and ``parameter_value`` identify the offending argument
    when known.
    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """The parser or renderer was given the other stage's options class.

    Parameters
    ----------
    converter_name : str
        ``"markdown"`` for the parser, ``"jira"`` for the renderer
    expected_type : type
        Options class the stage accepts
    received_type : type
        Class of the object actually passed
    message : str, optional
        Overrides the generated message

    Examples
    --------
        >>> str(InvalidOptionsError("jira", JiraRendererOptions, MarkdownParserOptions))
        "jira expected options of type 'JiraRendererOptions' but received 'MarkdownParserOptions'."

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        text = message or (
            f"{converter_name} expected options of type '{expected_type.__name__}' "
            f"but received '{received_type.__name__}'."
        )
        super().__init__(text, parameter_name="options", parameter_value=received_type, original_error=original_error)
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigurationError(Md2JiraError):
    """A configuration file or ``MD2JIRA_*`` variable could not be used.

    ``config_path`` is the file at fault, or None when the problem came from
    the environment.
    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class FileError(Md2JiraError):
    """The Markdown source file could not be used; ``file_path`` names it."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """The Markdown source path does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(message or f"File not found: {file_path}", file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """The Markdown source exists but reading it failed, e.g. permission denied."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        message = message or f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Md2JiraError):
    """Markdown text could not be turned into a document tree.

    ``parsing_stage`` is ``"decoding"`` when the bytes are not UTF-8 and
    ``"tokenizing"`` when mistune itself failed.
    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2JiraError):
    """Jira markup could not be produced or delivered."""

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """The rendered markup could not be written to ``file_path``."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(
            message or f"Failed to write output file: {file_path}",
            rendering_stage="file_write",
            original_error=original_error,
        )
        self.file_path = file_path


class DependencyError(Md2JiraError):
    """A package needed at runtime is missing or too old.

    Parameters
    ----------
    converter_name : str
        Component that needs the packages, upper-cased in the message
    missing_packages : list of (name, version_spec)
        Packages that failed to import
    version_mismatches : list of (name, required, installed), optional
        Packages that imported but do not satisfy their specifier
    install_command : str, optional
        Command to suggest; a ``pip install --upgrade`` line is built otherwise
    message : str, optional
        Overrides the generated message
    original_import_error : ImportError, optional
        First import failure seen

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        mismatches = version_mismatches or []
        if message is None:
            message = self._build_message(converter_name.upper(), missing_packages, mismatches, install_command)

        super().__init__(message)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = mismatches
        self.install_command = install_command
        self.original_import_error = original_import_error

    @staticmethod
    def _build_message(
        component: str,
        missing: list[tuple[str, str]],
        mismatches: list[tuple[str, str, str]],
        install_command: str,
    ) -> str:
        lines = []
        if missing:
            wanted = ", ".join(f"'{name}{spec}'" for name, spec in missing)
            lines.append(f"{component} support requires the following packages: {wanted}")
        if mismatches:
            found = ", ".join(f"'{name}' (requires {req}, but {got} is installed)" for name, req, got in mismatches)
            lines.append(f"{component} support has version mismatches: {found}")

        if not install_command:
            requirements = missing + [(name, req) for name, req, _ in mismatches]
            install_command = "pip install --upgrade " + " ".join(
                f'"{name}{spec}"' if spec else name for name, spec in requirements
            )
        lines.append(f"Install with: {install_command}")
        return "\n".join(lines)


__all__ = [
    "ConfigurationError",
    "DependencyError",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "InvalidOptionsError",
    "Md2JiraError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
