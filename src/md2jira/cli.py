#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for md2jira.

This module provides a simple command-line tool for converting a Markdown
document to Jira wiki markup.

Examples
--------
Convert a file and print the result:

    $ md2jira README.md

Convert standard input in safe mode and write to a file:

    $ cat notes.md | md2jira - --safe --out notes.jira

"""

import argparse
import logging
import os
import sys
from dataclasses import fields
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import IO, Any, Optional, Union

from md2jira.api import convert
from md2jira.config import LOG_LEVEL_CHOICES, resolve_settings
from md2jira.exceptions import Md2JiraError
from md2jira.logging_utils import configure_logging
from md2jira.options.base import CloneFrozenMixin
from md2jira.options.jira import JiraRendererOptions
from md2jira.options.markdown import MarkdownParserOptions
from md2jira.parsers.base import InputData

logger = logging.getLogger(__name__)


def _get_version() -> str:
    try:
        return version("md2jira")
    except PackageNotFoundError:
        return "unknown"


def _add_options_class_arguments(
    parser: argparse.ArgumentParser, options_class: type[CloneFrozenMixin], group_name: str
) -> None:
    """Add one flag per boolean field of ``options_class``.

    A field that defaults to True gets a flag turning it off, one that
    defaults to False gets a flag turning it on. The flag name comes from the
    field's ``cli_name`` metadata, falling back to the field name. Flags
    default to None so that unset flags do not override configuration files.
    """
    group = parser.add_argument_group(group_name)
    for field in fields(options_class):
        if not isinstance(field.default, bool):
            continue
        cli_name = field.metadata.get("cli_name", field.name.replace("_", "-"))
        group.add_argument(
            f"--{cli_name}",
            dest=field.name,
            action="store_const",
            const=not field.default,
            default=None,
            help=field.metadata.get("help"),
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2jira",
        description="Convert Markdown to Jira wiki markup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  md2jira README.md
  md2jira README.md --out README.jira
  cat notes.md | md2jira - --safe

Configuration is read from --config, the MD2JIRA_CONFIG environment variable,
or the first .md2jira.toml/.yaml/.yml/.json (or pyproject.toml [tool.md2jira])
found from the current directory upwards, then in the home directory.
        """,
    )

    parser.add_argument("input", nargs="?", default="-", help="Markdown file to convert (use '-' for stdin)")
    parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")

    _add_options_class_arguments(parser, JiraRendererOptions, "Rendering options")
    _add_options_class_arguments(parser, MarkdownParserOptions, "Parsing options")

    parser.add_argument("--config", metavar="PATH", help="Path to configuration file (TOML, YAML or JSON)")

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        default=None,
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps, logger names and DEBUG timing output",
    )
    parser.add_argument("--version", "-V", action="version", version=f"md2jira {_get_version()}")

    return parser


def _read_input(input_arg: str) -> InputData:
    """Turn the positional argument into something the parser accepts."""
    if input_arg == "-":
        logger.debug("Reading Markdown from stdin")
        return getattr(sys.stdin, "buffer", sys.stdin).read()
    return Path(input_arg)


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    trace = parsed_args.trace
    configure_logging(
        "DEBUG" if trace else (parsed_args.log_level or os.environ.get("MD2JIRA_LOG_LEVEL") or "WARNING"),
        log_file=parsed_args.log_file,
        trace_mode=trace,
    )

    cli_overrides: dict[str, Any] = {
        name: getattr(parsed_args, name)
        for name in MarkdownParserOptions.field_names() | JiraRendererOptions.field_names()
    }
    cli_overrides["log_level"] = "DEBUG" if trace else parsed_args.log_level

    try:
        settings = resolve_settings(cli_overrides, os.environ, explicit_path=parsed_args.config)
    except Md2JiraError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.getLogger().setLevel(settings["log_level"])
    for handler in logging.getLogger().handlers:
        handler.setLevel(settings["log_level"])

    try:
        source = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error reading from stdin: {e}", file=sys.stderr)
        return 1

    output: Union[str, IO[bytes], IO[str]]
    if parsed_args.out:
        output = parsed_args.out
    else:
        output = getattr(sys.stdout, "buffer", sys.stdout)

    try:
        convert(
            source,
            output,
            parser_options=MarkdownParserOptions(
                parse_strikethrough=settings["parse_strikethrough"],
                parse_tables=settings["parse_tables"],
                parse_footnotes=settings["parse_footnotes"],
            ),
            renderer_options=JiraRendererOptions(safe=settings["safe"]),
        )
    except Md2JiraError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if parsed_args.out:
        logger.info("Converted %s -> %s", parsed_args.input, parsed_args.out)
    else:
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
