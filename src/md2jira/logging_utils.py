"""Root logger set-up for the md2jira command line tool.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed here, once, by the CLI. Records always go to stderr because stdout
carries the converted markup.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Return the numeric level for ``log_level``; unknown names mean INFO."""
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def _attach(root: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Replace the root logger's handlers with md2jira's.

    Parameters
    ----------
    log_level : int | str
        Level for the root logger and every handler, e.g. ``"WARNING"``
    log_file : str, optional
        Also append records to this file. A file that cannot be opened is
        reported as a warning and otherwise ignored.
    trace_mode : bool, default False
        Use the timestamped format that includes logger names

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level)
    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    _attach(root, logging.StreamHandler(sys.stderr), level, formatter)

    if not log_file:
        return root

    try:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        root.warning("Could not open log file %s: %s", log_file, exc)
        return root

    _attach(root, file_handler, level, formatter)
    root.info("Logging to file: %s", log_file)
    return root
