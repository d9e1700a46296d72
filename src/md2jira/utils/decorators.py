#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/decorators.py
"""Decorator and context manager shared by the parser and the renderer.

``requires_dependencies`` guards ``MarkdownParser.parse`` so that a missing or
outdated mistune surfaces as a ``DependencyError`` with an install hint rather
than an ``ImportError`` from deep inside the parser. ``debug_timer`` reports
how long parsing and rendering took when DEBUG logging is on.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Optional, Tuple

from md2jira.exceptions import DependencyError
from md2jira.utils.packages import check_version_requirement


def _probe(
    packages: List[Tuple[str, str, str]],
) -> Tuple[List[Tuple[str, str]], List[Tuple[str, str, str]], Optional[ImportError]]:
    """Import each package and collect the ones that are absent or too old."""
    missing: List[Tuple[str, str]] = []
    outdated: List[Tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as exc:
            missing.append((install_name, version_spec))
            first_error = first_error or exc
            continue
        if not version_spec:
            continue
        satisfied, installed = check_version_requirement(install_name, version_spec)
        if not satisfied:
            outdated.append((install_name, version_spec, installed or "unknown"))

    return missing, outdated, first_error


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Refuse to run the wrapped method unless ``packages`` are importable.

    Parameters
    ----------
    converter_name : str
        Component named in the error message, e.g. ``"markdown"``
    packages : list of (install_name, import_name, version_spec)
        ``install_name`` is the distribution name used for ``pip install`` and
        version lookup, ``import_name`` the module to import, and
        ``version_spec`` a specifier such as ``">=3.0.0"`` or ``""``.

    Raises
    ------
    DependencyError
        From the wrapper, when something is missing or outdated

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, outdated, first_error = _probe(packages)
            if missing or outdated:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=outdated,
                    original_import_error=first_error,
                ) from first_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log ``"<operation> completed in <seconds>s"`` at DEBUG after the block.

    The clock is only read when ``logger`` is enabled for DEBUG. Nothing is
    logged when the block raises.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    yield
    logger.debug("%s completed in %.2fs", operation, time.perf_counter() - started)
