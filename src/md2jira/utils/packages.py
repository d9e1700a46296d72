"""Helpers for checking installed package versions."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2jira/utils/packages.py
from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging import version
from packaging.specifiers import SpecifierSet


def get_package_version(package_name: str) -> Optional[str]:
    """Get the installed version of a distribution.

    Parameters
    ----------
    package_name : str
        Distribution name as published on the index (e.g. ``"mistune"``)

    Returns
    -------
    str or None
        Version string if the distribution is installed, None otherwise

    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Return whether ``package_name`` satisfies ``version_spec``, and the version found.

    A distribution that is not installed gives ``(False, None)``.
    """
    installed = get_package_version(package_name)
    if installed is None:
        return False, None
    return version.parse(installed) in SpecifierSet(version_spec), installed
