# SPDX-License-Identifier: MIT
"""Look up the declared version of an application.

These helpers feed a declared version string through the parser and treat
any failure as "no version available", returning None instead of raising.
"""

from __future__ import annotations

import logging
import sys
from importlib import metadata
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .errors import ParseError
from .parser import parse
from .semver import Version

logger = logging.getLogger(__name__)


def _version_or_none(raw_version: object, source: str) -> Optional[Version]:
    if not isinstance(raw_version, str):
        logger.debug("No version string declared by %s", source)
        return None
    try:
        return parse(raw_version)
    except ParseError as e:
        logger.debug("Ignoring version %r declared by %s: %s", raw_version, source, e)
        return None


def distribution_version(name: str) -> Optional[Version]:
    """Return the version of an installed distribution.

    Args:
        name: Distribution name as known to the package index

    Returns:
        The parsed Version, or None if the distribution is not installed or
        its version is not a valid semantic version
    """
    try:
        raw_version = metadata.version(name)
    except metadata.PackageNotFoundError:
        logger.debug("Distribution %r is not installed", name)
        return None
    return _version_or_none(raw_version, f"distribution {name!r}")


def project_version(project_dir: str | Path) -> Optional[Version]:
    """Return the ``[project].version`` declared in a project's pyproject.toml.

    Args:
        project_dir: Directory containing pyproject.toml

    Returns:
        The parsed Version, or None if the file is missing or unreadable, has
        no static version, or the version is not a valid semantic version
    """
    pyproject_path = Path(project_dir) / "pyproject.toml"
    if not pyproject_path.exists():
        logger.debug("No pyproject.toml in %s", project_dir)
        return None

    try:
        with open(pyproject_path, "rb") as f:
            pyproject = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("Could not read %s: %s", pyproject_path, e)
        return None

    project = pyproject.get("project", {})
    if not isinstance(project, dict):
        return None
    return _version_or_none(project.get("version"), str(pyproject_path))
