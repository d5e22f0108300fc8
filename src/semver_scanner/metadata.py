# SPDX-License-Identifier: MIT
"""Look up versions from installed distributions and project metadata.

Lookups parse strictly and return None when no valid version is available.
"""

from __future__ import annotations

import logging
import sys
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .version import InvalidVersionError, Version, parse_version

logger = logging.getLogger(__name__)


def _parse_or_none(version_string: str, source: str) -> Optional[Version]:
    try:
        return parse_version(version_string)
    except InvalidVersionError as e:
        logger.debug("Ignoring version from %s: %s", source, e)
        return None


def distribution_version(name: str) -> Optional[Version]:
    """Return the version of an installed distribution.

    Args:
        name: Distribution name as known to the installer (e.g. "click")

    Returns:
        The parsed version, or None if the distribution is not installed or
        its version is not a strict semantic version
    """
    try:
        version_string = importlib_metadata.version(name)
    except importlib_metadata.PackageNotFoundError:
        logger.debug("Distribution %s is not installed", name)
        return None

    if version_string is None:
        logger.debug("Distribution %s has no version metadata", name)
        return None

    return _parse_or_none(version_string, f"distribution {name}")


def project_version(project_dir: str | Path) -> Optional[Version]:
    """Return the ``[project].version`` declared in a pyproject.toml.

    Args:
        project_dir: Directory containing pyproject.toml

    Returns:
        The parsed version, or None if the file, the key or a valid
        semantic version is missing
    """
    pyproject_path = Path(project_dir) / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            pyproject = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No pyproject.toml in %s", project_dir)
        return None
    except tomllib.TOMLDecodeError as e:
        logger.debug("Cannot read %s: %s", pyproject_path, e)
        return None

    project = pyproject.get("project", {})
    if not isinstance(project, dict):
        logger.debug("%s has no [project] table", pyproject_path)
        return None

    version_string = project.get("version")
    if not isinstance(version_string, str):
        logger.debug("%s declares no static [project].version", pyproject_path)
        return None

    return _parse_or_none(version_string, str(pyproject_path))
