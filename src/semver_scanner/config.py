# SPDX-License-Identifier: MIT
"""Configuration loading from pyproject.toml and the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

TOOL_TABLE = "semver-scanner"
ENV_LENIENT = "SEMVER_SCANNER_LENIENT"
ENV_JSON = "SEMVER_SCANNER_JSON"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass(frozen=True)
class ScannerConfig:
    """Settings for the command line front end.

    Attributes:
        lenient: Accept versions where only the major component is present
        json_output: Print results as JSON objects
    """

    lenient: bool = False
    json_output: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "ScannerConfig":
        """Load configuration from the ``[tool.semver-scanner]`` table.

        A project without pyproject.toml gets the defaults.

        Raises:
            ConfigError: If the file is invalid or a value has the wrong type
        """
        pyproject_path = Path(project_dir) / "pyproject.toml"
        if not pyproject_path.exists():
            return cls()

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        return cls.from_pyproject_dict(pyproject)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "ScannerConfig":
        """Create a ScannerConfig from a parsed pyproject.toml dictionary."""
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")

        table = tool.get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        return cls(
            lenient=_read_bool(table, "lenient"),
            json_output=_read_bool(table, "json"),
        )

    @classmethod
    def from_env(cls, base: Optional["ScannerConfig"] = None) -> "ScannerConfig":
        """Overlay environment variables on ``base`` (or the defaults)."""
        config = base or cls()

        if (lenient := os.getenv(ENV_LENIENT)) is not None:
            config = replace(config, lenient=lenient.lower() == "true")
        if (json_output := os.getenv(ENV_JSON)) is not None:
            config = replace(config, json_output=json_output.lower() == "true")

        return config


def _read_bool(table: dict[str, Any], key: str) -> bool:
    value = table.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(
            f"tool.{TOOL_TABLE}.{key} must be true or false, got {value!r}"
        )
    return value


def load_config(project_dir: Optional[Path] = None) -> ScannerConfig:
    """Load configuration for ``project_dir`` (default: cwd), then the environment."""
    return ScannerConfig.from_env(ScannerConfig.from_pyproject(project_dir or Path.cwd()))
