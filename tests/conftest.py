# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from semver_scanner.config import ENV_JSON, ENV_LENIENT


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings from the developer's environment out of the tests."""
    monkeypatch.delenv(ENV_LENIENT, raising=False)
    monkeypatch.delenv(ENV_JSON, raising=False)


@pytest.fixture
def make_project(tmp_path: Path):
    """Return a factory writing pyproject.toml into a fresh project directory."""

    def _make(content: str) -> Path:
        project_dir = tmp_path / "project"
        project_dir.mkdir(exist_ok=True)
        (project_dir / "pyproject.toml").write_text(content)
        return project_dir

    return _make
