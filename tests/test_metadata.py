# SPDX-License-Identifier: MIT
"""Tests for version lookups from host metadata."""

import logging
from pathlib import Path

from semver_scanner import Version, distribution_version, project_version
from semver_scanner import metadata


class TestDistributionVersion:
    """Tests for distribution_version."""

    def test_installed_distribution(self, monkeypatch):
        """Test that a strict semantic version is returned."""
        monkeypatch.setattr(metadata.importlib_metadata, "version", lambda name: "8.1.7")
        assert distribution_version("click") == Version(8, 1, 7)

    def test_missing_distribution(self, monkeypatch, caplog):
        """Test that a missing distribution gives None."""

        def not_found(name):
            raise metadata.importlib_metadata.PackageNotFoundError(name)

        monkeypatch.setattr(metadata.importlib_metadata, "version", not_found)
        with caplog.at_level(logging.DEBUG, logger="semver_scanner.metadata"):
            assert distribution_version("no-such-dist") is None
        assert "not installed" in caplog.text

    def test_non_semver_distribution(self, monkeypatch, caplog):
        """Test that PEP 440 versions that are not SemVer give None."""
        monkeypatch.setattr(metadata.importlib_metadata, "version", lambda name: "2.0")
        with caplog.at_level(logging.DEBUG, logger="semver_scanner.metadata"):
            assert distribution_version("legacy") is None
        assert "Ignoring version" in caplog.text


class TestProjectVersion:
    """Tests for project_version."""

    def test_static_version(self, make_project):
        """Test reading [project].version."""
        project = make_project('[project]\nname = "x"\nversion = "1.4.0-rc.2"\n')
        assert project_version(project) == Version(1, 4, 0, ("rc", "2"))

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing pyproject.toml gives None."""
        assert project_version(tmp_path) is None

    def test_dynamic_version(self, make_project):
        """Test that a dynamic version gives None."""
        project = make_project('[project]\nname = "x"\ndynamic = ["version"]\n')
        assert project_version(project) is None

    def test_invalid_toml(self, make_project):
        """Test that unreadable TOML gives None."""
        project = make_project("[project\n")
        assert project_version(project) is None

    def test_project_not_a_table(self, make_project, caplog):
        """Test that a scalar project key gives None."""
        project = make_project('project = "x"\n')
        with caplog.at_level(logging.DEBUG, logger="semver_scanner.metadata"):
            assert project_version(project) is None
        assert "no [project] table" in caplog.text

    def test_lenient_only_version(self, make_project):
        """Test that lookups parse strictly."""
        project = make_project('[project]\nname = "x"\nversion = "1.4"\n')
        assert project_version(project) is None
