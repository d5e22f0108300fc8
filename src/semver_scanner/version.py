# SPDX-License-Identifier: MIT
"""Semantic version value built on top of the scanner.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101

Strict parsing requires the whole grammar. Lenient parsing only requires the
major component and fills in everything that could not be scanned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .scanner import ParseFailure, ParseResult, scan


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning.

    Attributes:
        version: The rejected input
        message: Human-readable explanation
        failure: The scanner failure, when the input was a string
    """

    def __init__(
        self,
        version: str,
        message: str = "",
        failure: Optional[ParseFailure] = None,
    ):
        self.version = version
        self.failure = failure
        if not message:
            message = f"Invalid semantic version: {version!r}"
            if failure is not None:
                message = f"{message} ({failure.describe()})"
        self.message = message
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease_identifiers: Pre-release identifiers (e.g., ("rc", "1"))
        build_metadata_identifiers: Build metadata identifiers (e.g., ("build", "5"))
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease_identifiers: tuple[str, ...] = ()
    build_metadata_identifiers: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return the string representation of the version."""
        version = self.base_version
        if self.prerelease_identifiers:
            version += f"-{self.prerelease}"
        if self.build_metadata_identifiers:
            version += f"+{self.build}"
        return version

    @property
    def prerelease(self) -> Optional[str]:
        """Dot-joined pre-release identifiers, or None."""
        if not self.prerelease_identifiers:
            return None
        return ".".join(self.prerelease_identifiers)

    @property
    def build(self) -> Optional[str]:
        """Dot-joined build metadata identifiers, or None."""
        if not self.build_metadata_identifiers:
            return None
        return ".".join(self.build_metadata_identifiers)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_identifiers)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def from_parse_result(cls, result: ParseResult) -> "Version":
        """Build a version from scanned components, defaulting absent ones."""
        return cls(
            major=result.major if result.major is not None else 0,
            minor=result.minor if result.minor is not None else 0,
            patch=result.patch if result.patch is not None else 0,
            prerelease_identifiers=result.prerelease_identifiers or (),
            build_metadata_identifiers=result.build_metadata_identifiers or (),
        )

    @classmethod
    def from_int(cls, value: int) -> "Version":
        """Build a major-only version. Negative values become 0."""
        return cls(major=max(0, value))

    @classmethod
    def from_literal(cls, text: str) -> "Version":
        """Build a version from a literal string without raising.

        The string is parsed leniently, so ``"1.2"`` gives ``1.2.0``. If not
        even a major version can be read the result is ``Version(major=0)``;
        callers that need to tell a bad literal from ``"0.0.0"`` should use
        ``parse_version`` instead.
        """
        try:
            return parse_version(text, strict=False)
        except InvalidVersionError:
            return cls(major=0)


def recover(failure: ParseFailure) -> Optional[ParseResult]:
    """Return the partial result of a failure if lenient parsing accepts it.

    Lenient parsing only needs the major component.
    """
    if failure.result.major is None:
        return None
    return failure.result


def parse_version(version_string: str, strict: bool = True) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        strict: When False, any input starting with a major version number
            is accepted and missing components default to 0 or empty

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string cannot be parsed in the chosen mode

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease_identifiers=(), build_metadata_identifiers=())

        >>> str(parse_version("2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'

        >>> parse_version("1.2", strict=False).patch
        0
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    outcome = scan(version_string)
    if isinstance(outcome, ParseFailure):
        recovered = None if strict else recover(outcome)
        if recovered is None:
            raise InvalidVersionError(version_string, failure=outcome)
        outcome = recovered

    return Version.from_parse_result(outcome)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return isinstance(scan(version_string), ParseResult)
