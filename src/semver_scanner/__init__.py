# SPDX-License-Identifier: MIT
"""Semantic version scanning with located, partial-result errors.

``scan`` returns either the scanned components or a failure value telling
where and why scanning stopped. ``parse_version`` builds a ``Version`` from
it, strictly or leniently.

Example:
    >>> from semver_scanner import scan, parse_version, ParseFailure
    >>> 
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease_identifiers
    ('alpha', '1')
    >>> 
    >>> failure = scan("1.2.3-")
    >>> isinstance(failure, ParseFailure), failure.location
    (True, 6)
    >>> 
    >>> str(parse_version("7", strict=False))
    '7.0.0'
"""

__version__ = "0.1.0"

from .scanner import (
    Component,
    ConsistencyError,
    FailureKind,
    ParseFailure,
    ParseResult,
    ScanOutcome,
    scan,
)
from .version import (
    InvalidVersionError,
    Version,
    is_valid_semver,
    parse_version,
    recover,
)
from .metadata import (
    distribution_version,
    project_version,
)

__all__ = [
    # Scanning
    "Component",
    "ConsistencyError",
    "FailureKind",
    "ParseFailure",
    "ParseResult",
    "ScanOutcome",
    "scan",
    # Version values
    "InvalidVersionError",
    "Version",
    "is_valid_semver",
    "parse_version",
    "recover",
    # Metadata lookups
    "distribution_version",
    "project_version",
]
