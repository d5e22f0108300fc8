# SPDX-License-Identifier: MIT
"""Single-pass scanner for semantic version strings.

Walks the input left to right matching MAJOR.MINOR.PATCH followed by the
optional pre-release (``-``) and build metadata (``+``) identifier lists.
Malformed input is not exceptional here: ``scan`` returns a ``ParseFailure``
value describing where scanning stopped, which component was active, and
everything parsed before that point.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

DEFAULT_DELIMITER = "."
PRERELEASE_DELIMITER = "-"
BUILD_METADATA_DELIMITER = "+"

DIGITS = frozenset("0123456789")
IDENTIFIER_CHARACTERS = frozenset(
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "-"
)


class Component(str, Enum):
    """Grammar rule that was being matched when scanning stopped."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE_IDENTIFIERS = "prerelease_identifiers"
    BUILD_METADATA_IDENTIFIERS = "build_metadata_identifiers"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


class FailureKind(str, Enum):
    """Why a component could not be matched."""

    NON_NUMERIC_VALUE = "non_numeric_value"
    DELIMITER_EXPECTED = "delimiter_expected"
    MALFORMED_IDENTIFIERS = "malformed_identifiers"
    END_OF_STRING_EXPECTED = "end_of_string_expected"


@dataclass(frozen=True, slots=True)
class ConsistencyError:
    """Cause of a parse failure.

    This is a plain value carried by ``ParseFailure``, not an exception.

    Attributes:
        kind: The failure kind
        identifiers: Identifiers scanned before a malformed identifier list
            was detected; only set for ``MALFORMED_IDENTIFIERS``
    """

    kind: FailureKind
    identifiers: Optional[tuple[str, ...]] = None

    @classmethod
    def non_numeric_value(cls) -> "ConsistencyError":
        return cls(FailureKind.NON_NUMERIC_VALUE)

    @classmethod
    def delimiter_expected(cls) -> "ConsistencyError":
        return cls(FailureKind.DELIMITER_EXPECTED)

    @classmethod
    def malformed_identifiers(cls, identifiers: tuple[str, ...]) -> "ConsistencyError":
        return cls(FailureKind.MALFORMED_IDENTIFIERS, tuple(identifiers))

    @classmethod
    def end_of_string_expected(cls) -> "ConsistencyError":
        return cls(FailureKind.END_OF_STRING_EXPECTED)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Components scanned from a version string.

    On success ``major``, ``minor`` and ``patch`` are always set. Inside a
    ``ParseFailure`` only the components scanned before the failure are set.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease_identifiers: Dot-separated identifiers after ``-``
        build_metadata_identifiers: Dot-separated identifiers after ``+``
    """

    major: Optional[int] = None
    minor: Optional[int] = None
    patch: Optional[int] = None
    prerelease_identifiers: Optional[tuple[str, ...]] = None
    build_metadata_identifiers: Optional[tuple[str, ...]] = None


_EXPECTATIONS = {
    FailureKind.NON_NUMERIC_VALUE: "expected digits for {component}",
    FailureKind.DELIMITER_EXPECTED: "expected '.' after {component}",
    FailureKind.MALFORMED_IDENTIFIERS: "expected an identifier in {component}",
    FailureKind.END_OF_STRING_EXPECTED: "unexpected characters after {component}",
}


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """A scan that stopped before matching the whole grammar.

    Attributes:
        location: Character offset in the input where scanning stopped
        component: Component being matched at that offset
        reason: What went wrong
        result: Components successfully scanned before the failure
    """

    location: int
    component: Component
    reason: ConsistencyError
    result: ParseResult

    @property
    def kind(self) -> FailureKind:
        return self.reason.kind

    def describe(self) -> str:
        """Return a human-readable diagnostic.

        Examples:
            >>> scan("1.2.x").describe()
            'expected digits for patch at position 4'
        """
        template = _EXPECTATIONS[self.reason.kind]
        return f"{template.format(component=self.component.label)} at position {self.location}"

    def __str__(self) -> str:
        return self.describe()


ScanOutcome = Union[ParseResult, ParseFailure]


class _Cursor:
    """Read position over the input text. Only ever moves forward."""

    __slots__ = ("text", "position")

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def scan_characters(self, characters: frozenset[str]) -> str:
        """Consume and return the longest run of characters from the set."""
        start = self.position
        end = start
        length = len(self.text)
        while end < length and self.text[end] in characters:
            end += 1
        self.position = end
        return self.text[start:end]

    def scan_literal(self, literal: str) -> bool:
        """Consume ``literal`` if the input continues with it."""
        if self.text.startswith(literal, self.position):
            self.position += len(literal)
            return True
        return False


def _scan_number(cursor: _Cursor) -> Optional[int]:
    digits = cursor.scan_characters(DIGITS)
    if not digits:
        return None
    try:
        return int(digits)
    except ValueError:
        # Digit run longer than sys.get_int_max_str_digits()
        return None


def _scan_identifiers(cursor: _Cursor) -> tuple[tuple[str, ...], bool]:
    """Scan a dot-delimited identifier list.

    Returns the identifiers scanned and whether the list was well formed.
    When it was not, the identifiers are those scanned before the empty one.
    """
    identifiers: list[str] = []
    while True:
        identifier = cursor.scan_characters(IDENTIFIER_CHARACTERS)
        if not identifier:
            return tuple(identifiers), False
        identifiers.append(identifier)
        if not cursor.scan_literal(DEFAULT_DELIMITER):
            return tuple(identifiers), True


def scan(text: str) -> ScanOutcome:
    """Scan a semantic version string.

    Args:
        text: The version string, e.g. ``"1.2.3-rc.1+build.5"``

    Returns:
        A ``ParseResult`` when the whole input matches the grammar, otherwise
        a ``ParseFailure`` carrying the partial result

    Examples:
        >>> scan("1.2.3-alpha.1")
        ParseResult(major=1, minor=2, patch=3, prerelease_identifiers=('alpha', '1'), build_metadata_identifiers=None)

        >>> scan("1.2").kind
        <FailureKind.DELIMITER_EXPECTED: 'delimiter_expected'>
    """
    cursor = _Cursor(text)
    result = ParseResult()

    def fail(component: Component, reason: ConsistencyError) -> ParseFailure:
        return ParseFailure(cursor.position, component, reason, result)

    numeric = (
        (Component.MAJOR, "major", True),
        (Component.MINOR, "minor", True),
        (Component.PATCH, "patch", False),
    )
    for component, field_name, needs_delimiter in numeric:
        number = _scan_number(cursor)
        if number is None:
            return fail(component, ConsistencyError.non_numeric_value())
        result = replace(result, **{field_name: number})
        if needs_delimiter and not cursor.scan_literal(DEFAULT_DELIMITER):
            return fail(component, ConsistencyError.delimiter_expected())

    component = Component.PATCH
    lists = (
        (PRERELEASE_DELIMITER, Component.PRERELEASE_IDENTIFIERS, "prerelease_identifiers"),
        (BUILD_METADATA_DELIMITER, Component.BUILD_METADATA_IDENTIFIERS, "build_metadata_identifiers"),
    )
    for delimiter, list_component, field_name in lists:
        if not cursor.scan_literal(delimiter):
            continue
        component = list_component
        identifiers, complete = _scan_identifiers(cursor)
        result = replace(result, **{field_name: identifiers})
        if not complete:
            return fail(component, ConsistencyError.malformed_identifiers(identifiers))

    if not cursor.at_end:
        return fail(component, ConsistencyError.end_of_string_expected())

    return result
