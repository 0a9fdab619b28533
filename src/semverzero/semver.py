# SPDX-License-Identifier: MIT
"""Semantic version parsing, validation and precedence.

Supports MAJOR[.MINOR[.PATCH]] with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101

Missing MINOR or PATCH components default to 0. Build metadata is carried
along for rendering but never takes part in equality, ordering or hashing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

# A single pre-release or build identifier
IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")

_NUMERIC_PATTERN = re.compile(r"[0-9]+")

_COMPONENT_NAMES = ("major", "minor", "patch")


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class VersionFormat(IntEnum):
    """How much of MAJOR.MINOR.PATCH to display.

    Components beyond the requested depth are still shown when non-zero, so
    every format renders a string that parses back to the same version.
    """

    MAJOR = 0
    MAJOR_MINOR = 1
    MAJOR_MINOR_PATCH = 2


def check_tag(tag: str, kind: str) -> Optional[str]:
    """Validate a dot-separated pre-release or build tag.

    Args:
        tag: The tag text, without its leading "-" or "+"
        kind: Human readable name used in the message ("pre-release", "build")

    Returns:
        None if the tag is valid, otherwise a message describing the first
        violation found scanning left to right.
    """
    for identifier in tag.split("."):
        if not identifier:
            return f"Empty {kind} identifier"
        if not IDENTIFIER_PATTERN.fullmatch(identifier):
            return f"Invalid {kind} character in '{identifier}' (expected [0-9A-Za-z-])"
    return None


def _identifier_key(identifier: str) -> tuple:
    # Numeric identifiers sort before alphanumeric ones. Digits are compared
    # by length then text, so leading zeros are ignored and no int() is needed.
    if identifier.isdigit():
        digits = identifier.lstrip("0") or "0"
        return (0, len(digits), digits)
    return (1, 0, identifier)


def prerelease_key(prerelease: Optional[str]) -> tuple:
    """Return the precedence key of a pre-release tag.

    A release (no tag) sorts after every pre-release of the same triple.
    Identifiers are compared pairwise and a shorter tag that is a prefix of a
    longer one sorts first, which is exactly tuple ordering.
    """
    if prerelease is None:
        return (1, ())
    return (0, tuple(_identifier_key(part) for part in prerelease.split(".")))


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release tag (e.g., "alpha.1", "beta", "rc.2")
        build: Optional build metadata (e.g., "build.123", "20240101")

    Raises:
        TypeError: If a component or tag has the wrong type
        ValueError: If a component is negative or a tag is malformed
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: Optional[str] = None
    build: Optional[str] = None
    _key: tuple = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in _COMPONENT_NAMES:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        for name, kind in (("prerelease", "pre-release"), ("build", "build")):
            tag = getattr(self, name)
            if tag is None:
                continue
            if not isinstance(tag, str):
                raise TypeError(f"{name} must be a string, got {type(tag).__name__}")
            problem = check_tag(tag, kind)
            if problem:
                raise ValueError(f"{problem}: {tag!r}")

        object.__setattr__(
            self,
            "_key",
            (self.major, self.minor, self.patch, prerelease_key(self.prerelease)),
        )

    def __str__(self) -> str:
        """Return the canonical MAJOR.MINOR.PATCH representation."""
        return self.format(VersionFormat.MAJOR_MINOR_PATCH)

    def format(self, version_format: VersionFormat = VersionFormat.MAJOR_MINOR_PATCH) -> str:
        """Render the version, hiding trailing zero components the format omits.

        Examples:
            >>> Version(1, 2, 0, "a", "b").format(VersionFormat.MAJOR)
            '1.2-a+b'
            >>> Version(0, 5).format(VersionFormat.MAJOR_MINOR_PATCH)
            '0.5.0'
        """
        version_format = VersionFormat(version_format)
        include_minor = (
            version_format >= VersionFormat.MAJOR_MINOR or self.minor != 0 or self.patch != 0
        )
        include_patch = version_format >= VersionFormat.MAJOR_MINOR_PATCH or self.patch != 0

        text = str(self.major)
        if include_minor:
            text += f".{self.minor}"
        if include_patch:
            text += f".{self.patch}"
        if self.prerelease is not None:
            text += f"-{self.prerelease}"
        if self.build is not None:
            text += f"+{self.build}"
        return text

    def to_minimal_string(self) -> str:
        """Return the shortest rendering, e.g. "1" for 1.0.0 or "1.2" for 1.2.0."""
        return self.format(VersionFormat.MAJOR)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def triple(self) -> tuple[int, int, int]:
        """Return (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    @property
    def precedence_key(self) -> tuple:
        """Sort key consistent with version precedence (ignores build)."""
        return self._key

    def compare_to(self, other: "Version") -> int:
        """Compare precedence with another version.

        Returns:
            -1 if self < other, 0 if equal, 1 if self > other
        """
        if self._key == other._key:
            return 0
        return -1 if self._key < other._key else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key == other._key

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key != other._key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key < other._key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key <= other._key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key > other._key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key >= other._key

    def __hash__(self) -> int:
        return hash(self._key)


def _parse_integer(text: str, name: str, version_string: str) -> int:
    if not text:
        raise InvalidVersionError(version_string, f"Empty {name} component")
    if not _NUMERIC_PATTERN.fullmatch(text):
        raise InvalidVersionError(
            version_string, f"Invalid character in {name} component '{text}' (expected [0-9])"
        )
    try:
        return int(text)
    except ValueError as e:
        # int() refuses digit strings beyond sys.get_int_max_str_digits()
        raise InvalidVersionError(
            version_string, f"{name.capitalize()} component is too long: {e}"
        ) from e


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The grammar is strict: no surrounding whitespace, no leading "v" and no
    trailing characters. Minor and patch may be omitted and default to 0.

    Args:
        version_string: A string in MAJOR[.MINOR[.PATCH]][-prerelease][+build] form

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build=None)

        >>> parse_version("2.1-rc.1+build.456")
        Version(major=2, minor=1, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    # Build metadata runs to the end of the input, pre-release runs to "+"
    core, plus, build = version_string.partition("+")
    core, hyphen, prerelease = core.partition("-")

    parts = core.split(".")
    if len(parts) > 3:
        raise InvalidVersionError(
            version_string, f"Too many numeric components in '{core}' (expected at most 3)"
        )

    numbers = [
        _parse_integer(part, name, version_string) for part, name in zip(parts, _COMPONENT_NAMES)
    ]
    numbers.extend([0] * (3 - len(numbers)))

    if hyphen:
        problem = check_tag(prerelease, "pre-release")
        if problem:
            raise InvalidVersionError(version_string, problem)
    if plus:
        problem = check_tag(build, "build")
        if problem:
            raise InvalidVersionError(version_string, problem)

    return Version(
        major=numbers[0],
        minor=numbers[1],
        patch=numbers[2],
        prerelease=prerelease if hyphen else None,
        build=build if plus else None,
    )


def try_parse_version(version_string: str) -> Optional[Version]:
    """Parse a version string, returning None instead of raising.

    Examples:
        >>> try_parse_version("1.2.3-beta")
        Version(major=1, minor=2, patch=3, prerelease='beta', build=None)
        >>> try_parse_version("1.0.0-") is None
        True
    """
    try:
        return parse_version(version_string)
    except InvalidVersionError:
        return None


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        True
        >>> is_valid_semver("1.0.0..1")
        False
    """
    return try_parse_version(version_string) is not None
