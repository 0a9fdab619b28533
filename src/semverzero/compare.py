# SPDX-License-Identifier: MIT
"""Version comparison helpers following SemVer 2.0.0 precedence.

Pre-release ordering: numeric identifiers compare numerically, alphanumeric
identifiers compare by ASCII value, and a numeric identifier always sorts
before an alphanumeric one. Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Iterable, Union

from .semver import Version, parse_version, prerelease_key

VersionLike = Union[str, Version]


def _as_version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_prerelease(pre1: str | None, pre2: str | None) -> int:
    """Compare two pre-release tags.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    key1 = prerelease_key(pre1)
    key2 = prerelease_key(pre2)
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+a", "1.0.0+b")
        0
        >>> compare_versions("1.10.0", "1.9.0")
        1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    return _as_version(version1).compare_to(_as_version(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _as_version(version).precedence_key


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    Versions of equal precedence (differing only in build metadata) keep
    their input order.
    """
    return sorted((_as_version(v) for v in versions), key=version_key, reverse=reverse)
