# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and npm-style range matching.

This package parses versions following the SemVer 2.0.0 grammar, orders them
by SemVer precedence, and evaluates range expressions using tilde, caret,
hyphen, wildcard and ``||`` syntax.

Example:
    >>> from semverzero import parse_version, satisfies, Range
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> satisfies("1.2.9", "~1.2.3")
    True
    >>> str(Range.parse("^0.2.3"))
    '>=0.2.3 <0.3.0'
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    VersionFormat,
    parse_version,
    try_parse_version,
    is_valid_semver,
    InvalidVersionError,
)
from .compare import (
    compare_versions,
    compare_prerelease,
    version_key,
    sort_versions,
)
from .partial import PartialVersion
from .comparator import (
    Comparator,
    Operator,
    InvalidRangeError,
)
from .ranges import (
    ComparatorSet,
    Range,
    try_parse_range,
    satisfies,
    max_satisfying,
    min_satisfying,
)

__all__ = [
    # Version parsing
    "Version",
    "VersionFormat",
    "parse_version",
    "try_parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    # Version comparison
    "compare_versions",
    "compare_prerelease",
    "version_key",
    "sort_versions",
    # Ranges
    "PartialVersion",
    "Comparator",
    "Operator",
    "ComparatorSet",
    "Range",
    "InvalidRangeError",
    "try_parse_range",
    "satisfies",
    "max_satisfying",
    "min_satisfying",
]
