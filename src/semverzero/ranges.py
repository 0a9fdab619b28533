# SPDX-License-Identifier: MIT
"""Version range expressions in the npm dialect.

A Range is an OR of comparator sets separated by ``||``; a ComparatorSet is
an AND of whitespace-separated comparators and shorthand tokens:

    >=1.2.3 <2.0.0 || ~3.1 || 4.x || 5.0.0 - 5.2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .comparator import Comparator, InvalidRangeError
from .desugar import desugar
from .semver import Version, parse_version

VersionLike = Union[str, Version]
RangeLike = Union[str, "Range"]


def _as_version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


@dataclass(frozen=True, slots=True)
class ComparatorSet:
    """A conjunction of comparators.

    Attributes:
        comparators: Comparators that must all match; an empty set matches
            every version
    """

    comparators: tuple[Comparator, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "comparators", tuple(self.comparators))

    def __str__(self) -> str:
        if not self.comparators:
            return "*"
        return " ".join(str(comparator) for comparator in self.comparators)

    def is_match(self, version: Version) -> bool:
        """Return True if the version satisfies every comparator."""
        return all(comparator.is_match(version) for comparator in self.comparators)

    @classmethod
    def parse(cls, expression: str) -> "ComparatorSet":
        """Parse whitespace-separated comparators and shorthand tokens.

        Raises:
            InvalidRangeError: If any token cannot be parsed

        Examples:
            >>> str(ComparatorSet.parse("^1.2.3"))
            '>=1.2.3 <2.0.0'
            >>> str(ComparatorSet.parse(">=1.0.0 ~1.4"))
            '>=1.0.0 >=1.4.0 <1.5.0'
        """
        text = expression.strip()
        comparators: list[Comparator] = []

        pos = 0
        while pos < len(text):
            consumed, produced = desugar(text, pos)
            comparators.extend(produced)
            pos += consumed

        return cls(tuple(comparators))


@dataclass(frozen=True, slots=True)
class Range:
    """A disjunction of comparator sets.

    Attributes:
        comparator_sets: Alternatives of which at least one must match; a
            range without any set matches every version
    """

    comparator_sets: tuple[ComparatorSet, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "comparator_sets", tuple(self.comparator_sets))

    def __str__(self) -> str:
        if not self.comparator_sets:
            return "*"
        return " || ".join(str(comparator_set) for comparator_set in self.comparator_sets)

    def __contains__(self, version: object) -> bool:
        if isinstance(version, str):
            version = parse_version(version)
        if not isinstance(version, Version):
            return False
        return self.is_match(version)

    def is_match(self, version: Version) -> bool:
        """Return True if any comparator set matches, or there are none."""
        if not self.comparator_sets:
            return True
        return any(comparator_set.is_match(version) for comparator_set in self.comparator_sets)

    def filter(self, versions: Iterable[VersionLike]) -> list[Version]:
        """Return the versions satisfying this range, in input order."""
        return [v for v in (_as_version(v) for v in versions) if self.is_match(v)]

    @classmethod
    def parse(cls, expression: str) -> "Range":
        """Parse a range expression.

        Raises:
            InvalidRangeError: If the expression, or any part of it, is invalid

        Examples:
            >>> Range.parse("1.x || >=2.0.0 <2.2.0").is_match(parse_version("2.1.0"))
            True
            >>> str(Range.parse("~1.2 || 3.0.0 - 3.1"))
            '>=1.2.0 <1.3.0 || >=3.0.0 <3.2.0'
        """
        if not isinstance(expression, str):
            raise InvalidRangeError(
                str(expression), f"Range must be a string, got {type(expression).__name__}"
            )
        return cls(tuple(ComparatorSet.parse(part) for part in expression.split("||")))


def try_parse_range(expression: str) -> Optional[Range]:
    """Parse a range expression, returning None instead of raising."""
    try:
        return Range.parse(expression)
    except InvalidRangeError:
        return None


def _as_range(version_range: RangeLike) -> Range:
    return Range.parse(version_range) if isinstance(version_range, str) else version_range


def satisfies(version: VersionLike, version_range: RangeLike) -> bool:
    """Check whether a version satisfies a range.

    Raises:
        InvalidVersionError: If the version string is invalid
        InvalidRangeError: If the range expression is invalid

    Examples:
        >>> satisfies("1.2.9", "~1.2.3")
        True
        >>> satisfies("1.5.0-beta", "^1.0.0")
        False
    """
    return _as_range(version_range).is_match(_as_version(version))


def max_satisfying(
    versions: Iterable[VersionLike], version_range: RangeLike
) -> Optional[Version]:
    """Return the highest version satisfying the range, or None."""
    matching = _as_range(version_range).filter(versions)
    return max(matching) if matching else None


def min_satisfying(
    versions: Iterable[VersionLike], version_range: RangeLike
) -> Optional[Version]:
    """Return the lowest version satisfying the range, or None."""
    matching = _as_range(version_range).filter(versions)
    return min(matching) if matching else None
