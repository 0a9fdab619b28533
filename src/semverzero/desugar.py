# SPDX-License-Identifier: MIT
"""Desugaring of range shorthand into primitive comparators.

Each rule inspects the expression at a scan offset and either declines
(returns None) or returns how many characters it consumed together with the
comparators the shorthand stands for:

    ~1.2.3        >=1.2.3 <1.3.0
    ^0.2.3        >=0.2.3 <0.3.0
    1.2 - 2.3.4   >=1.2.0 <=2.3.4
    1.x           >=1.0.0 <2.0.0

Synthesized upper bounds use LESS_THAN_EXCLUDING_PRERELEASES, so pre-release
versions of unrelated release lines never slip under them.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from .comparator import COMPARATOR_PATTERN, Comparator, InvalidRangeError, Operator
from .partial import PartialVersion
from .semver import InvalidVersionError, Version

# One shorthand match: characters consumed and the comparators produced
Desugared = tuple[int, list[Comparator]]

_TOKEN = r"[0-9A-Za-z\-+.*]+"

TILDE_PATTERN = re.compile(rf"\s*~>?\s*({_TOKEN})\s*")
CARET_PATTERN = re.compile(rf"\s*\^\s*({_TOKEN})\s*")
HYPHEN_PATTERN = re.compile(rf"\s*({_TOKEN})\s+-\s+({_TOKEN})\s*")
STAR_PATTERN = re.compile(rf"\s*=?\s*({_TOKEN})\s*")

# Smallest possible version: nothing is below it
_MIN_VERSION = Version(0, 0, 0, "0")


def _bounds(
    lower: Version,
    upper: Optional[Version],
    lower_operator: Operator = Operator.GREATER_THAN_OR_EQUAL,
    upper_operator: Operator = Operator.LESS_THAN_EXCLUDING_PRERELEASES,
) -> list[Comparator]:
    comparators = [Comparator(lower_operator, lower)]
    if upper is not None:
        comparators.append(Comparator(upper_operator, upper))
    return comparators


def _next_line(partial: PartialVersion) -> Optional[Version]:
    """Return the first version past the release line a partial version pins.

    "1" -> 2.0.0, "1.2" -> 1.3.0, "*" -> None. Only meaningful for partial
    versions that are not full.
    """
    if partial.major is None:
        return None
    if partial.minor is None:
        return Version(partial.major + 1, 0, 0)
    return Version(partial.major, partial.minor + 1, 0)


def tilde_range(expression: str, pos: int = 0) -> Optional[Desugared]:
    """Desugar "~P": patch-level changes if minor is given, minor-level if not."""
    match = TILDE_PATTERN.match(expression, pos)
    if not match:
        return None

    version = PartialVersion.parse(match.group(1))
    lower = version.to_zero_version()

    if version.major is None:
        upper = None
    elif version.minor is not None:
        # Patch presence does not matter, the next minor is the limit
        upper = Version(version.major, version.minor + 1, 0)
    else:
        upper = Version(version.major + 1, 0, 0)

    return match.end() - pos, _bounds(lower, upper)


def caret_range(expression: str, pos: int = 0) -> Optional[Desugared]:
    """Desugar "^P": changes that keep the left-most non-zero component."""
    match = CARET_PATTERN.match(expression, pos)
    if not match:
        return None

    version = PartialVersion.parse(match.group(1))
    lower = version.to_zero_version()

    if version.major is None:
        upper = None
    elif version.major > 0 or version.minor is None:
        # Major is pinned, even when it is zero
        upper = Version(version.major + 1, 0, 0)
    elif version.patch is None or version.minor > 0:
        # Minor is pinned, even when it is zero
        upper = Version(0, version.minor + 1, 0)
    else:
        upper = Version(0, 0, version.patch + 1)

    return match.end() - pos, _bounds(lower, upper)


def hyphen_range(expression: str, pos: int = 0) -> Optional[Desugared]:
    """Desugar "A - B": inclusive lower bound, upper bound depending on B."""
    match = HYPHEN_PATTERN.match(expression, pos)
    if not match:
        return None

    minimum = PartialVersion.parse(match.group(1))
    maximum = PartialVersion.parse(match.group(2))

    lower = minimum.to_zero_version()
    if maximum.is_full:
        upper = maximum.to_zero_version()
        upper_operator = Operator.LESS_THAN_OR_EQUAL
    else:
        upper = _next_line(maximum)
        upper_operator = Operator.LESS_THAN_EXCLUDING_PRERELEASES

    return match.end() - pos, _bounds(
        lower,
        upper,
        lower_operator=Operator.GREATER_THAN_OR_EQUAL_INCLUDING_PRERELEASES,
        upper_operator=upper_operator,
    )


def star_range(expression: str, pos: int = 0) -> Optional[Desugared]:
    """Desugar "[=]P" where P contains a wildcard or omits components.

    A fully specified P is not a range, so the rule declines and the token is
    left to explicit comparator parsing.
    """
    match = STAR_PATTERN.match(expression, pos)
    if not match:
        return None

    try:
        version = PartialVersion.parse(match.group(1))
    except InvalidVersionError:
        return None

    if version.is_full:
        return None

    return match.end() - pos, _bounds(
        version.to_zero_version(),
        _next_line(version),
        lower_operator=Operator.GREATER_THAN_OR_EQUAL_INCLUDING_PRERELEASES,
    )


def primitive_comparator(expression: str, pos: int = 0) -> Optional[Desugared]:
    """Parse an explicit "[op]P" comparator.

    Full versions map directly to one comparator. Partial versions expand
    to the bound they imply: ">=1.2" is ">=1.2.0", ">1.2" is ">=1.3.0",
    "<1.2" is "<1.2.0" and "<=1.2" is "<1.3.0".
    """
    match = COMPARATOR_PATTERN.match(expression, pos)
    if not match:
        return None

    symbol = match.group("op") or ""
    version = PartialVersion.parse(match.group("version"))
    consumed = match.end() - pos

    if version.is_full:
        return consumed, [Comparator(Operator.from_symbol(symbol), version.to_zero_version())]

    if symbol in ("", "="):
        # Same bounds as star_range
        return consumed, _bounds(
            version.to_zero_version(),
            _next_line(version),
            lower_operator=Operator.GREATER_THAN_OR_EQUAL_INCLUDING_PRERELEASES,
        )

    if symbol == ">=":
        if version.major is None:
            return consumed, []
        return consumed, [Comparator(Operator.GREATER_THAN_OR_EQUAL, version.to_zero_version())]

    if symbol == ">":
        upper = _next_line(version)
        if upper is None:
            return consumed, [Comparator(Operator.LESS_THAN, _MIN_VERSION)]
        return consumed, [Comparator(Operator.GREATER_THAN_OR_EQUAL, upper)]

    if symbol == "<":
        if version.major is None:
            return consumed, [Comparator(Operator.LESS_THAN, _MIN_VERSION)]
        return consumed, [Comparator(Operator.LESS_THAN, version.to_zero_version())]

    # "<="
    upper = _next_line(version)
    if upper is None:
        return consumed, []
    return consumed, [Comparator(Operator.LESS_THAN_EXCLUDING_PRERELEASES, upper)]


# Tried in order at every scan offset; the first rule that matches wins
RULES: tuple[Callable[[str, int], Optional[Desugared]], ...] = (
    tilde_range,
    caret_range,
    hyphen_range,
    star_range,
    primitive_comparator,
)


def desugar(expression: str, pos: int = 0) -> Desugared:
    """Desugar the token at ``pos`` using the first rule that applies.

    Raises:
        InvalidRangeError: If no rule accepts the token, or the partial
            version inside an accepted token is malformed
    """
    for rule in RULES:
        try:
            result = rule(expression, pos)
        except InvalidVersionError as e:
            raise InvalidRangeError(expression, e.message) from e
        if result is not None and result[0] > 0:
            return result

    token = expression[pos:].split(None, 1)[0] if expression[pos:].strip() else ""
    raise InvalidRangeError(expression, f"Unrecognized range token {token!r} in {expression!r}")
