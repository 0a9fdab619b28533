# SPDX-License-Identifier: MIT
"""Primitive version comparators.

A comparator pairs an operator with a bound version. Besides the ordinary
operators there are two used only by desugared range shorthand, which encode
when a pre-release version may satisfy a synthesized bound.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .semver import InvalidVersionError, Version
from .partial import PartialVersion


class InvalidRangeError(Exception):
    """Raised when a comparator or range expression cannot be parsed."""

    def __init__(self, expression: str, message: str = ""):
        self.expression = expression
        self.message = message or f"Invalid version range: {expression}"
        super().__init__(self.message)


class Operator(Enum):
    """Comparison operator of a Comparator."""

    EQUAL = 0
    LESS_THAN = 1
    LESS_THAN_OR_EQUAL = 2
    GREATER_THAN = 3
    GREATER_THAN_OR_EQUAL = 4
    # Lower bound of hyphen and wildcard ranges
    GREATER_THAN_OR_EQUAL_INCLUDING_PRERELEASES = 5
    # Upper bound synthesized by shorthand desugaring
    LESS_THAN_EXCLUDING_PRERELEASES = 6

    @property
    def symbol(self) -> str:
        """Return the textual operator, e.g. ">=" or "<"."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """Map "=", "<", "<=", ">" or ">=" to an Operator.

        An empty symbol means equality.

        Raises:
            ValueError: If the symbol is not a comparison operator
        """
        try:
            return _FROM_SYMBOL[symbol]
        except KeyError:
            raise ValueError(f"Unknown comparison operator: {symbol!r}") from None


_SYMBOLS = {
    Operator.EQUAL: "=",
    Operator.LESS_THAN: "<",
    Operator.LESS_THAN_OR_EQUAL: "<=",
    Operator.GREATER_THAN: ">",
    Operator.GREATER_THAN_OR_EQUAL: ">=",
    Operator.GREATER_THAN_OR_EQUAL_INCLUDING_PRERELEASES: ">=",
    Operator.LESS_THAN_EXCLUDING_PRERELEASES: "<",
}

_FROM_SYMBOL = {
    "": Operator.EQUAL,
    "=": Operator.EQUAL,
    "<": Operator.LESS_THAN,
    "<=": Operator.LESS_THAN_OR_EQUAL,
    ">": Operator.GREATER_THAN,
    ">=": Operator.GREATER_THAN_OR_EQUAL,
}

COMPARATOR_PATTERN = re.compile(r"\s*(?P<op><=|>=|<|>|=)?\s*(?P<version>[0-9A-Za-z\-+.*]+)\s*")


@dataclass(frozen=True, slots=True)
class Comparator:
    """A single operator and bound, e.g. ">=1.2.3".

    Attributes:
        operator: The comparison operator
        version: The bound the operator compares against
    """

    operator: Operator
    version: Version

    def __str__(self) -> str:
        """Render as "<op><version>" for display.

        The pre-release-aware operators print as plain "<" and ">=", so the
        text does not parse back to the same comparator.
        """
        return f"{self.operator.symbol}{self.version}"

    def is_match(self, version: Version) -> bool:
        """Check whether a version satisfies this comparator.

        A pre-release version satisfies a LESS_THAN_EXCLUDING_PRERELEASES
        bound only when it has the same major.minor.patch as the bound.
        """
        operator = self.operator
        bound = self.version

        if operator is Operator.EQUAL:
            return version == bound
        if operator is Operator.LESS_THAN:
            return version < bound
        if operator is Operator.LESS_THAN_OR_EQUAL:
            return version <= bound
        if operator is Operator.GREATER_THAN:
            return version > bound
        if operator in (
            Operator.GREATER_THAN_OR_EQUAL,
            Operator.GREATER_THAN_OR_EQUAL_INCLUDING_PRERELEASES,
        ):
            return version >= bound
        if operator is Operator.LESS_THAN_EXCLUDING_PRERELEASES:
            if version.is_prerelease and version.triple != bound.triple:
                return False
            return version < bound

        raise ValueError(f"Unsupported operator: {operator}")

    @classmethod
    def parse(cls, text: str) -> "Comparator":
        """Parse a single explicit comparator such as ">=1.2.3" or "v2.0.0-rc.1".

        The version must be fully specified; use ComparatorSet for shorthand.

        Raises:
            InvalidRangeError: If the text is not a comparator

        Examples:
            >>> str(Comparator.parse(">= 1.2.3"))
            '>=1.2.3'
            >>> Comparator.parse("1.0.0").operator
            <Operator.EQUAL: 0>
        """
        match = COMPARATOR_PATTERN.fullmatch(text)
        if not match:
            raise InvalidRangeError(text, f"Invalid comparator: {text!r}")

        try:
            partial = PartialVersion.parse(match.group("version"))
        except InvalidVersionError as e:
            raise InvalidRangeError(text, e.message) from e

        if not partial.is_full:
            raise InvalidRangeError(
                text, f"Comparator requires a full MAJOR.MINOR.PATCH version: {text!r}"
            )

        return cls(Operator.from_symbol(match.group("op") or ""), partial.to_zero_version())
