# SPDX-License-Identifier: MIT
"""Partial versions used while desugaring range shorthand.

A partial version is a version whose major, minor and patch components may
each be left unspecified, either with a wildcard (``*``, ``x``, ``X``) or by
omitting trailing components: ``1``, ``1.2``, ``1.x``, ``*``, ``v1.2.3``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .semver import InvalidVersionError, Version, check_tag

WILDCARDS = frozenset({"*", "x", "X"})

PARTIAL_PATTERN = re.compile(
    r"[v=\s]*"
    r"(?P<major>\d+|[xX*])"
    r"(?:\.(?P<minor>\d+|[xX*])"
    r"(?:\.(?P<patch>\d+|[xX*]))?)?"
    r"(?:(?P<hyphen>-)?(?P<prerelease>[0-9A-Za-z.-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?"
    r"\s*"
)


@dataclass(frozen=True, slots=True)
class PartialVersion:
    """A version with optionally unspecified numeric components.

    Attributes:
        major: Major version, or None when unspecified
        minor: Minor version, or None when unspecified
        patch: Patch version, or None when unspecified
        prerelease: Optional pre-release tag
    """

    major: Optional[int] = None
    minor: Optional[int] = None
    patch: Optional[int] = None
    prerelease: Optional[str] = None

    @property
    def is_full(self) -> bool:
        """Return True when major, minor and patch are all specified."""
        return self.major is not None and self.minor is not None and self.patch is not None

    def to_zero_version(self) -> Version:
        """Return a concrete Version with every unspecified component set to 0."""
        return Version(
            major=self.major or 0,
            minor=self.minor or 0,
            patch=self.patch or 0,
            prerelease=self.prerelease,
        )

    def __str__(self) -> str:
        text = ".".join(
            "*" if part is None else str(part) for part in (self.major, self.minor, self.patch)
        )
        if self.prerelease is not None:
            text += f"-{self.prerelease}"
        return text

    @classmethod
    def parse(cls, text: str) -> "PartialVersion":
        """Parse a partial version.

        Leading "v", "=" and whitespace are skipped. Once a component is a
        wildcard, every later component is treated as one too, so "1.x.3"
        means "1.x". Build metadata is accepted and discarded.

        Raises:
            InvalidVersionError: If the text is not a partial version

        Examples:
            >>> PartialVersion.parse("v1.2")
            PartialVersion(major=1, minor=2, patch=None, prerelease=None)
            >>> PartialVersion.parse("1.x.3")
            PartialVersion(major=1, minor=None, patch=None, prerelease=None)
            >>> PartialVersion.parse("1.2.3beta")
            PartialVersion(major=1, minor=2, patch=3, prerelease='beta')
        """
        match = PARTIAL_PATTERN.fullmatch(text)
        if not match:
            raise InvalidVersionError(text, f"Invalid partial version: {text!r}")

        components: list[Optional[int]] = []
        unspecified = False
        wildcard = False
        for name in ("major", "minor", "patch"):
            value = match.group(name)
            if value in WILDCARDS:
                wildcard = True
            if value is None or wildcard:
                unspecified = True
            if unspecified:
                components.append(None)
                continue
            try:
                components.append(int(value))
            except ValueError as e:
                raise InvalidVersionError(
                    text, f"{name.capitalize()} component is too long: {e}"
                ) from e

        prerelease = match.group("prerelease")
        if prerelease is not None:
            if wildcard:
                raise InvalidVersionError(
                    text, f"Pre-release not allowed after a wildcard: {text!r}"
                )
            if not match.group("hyphen") and match.group("patch") is None:
                raise InvalidVersionError(
                    text, f"Pre-release must be introduced by '-' before the patch: {text!r}"
                )
            problem = check_tag(prerelease, "pre-release")
            if problem:
                raise InvalidVersionError(text, problem)

        major, minor, patch = components
        return cls(major=major, minor=minor, patch=patch, prerelease=prerelease)
