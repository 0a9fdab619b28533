# SPDX-License-Identifier: MIT
"""Pydantic models for the CLI's JSON output."""

from typing import Optional

from pydantic import BaseModel, Field

from ..semver import Version, VersionFormat


class VersionInfo(BaseModel):
    """Parsed components of a single version."""

    text: str = Field(description="Rendered version")
    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    prerelease: Optional[str] = None
    build: Optional[str] = None
    is_prerelease: bool

    @classmethod
    def from_version(
        cls, version: Version, version_format: VersionFormat = VersionFormat.MAJOR_MINOR_PATCH
    ) -> "VersionInfo":
        """Build the model from a Version."""
        return cls(
            text=version.format(version_format),
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            prerelease=version.prerelease,
            build=version.build,
            is_prerelease=version.is_prerelease,
        )


class ComparisonResult(BaseModel):
    """Result of comparing two versions."""

    left: str
    right: str
    result: int = Field(ge=-1, le=1, description="-1, 0 or 1")
    relation: str = Field(description="'<', '==' or '>'")


class SatisfiesResult(BaseModel):
    """Result of matching a version against a range."""

    version: str
    range: str
    desugared: str = Field(
        description="Range with shorthand expanded, for display only; pre-release-aware "
        "bounds print as plain < and >= and do not re-parse to the same range"
    )
    satisfied: bool


class FilterResult(BaseModel):
    """Versions of a candidate list that satisfy a range."""

    range: str
    desugared: str = Field(description="Range with shorthand expanded, for display only")
    matches: list[str] = Field(default_factory=list)
    selected: Optional[str] = Field(
        default=None, description="Highest or lowest match when --max/--min is given"
    )
