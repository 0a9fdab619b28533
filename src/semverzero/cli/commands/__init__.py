# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, compare, sort, satisfies, desugar, filter_versions

__all__ = ["parse", "compare", "sort", "satisfies", "desugar", "filter_versions"]
