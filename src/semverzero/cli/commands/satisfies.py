# SPDX-License-Identifier: MIT
"""Check whether a version satisfies a range."""

from __future__ import annotations

from typing import Optional

import click

from ...comparator import InvalidRangeError
from ...ranges import Range
from ...semver import InvalidVersionError, parse_version
from ..main import (
    Context,
    echo_info,
    echo_model,
    echo_success,
    echo_warning,
    fail_invalid,
    pass_context,
)
from ..models import SatisfiesResult


@click.command()
@click.argument("version")
@click.argument("expression", metavar="RANGE")
@click.option(
    "--json/--text",
    "as_json",
    default=None,
    help="Output as JSON or text (defaults to [tool.semverzero].output).",
)
@pass_context
def satisfies(ctx: Context, version: str, expression: str, as_json: Optional[bool]) -> None:
    """Check whether VERSION satisfies RANGE.

    Exits with 0 when it does, 1 when it does not and 2 when VERSION or
    RANGE cannot be parsed.

    \b
    Examples:
        semverzero satisfies 1.2.9 "~1.2.3"
        semverzero satisfies 1.5.0-beta "^1.0.0"    # exit code 1
    """
    try:
        parsed = parse_version(version)
        version_range = Range.parse(expression)
    except (InvalidVersionError, InvalidRangeError) as e:
        fail_invalid(e)

    matched = version_range.is_match(parsed)

    if ctx.use_json(as_json):
        echo_model(
            SatisfiesResult(
                version=version,
                range=expression,
                desugared=str(version_range),
                satisfied=matched,
            )
        )
    else:
        if ctx.verbose:
            echo_info(f"Range: {version_range}")
        if matched:
            echo_success(f"{version} satisfies {expression}")
        else:
            echo_warning(f"{version} does not satisfy {expression}")

    if not matched:
        raise SystemExit(1)
