# SPDX-License-Identifier: MIT
"""Select the versions of a list that satisfy a range."""

from __future__ import annotations

from typing import Optional

import click

from ...comparator import InvalidRangeError
from ...ranges import Range
from ...semver import InvalidVersionError
from ..main import Context, echo_info, echo_model, echo_warning, fail_invalid, pass_context
from ..models import FilterResult


@click.command(name="filter")
@click.argument("expression", metavar="RANGE")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--max",
    "select",
    flag_value="max",
    help="Print only the highest satisfying version.",
)
@click.option(
    "--min",
    "select",
    flag_value="min",
    help="Print only the lowest satisfying version.",
)
@click.option(
    "--json/--text",
    "as_json",
    default=None,
    help="Output as JSON or text (defaults to [tool.semverzero].output).",
)
@pass_context
def filter_versions(
    ctx: Context,
    expression: str,
    versions: tuple[str, ...],
    select: Optional[str],
    as_json: Optional[bool],
) -> None:
    """Print the VERSIONS that satisfy RANGE, in input order.

    Exits with 1 when no version satisfies the range.

    \b
    Examples:
        semverzero filter "^1.2" 1.1.0 1.2.5 1.9.0 2.0.0
        semverzero filter --max "~1.2" 1.2.0 1.2.7 1.3.0
    """
    try:
        version_range = Range.parse(expression)
        matching = version_range.filter(versions)
    except (InvalidVersionError, InvalidRangeError) as e:
        fail_invalid(e)

    version_format = ctx.load_config().format
    selected = None
    if matching and select == "max":
        selected = max(matching)
    elif matching and select == "min":
        selected = min(matching)

    if ctx.use_json(as_json):
        echo_model(
            FilterResult(
                range=expression,
                desugared=str(version_range),
                matches=[v.format(version_format) for v in matching],
                selected=selected.format(version_format) if selected is not None else None,
            )
        )
    elif selected is not None:
        echo_info(selected.format(version_format))
    elif select is None:
        for version in matching:
            echo_info(version.format(version_format))

    if not matching:
        if not ctx.use_json(as_json):
            echo_warning(f"No version satisfies {expression}")
        raise SystemExit(1)
