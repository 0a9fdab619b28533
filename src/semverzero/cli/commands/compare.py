# SPDX-License-Identifier: MIT
"""Compare two versions by precedence."""

from __future__ import annotations

from typing import Optional

import click

from ...semver import InvalidVersionError, parse_version
from ..main import Context, echo_info, echo_model, fail_invalid, pass_context
from ..models import ComparisonResult

_RELATIONS = {-1: "<", 0: "==", 1: ">"}


@click.command()
@click.argument("left")
@click.argument("right")
@click.option(
    "--json/--text",
    "as_json",
    default=None,
    help="Output as JSON or text (defaults to [tool.semverzero].output).",
)
@pass_context
def compare(ctx: Context, left: str, right: str, as_json: Optional[bool]) -> None:
    """Compare LEFT with RIGHT and print -1, 0 or 1.

    Build metadata is ignored, so 1.0.0+a and 1.0.0+b compare equal.

    \b
    Examples:
        semverzero compare 1.9.0 1.10.0       # -1
        semverzero compare 1.0.0 1.0.0-rc.1   # 1
    """
    try:
        left_version = parse_version(left)
        right_version = parse_version(right)
    except InvalidVersionError as e:
        fail_invalid(e)

    result = left_version.compare_to(right_version)
    comparison = ComparisonResult(
        left=left, right=right, result=result, relation=_RELATIONS[result]
    )

    if ctx.use_json(as_json):
        echo_model(comparison)
        return

    echo_info(str(result))
    if ctx.verbose:
        echo_info(f"{left} {comparison.relation} {right}")
