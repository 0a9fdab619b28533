# SPDX-License-Identifier: MIT
"""Show the primitive comparators a range expands to."""

from __future__ import annotations

import click

from ...comparator import InvalidRangeError
from ...ranges import Range
from ..main import Context, echo_info, fail_invalid, pass_context


@click.command()
@click.argument("expression", metavar="RANGE")
@pass_context
def desugar(ctx: Context, expression: str) -> None:
    """Print RANGE with all shorthand expanded.

    The output is for reading, not for feeding back in: bounds that keep
    out pre-releases print as plain "<" and ">=". Verbose mode prints each
    ||-separated alternative on its own line with the exact operator names.

    \b
    Examples:
        semverzero desugar "^1.2.3"           # >=1.2.3 <2.0.0
        semverzero desugar "~1.2 || 2.x"      # >=1.2.0 <1.3.0 || >=2.0.0 <3.0.0
    """
    try:
        version_range = Range.parse(expression)
    except InvalidRangeError as e:
        fail_invalid(e)

    if not ctx.verbose:
        echo_info(str(version_range))
        return

    for index, comparator_set in enumerate(version_range.comparator_sets, start=1):
        echo_info(f"[{index}] {comparator_set}")
        for comparator in comparator_set.comparators:
            echo_info(f"    {comparator.operator.name.lower()} {comparator.version}")
