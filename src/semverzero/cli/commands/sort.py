# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import json
from typing import Optional

import click

from ...compare import sort_versions
from ...semver import InvalidVersionError
from ..main import Context, echo_info, fail_invalid, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort from highest to lowest.",
)
@click.option(
    "--json/--text",
    "as_json",
    default=None,
    help="Output as a JSON list or one version per line.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool, as_json: Optional[bool]) -> None:
    """Sort VERSIONS by SemVer precedence, lowest first.

    \b
    Examples:
        semverzero sort 1.0.0 1.0.0-alpha 0.9.1
        semverzero sort -r 1.10.0 1.9.0 1.11.0
    """
    try:
        ordered = sort_versions(versions, reverse=reverse)
    except InvalidVersionError as e:
        fail_invalid(e)

    version_format = ctx.load_config().format
    rendered = [v.format(version_format) for v in ordered]

    if ctx.use_json(as_json):
        click.echo(json.dumps(rendered, indent=2))
        return

    for text in rendered:
        echo_info(text)
