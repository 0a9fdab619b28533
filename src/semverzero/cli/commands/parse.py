# SPDX-License-Identifier: MIT
"""Parse a version and show its components."""

from __future__ import annotations

from typing import Optional

import click

from ...semver import InvalidVersionError, parse_version
from ..config import FORMAT_NAMES
from ..main import Context, echo_info, echo_model, fail_invalid, pass_context
from ..models import VersionInfo


@click.command()
@click.argument("version")
@click.option(
    "--format",
    "format_name",
    type=click.Choice(list(FORMAT_NAMES)),
    default=None,
    help="Rendering of the version (defaults to [tool.semverzero].format).",
)
@click.option(
    "--json/--text",
    "as_json",
    default=None,
    help="Output as JSON or text (defaults to [tool.semverzero].output).",
)
@pass_context
def parse(
    ctx: Context,
    version: str,
    format_name: Optional[str],
    as_json: Optional[bool],
) -> None:
    """Parse VERSION and show its components.

    \b
    Examples:
        semverzero parse 1.2.3-rc.1+build.5
        semverzero parse --format major 1.2.0
        semverzero parse --json 2.0.0-beta
    """
    try:
        parsed = parse_version(version)
    except InvalidVersionError as e:
        fail_invalid(e)

    config = ctx.load_config()
    version_format = FORMAT_NAMES[format_name] if format_name else config.format
    info = VersionInfo.from_version(parsed, version_format)

    if ctx.use_json(as_json):
        echo_model(info)
        return

    echo_info(info.text)
    echo_info(f"  major:      {info.major}")
    echo_info(f"  minor:      {info.minor}")
    echo_info(f"  patch:      {info.patch}")
    echo_info(f"  prerelease: {info.prerelease if info.prerelease is not None else '-'}")
    echo_info(f"  build:      {info.build if info.build is not None else '-'}")
