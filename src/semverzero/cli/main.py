# SPDX-License-Identifier: MIT
"""CLI entry point for the semverzero command."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import click
from pydantic import BaseModel

from .. import __version__
from ..semver import InvalidVersionError
from ..comparator import InvalidRangeError
from .config import CLIConfig, ConfigError, load_config

# Exit code for input that is not a version or range
EXIT_INVALID_INPUT = 2


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            try:
                self.config = load_config(self.project_dir)
            except ConfigError as e:
                fail(str(e), code=1)
            if self.verbose:
                source = self.config.source or "defaults"
                echo_info(f"Configuration: {source}")
        return self.config

    def use_json(self, flag: Optional[bool]) -> bool:
        """Resolve --json/--text against the configured output mode."""
        if flag is not None:
            return flag
        return self.load_config().output == "json"


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def echo_model(model: BaseModel) -> None:
    """Print a result model as JSON."""
    click.echo(model.model_dump_json(indent=2))


def fail(message: str, code: int = EXIT_INVALID_INPUT) -> NoReturn:
    """Report an error and exit."""
    echo_error(message)
    raise SystemExit(code)


def fail_invalid(error: InvalidVersionError | InvalidRangeError) -> NoReturn:
    """Report an unparsable version or range and exit."""
    if isinstance(error, InvalidRangeError):
        fail(f"{error.message} (in range {error.expression!r})")
    fail(f"{error.message} (in version {error.version!r})")


@click.group()
@click.version_option(version=__version__, prog_name="semverzero")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.semverzero] configuration from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version parsing and range matching tool.

    Parse and order SemVer 2.0.0 versions and check them against npm-style
    range expressions.

    \b
    Examples:
        semverzero parse 1.2.3-rc.1+build.5
        semverzero compare 1.9.0 1.10.0
        semverzero sort 1.0.0 1.0.0-alpha 0.9.1
        semverzero satisfies 1.2.9 "~1.2.3"
        semverzero desugar "^0.2 || 1.0.0 - 1.4"
        semverzero filter --max ">=1.2.0 <2.0.0" 1.1.0 1.4.2 2.0.0
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import parse, compare, sort, satisfies, desugar, filter_versions

cli.add_command(parse.parse)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(satisfies.satisfies)
cli.add_command(desugar.desugar)
cli.add_command(filter_versions.filter_versions)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
