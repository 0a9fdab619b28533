# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ..semver import VersionFormat


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


# Values accepted for [tool.semverzero].format
FORMAT_NAMES = {
    "major": VersionFormat.MAJOR,
    "major-minor": VersionFormat.MAJOR_MINOR,
    "major-minor-patch": VersionFormat.MAJOR_MINOR_PATCH,
}

OUTPUT_MODES = ("text", "json")


@dataclass
class CLIConfig:
    """CLI configuration loaded from the [tool.semverzero] table.

    Attributes:
        project_dir: Directory the configuration was looked up in
        format: How versions are rendered in text output
        output: Default output mode, "text" or "json"
        source: pyproject.toml the values came from, None for defaults
    """

    project_dir: Path
    format: VersionFormat = VersionFormat.MAJOR_MINOR_PATCH
    output: str = "text"
    source: Optional[Path] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or holds unknown values
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        config = cls.from_pyproject_dict(pyproject, project_path)
        config.source = pyproject_path
        return config

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If [tool.semverzero] holds unknown values
        """
        tool_config = pyproject.get("tool", {}).get("semverzero", {})

        format_name = tool_config.get("format", "major-minor-patch")
        if not isinstance(format_name, str) or format_name not in FORMAT_NAMES:
            raise ConfigError(
                f"Invalid [tool.semverzero].format: {format_name!r} "
                f"(expected one of: {', '.join(FORMAT_NAMES)})"
            )

        output = tool_config.get("output", "text")
        if output not in OUTPUT_MODES:
            raise ConfigError(
                f"Invalid [tool.semverzero].output: {output!r} "
                f"(expected one of: {', '.join(OUTPUT_MODES)})"
            )

        return cls(
            project_dir=project_dir,
            format=FORMAT_NAMES[format_name],
            output=output,
        )


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to the current directory)

    Returns:
        CLIConfig instance, with defaults when there is no pyproject.toml

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    project_path = Path(project_dir) if project_dir else Path.cwd()

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
