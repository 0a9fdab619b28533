# SPDX-License-Identifier: MIT
"""Tests for the semverzero command line interface."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from semverzero import __version__
from semverzero.cli.main import cli, main


def _invoke(runner: CliRunner, project: Path, *args: str):
    return runner.invoke(cli, ["-C", str(project), *args])


class TestGroup:
    """Tests for the top-level command group."""

    def test_version_option(self, cli_runner: CliRunner) -> None:
        """Test --version prints the package version."""
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, cli_runner: CliRunner) -> None:
        """Test that every command is registered."""
        result = cli_runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for name in ["parse", "compare", "sort", "satisfies", "desugar", "filter"]:
            assert name in result.output

    def test_invalid_config(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that a bad [tool.semverzero] table exits with 1."""
        (empty_project / "pyproject.toml").write_text('[tool.semverzero]\nformat = "huge"\n')

        result = _invoke(cli_runner, empty_project, "parse", "1.2.3")

        assert result.exit_code == 1
        assert "Invalid [tool.semverzero].format" in result.output

    def test_main_entry_point_invalid_config(self, empty_project: Path, monkeypatch) -> None:
        """Test that the console-script entry point exits with 1 on bad config."""
        (empty_project / "pyproject.toml").write_text('[tool.semverzero]\noutput = "xml"\n')
        monkeypatch.setattr(
            sys, "argv", ["semverzero", "-C", str(empty_project), "parse", "1.2.3"]
        )

        with pytest.raises(SystemExit) as excinfo:
            main()

        assert excinfo.value.code == 1


class TestParseCommand:
    """Tests for semverzero parse."""

    def test_text_output(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test the component listing."""
        result = _invoke(cli_runner, empty_project, "parse", "1.2.3-rc.1+build.5")

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "1.2.3-rc.1+build.5"
        assert "prerelease: rc.1" in result.output
        assert "build:      build.5" in result.output

    def test_json_output(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test --json output."""
        result = _invoke(cli_runner, empty_project, "parse", "--json", "2.0.0-beta")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["major"] == 2
        assert data["prerelease"] == "beta"
        assert data["build"] is None
        assert data["is_prerelease"] is True

    def test_format_option(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test --format hides trailing zero components."""
        result = _invoke(cli_runner, empty_project, "parse", "--format", "major", "3.0.0")

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "3"

    def test_configured_defaults(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test format and output taken from pyproject.toml."""
        result = _invoke(cli_runner, temp_project, "parse", "1.2.0")

        assert result.exit_code == 0
        assert json.loads(result.output)["text"] == "1.2"

    def test_text_overrides_config(self, cli_runner: CliRunner, temp_project: Path) -> None:
        """Test --text wins over a configured JSON output."""
        result = _invoke(cli_runner, temp_project, "parse", "--text", "1.2.0")

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "1.2"

    def test_invalid_version(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that an invalid version exits with 2."""
        result = _invoke(cli_runner, empty_project, "parse", "1.0.0-")

        assert result.exit_code == 2
        assert "Error:" in result.output
        assert "1.0.0-" in result.output

    def test_verbose_reports_config(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that verbose mode names the configuration source."""
        result = cli_runner.invoke(cli, ["-v", "-C", str(empty_project), "parse", "1.0.0"])

        assert result.exit_code == 0
        assert "Configuration: defaults" in result.output


class TestCompareCommand:
    """Tests for semverzero compare."""

    def test_less(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test numeric ordering of components."""
        result = _invoke(cli_runner, empty_project, "compare", "1.9.0", "1.10.0")

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_equal_ignores_build(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that build metadata does not affect the result."""
        result = _invoke(cli_runner, empty_project, "compare", "1.0.0+a", "1.0.0+b")

        assert result.output.strip() == "0"

    def test_verbose_relation(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that verbose mode prints the relation."""
        result = cli_runner.invoke(
            cli, ["-v", "-C", str(empty_project), "compare", "1.0.0", "1.0.0-rc.1"]
        )

        assert result.exit_code == 0
        assert "1.0.0 > 1.0.0-rc.1" in result.output

    def test_json(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test --json output."""
        result = _invoke(cli_runner, empty_project, "compare", "--json", "2.0.0", "1.0.0")

        data = json.loads(result.output)
        assert data == {"left": "2.0.0", "right": "1.0.0", "result": 1, "relation": ">"}

    def test_invalid(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that an invalid operand exits with 2."""
        result = _invoke(cli_runner, empty_project, "compare", "1.0.0", "one")

        assert result.exit_code == 2


class TestSortCommand:
    """Tests for semverzero sort."""

    def test_ascending(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test lowest-first ordering."""
        result = _invoke(cli_runner, empty_project, "sort", "1.0.0", "1.0.0-alpha", "0.9.1")

        assert result.exit_code == 0
        assert result.output.splitlines() == ["0.9.1", "1.0.0-alpha", "1.0.0"]

    def test_reverse(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test highest-first ordering."""
        result = _invoke(cli_runner, empty_project, "sort", "-r", "1.9.0", "1.11.0", "1.10.0")

        assert result.output.splitlines() == ["1.11.0", "1.10.0", "1.9.0"]

    def test_json(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test --json output."""
        result = _invoke(cli_runner, empty_project, "sort", "--json", "2", "1.5")

        assert json.loads(result.output) == ["1.5.0", "2.0.0"]

    def test_invalid(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that one invalid version fails the command."""
        result = _invoke(cli_runner, empty_project, "sort", "1.0.0", "1.0.0+")

        assert result.exit_code == 2


class TestSatisfiesCommand:
    """Tests for semverzero satisfies."""

    def test_satisfied(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test exit code 0 when the version matches."""
        result = _invoke(cli_runner, empty_project, "satisfies", "1.2.9", "~1.2.3")

        assert result.exit_code == 0
        assert "1.2.9 satisfies ~1.2.3" in result.output

    def test_not_satisfied(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test exit code 1 when the version does not match."""
        result = _invoke(cli_runner, empty_project, "satisfies", "1.5.0-beta", "^1.0.0")

        assert result.exit_code == 1
        assert "does not satisfy" in result.output

    def test_invalid_range(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test exit code 2 when the range is invalid."""
        result = _invoke(cli_runner, empty_project, "satisfies", "1.0.0", "~1.2.3.4.5")

        assert result.exit_code == 2
        assert "in range" in result.output

    def test_json(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test --json output includes the desugared range."""
        result = _invoke(cli_runner, empty_project, "satisfies", "--json", "0.2.5", "^0.2.3")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["satisfied"] is True
        assert data["desugared"] == ">=0.2.3 <0.3.0"

    def test_verbose_shows_range(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that verbose mode prints the desugared range."""
        result = cli_runner.invoke(
            cli, ["-v", "-C", str(empty_project), "satisfies", "1.4.0", "1.x"]
        )

        assert "Range: >=1.0.0 <2.0.0" in result.output


class TestDesugarCommand:
    """Tests for semverzero desugar."""

    def test_desugared(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test printing the expanded range."""
        result = _invoke(cli_runner, empty_project, "desugar", "~1.2 || 3.0.0 - 3.1")

        assert result.exit_code == 0
        assert result.output.strip() == ">=1.2.0 <1.3.0 || >=3.0.0 <3.2.0"

    def test_verbose_lists_operators(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that verbose mode lists every comparator with its operator."""
        result = cli_runner.invoke(cli, ["-v", "-C", str(empty_project), "desugar", "^1.2.3"])

        assert result.exit_code == 0
        assert "[1] >=1.2.3 <2.0.0" in result.output
        assert "less_than_excluding_prereleases 2.0.0" in result.output

    def test_invalid(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that an invalid range exits with 2."""
        result = _invoke(cli_runner, empty_project, "desugar", "^^1")

        assert result.exit_code == 2


class TestFilterCommand:
    """Tests for semverzero filter."""

    def test_matches(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test printing matching versions in input order."""
        result = _invoke(
            cli_runner, empty_project, "filter", "^1.2", "1.1.0", "1.9.0", "1.2.5", "2.0.0"
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.9.0", "1.2.5"]

    def test_max(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test --max picks the highest match."""
        result = _invoke(
            cli_runner, empty_project, "filter", "--max", "~1.2", "1.2.0", "1.2.7", "1.3.0"
        )

        assert result.output.strip() == "1.2.7"

    def test_min(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test --min picks the lowest match."""
        result = _invoke(
            cli_runner, empty_project, "filter", "--min", ">1.0.0", "1.0.0", "1.4.0", "1.0.1"
        )

        assert result.output.strip() == "1.0.1"

    def test_no_match(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test exit code 1 when nothing matches."""
        result = _invoke(cli_runner, empty_project, "filter", "^3", "1.0.0", "2.0.0")

        assert result.exit_code == 1
        assert "No version satisfies" in result.output

    def test_json(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test --json output."""
        result = _invoke(
            cli_runner, empty_project, "filter", "--json", "--max", "1.x", "1.0.0", "1.5.0"
        )

        data = json.loads(result.output)
        assert data["matches"] == ["1.0.0", "1.5.0"]
        assert data["selected"] == "1.5.0"
        assert data["desugared"] == ">=1.0.0 <2.0.0"

    def test_invalid_candidate(self, cli_runner: CliRunner, empty_project: Path) -> None:
        """Test that an invalid candidate version exits with 2."""
        result = _invoke(cli_runner, empty_project, "filter", "*", "1.0.0", "banana")

        assert result.exit_code == 2
