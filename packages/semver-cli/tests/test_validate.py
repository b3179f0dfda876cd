# SPDX-License-Identifier: MIT
"""Tests for the semver validate command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from semver_cli.main import cli


class TestValidateCommand:
    """Tests for semver validate command."""

    def test_all_valid(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        """Test that valid versions pass."""
        result = cli_runner.invoke(
            cli, ["-C", str(empty_dir), "validate", "1.0.0", "v2.1", "3-rc.1+b"]
        )

        assert result.exit_code == 0
        assert "valid:   v2.1  -> 2.1.0" in result.output
        assert "All 3 version(s) valid" in result.output

    def test_invalid_version_fails(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        """Test that one invalid version fails the run."""
        result = cli_runner.invoke(cli, ["-C", str(empty_dir), "validate", "1.0.0", "1.2.3-"])

        assert result.exit_code == 1
        assert "invalid: 1.2.3-" in result.output
        assert "1 of 2 version(s) invalid" in result.output

    def test_digits_not_found_reason(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        """Test that the rejection reason is shown."""
        result = cli_runner.invoke(cli, ["-C", str(empty_dir), "validate", "1..2"])

        assert result.exit_code == 1
        assert "no digits" in result.output

    def test_no_strict_only_warns(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        """Test that --no-strict reports without failing."""
        result = cli_runner.invoke(
            cli, ["-C", str(empty_dir), "validate", "--no-strict", "1.2.3.4"]
        )

        assert result.exit_code == 0
        assert "Warning: 1 of 1 version(s) invalid" in result.output

    def test_strict_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that [tool.semver-tools] strict = false is honored."""
        (tmp_path / "pyproject.toml").write_text("[tool.semver-tools]\nstrict = false\n")

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "validate", "nope"])

        assert result.exit_code == 0

    def test_strict_flag_overrides_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that --strict beats the configured default."""
        (tmp_path / "pyproject.toml").write_text("[tool.semver-tools]\nstrict = false\n")

        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "validate", "--strict", "nope"])

        assert result.exit_code == 1

    def test_quiet(self, cli_runner: CliRunner, empty_dir: Path) -> None:
        """Test that --quiet hides valid versions."""
        result = cli_runner.invoke(cli, ["-C", str(empty_dir), "validate", "-q", "1.0.0"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_requires_arguments(self, cli_runner: CliRunner) -> None:
        """Test that at least one version is required."""
        result = cli_runner.invoke(cli, ["validate"])

        assert result.exit_code == 2
