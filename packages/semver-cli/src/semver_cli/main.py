# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from semver_core import Version

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


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


def echo_version(version: Version, output_format: str) -> None:
    """Print the components of a version as text or JSON."""
    if output_format == "json":
        click.echo(json.dumps(version.to_dict(), indent=2))
        return

    echo_info(f"version:    {version}")
    echo_info(f"major:      {version.major}")
    echo_info(f"minor:      {version.minor}")
    echo_info(f"patch:      {version.patch}")
    echo_info(f"prerelease: {version.prerelease or '-'}")
    echo_info(f"build:      {version.build or '-'}")


def get_config(ctx: Context) -> CLIConfig:
    """Load configuration for a command, exiting on invalid settings."""
    try:
        return ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)


@click.group()
@click.version_option(package_name="semver-tools")
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
    help="Use this directory as the project root.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version parsing tool.

    Parse and validate MAJOR[.MINOR[.PATCH]][-PRERELEASE][+BUILD] strings.

    \b
    Examples:
        semver parse v1.2.3-rc.1
        semver parse --json 1.0.0+build.5
        semver validate 1.0.0 1.2 2.0.0.0
        semver project
        semver installed click
    """
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register commands
from .commands import parse, validate, project, installed

cli.add_command(parse.parse)
cli.add_command(validate.validate)
cli.add_command(project.project)
cli.add_command(installed.installed)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
