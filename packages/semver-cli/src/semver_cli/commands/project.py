# SPDX-License-Identifier: MIT
"""Show the version declared by the current project."""

from __future__ import annotations

import click

from semver_core import project_version

from ..config import ConfigError, find_project_root
from ..main import Context, echo_error, echo_version, get_config, pass_context


@click.command()
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the components as JSON.",
)
@pass_context
def project(ctx: Context, as_json: bool) -> None:
    """Show the [project].version declared in pyproject.toml.

    The project is the directory given with -C, or the nearest parent of the
    current directory that contains a pyproject.toml.
    """
    try:
        project_dir = ctx.project_dir or find_project_root()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    config = get_config(ctx)
    output_format = "json" if as_json else config.output_format

    version = project_version(project_dir)
    if version is None:
        echo_error(f"No valid semantic version declared in {project_dir / 'pyproject.toml'}")
        raise SystemExit(1)

    echo_version(version, output_format)
