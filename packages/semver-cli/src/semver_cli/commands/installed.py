# SPDX-License-Identifier: MIT
"""Show the version of an installed distribution."""

from __future__ import annotations

import click

from semver_core import distribution_version

from ..main import Context, echo_error, echo_version, get_config, pass_context


@click.command()
@click.argument("name")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the components as JSON.",
)
@pass_context
def installed(ctx: Context, name: str, as_json: bool) -> None:
    """Show the version of the installed distribution NAME."""
    config = get_config(ctx)
    output_format = "json" if as_json else config.output_format

    version = distribution_version(name)
    if version is None:
        echo_error(f"No semantic version available for distribution '{name}'")
        raise SystemExit(1)

    echo_version(version, output_format)
