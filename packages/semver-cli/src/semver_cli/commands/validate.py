# SPDX-License-Identifier: MIT
"""Check whether version strings are valid semantic versions."""

from __future__ import annotations

from typing import Optional

import click

from semver_core import ParseError, parse

from ..main import Context, echo_error, echo_success, echo_warning, get_config, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit with an error if any version is invalid (default from config).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Only report invalid versions.",
)
@pass_context
def validate(
    ctx: Context,
    versions: tuple[str, ...],
    strict: Optional[bool],
    quiet: bool,
) -> None:
    """Validate one or more VERSIONS.

    Each version is reported as valid or invalid along with the reason it
    was rejected.

    \b
    Examples:
        semver validate 1.0.0 v2.1 3.0.0-rc.1
        semver validate --no-strict 1.2.3.4   # report only
    """
    config = get_config(ctx)
    if strict is None:
        strict = config.strict

    invalid: list[str] = []
    for version in versions:
        try:
            parsed = parse(version)
        except ParseError as e:
            invalid.append(version)
            click.secho(f"invalid: {version}  ({e.message})", fg="red")
            continue
        if not quiet:
            click.secho(f"valid:   {version}  -> {parsed}", fg="green")

    if not invalid:
        if not quiet:
            echo_success(f"All {len(versions)} version(s) valid")
        return

    summary = f"{len(invalid)} of {len(versions)} version(s) invalid"
    if strict:
        echo_error(summary)
        raise SystemExit(1)
    echo_warning(summary)
