# SPDX-License-Identifier: MIT
"""Parse a version string and print its components."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from numbers import Number

import click

from semver_core import ParseError, Version

from ..main import Context, echo_error, echo_version, get_config, pass_context


def _to_number(text: str) -> Number:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return Decimal(text)
    except InvalidOperation:
        raise click.BadParameter(f"{text!r} is not a number", param_hint="VERSION") from None


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the components as JSON.",
)
@click.option(
    "--number",
    is_flag=True,
    help="Treat VERSION as a number and parse its decimal form.",
)
@pass_context
def parse(ctx: Context, version: str, as_json: bool, number: bool) -> None:
    """Parse VERSION and print its components.

    Missing minor and patch numbers default to 0 and a leading non-digit
    prefix such as "v" is ignored.

    \b
    Examples:
        semver parse 1.2.3-alpha.1+build.5
        semver parse --json v2.1
        semver parse --number 12
        semver parse -- -1.0.0              # rejected
    """
    config = get_config(ctx)
    output_format = "json" if as_json else config.output_format

    try:
        if number:
            parsed = Version.from_number(_to_number(version))
        else:
            parsed = Version.parse(version)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_version(parsed, output_format)
