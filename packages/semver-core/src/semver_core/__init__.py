# SPDX-License-Identifier: MIT
"""Semantic version parsing.

This package parses ``MAJOR[.MINOR[.PATCH]][-PRERELEASE][+BUILD]`` strings
into immutable :class:`Version` values, reporting failures through a small
family of typed errors.

Example:
    >>> from semver_core import parse_version, is_valid_semver
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_identifiers
    ('alpha', '1')
    >>>
    >>> is_valid_semver("1.0.0.0")
    False
"""

__version__ = "0.1.0"

from .semver import Version
from .errors import (
    Component,
    ComponentParseError,
    DigitsNotFound,
    MalformedString,
    ParseError,
)
from .parser import (
    parse,
    parse_version,
    try_parse,
    is_valid_semver,
)
from .bundle import (
    distribution_version,
    project_version,
)

__all__ = [
    # Version value
    "Version",
    # Parsing
    "parse",
    "parse_version",
    "try_parse",
    "is_valid_semver",
    # Errors
    "ParseError",
    "MalformedString",
    "DigitsNotFound",
    "ComponentParseError",
    "Component",
    # Application version lookup
    "distribution_version",
    "project_version",
]
