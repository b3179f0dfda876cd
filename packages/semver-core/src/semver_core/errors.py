# SPDX-License-Identifier: MIT
"""Errors raised while parsing semantic version strings.

Every failure is a subclass of :class:`ParseError`, so callers can catch the
whole family at once or tell the cases apart by type without matching on the
message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Component(Enum):
    """The part of a version string a failure is attributed to."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE_IDENTIFIERS = "prerelease_identifiers"
    BUILD_METADATA_IDENTIFIERS = "build_metadata_identifiers"


class ParseError(Exception):
    """Base class for semantic version parse failures.

    Attributes:
        version_string: The original input text
        component: The component the failure belongs to, if known
        cause: The underlying error, if one triggered this failure
        message: Human readable description
    """

    def __init__(
        self,
        message: str,
        version_string: str,
        component: Optional[Component] = None,
        cause: Optional[BaseException] = None,
    ):
        self.version_string = version_string
        self.component = component
        self.cause = cause
        self.message = message
        super().__init__(self.message)


class MalformedString(ParseError):
    """The input contains foreign characters, a bad prefix, or trailing content."""

    def __init__(
        self,
        version_string: str,
        cause: Optional[BaseException] = None,
        reason: str = "",
    ):
        message = f'malformed version string "{version_string}"'
        if reason:
            message += f": {reason}"
        if cause is not None:
            message += f" ({cause})"
        super().__init__(message, version_string, cause=cause)


class DigitsNotFound(ParseError):
    """A numeric component was expected but no digits could be scanned."""

    def __init__(self, version_string: str, component: Optional[Component] = None):
        message = f'no digits in "{version_string}"'
        if component is not None:
            message += f" while reading {component.value}"
        super().__init__(message, version_string, component=component)


class ComponentParseError(ParseError):
    """Failure while extracting prerelease or build metadata identifiers."""

    def __init__(
        self,
        component: Component,
        cause: BaseException,
        version_string: str = "",
    ):
        message = f"{component.value} error: {cause}"
        if version_string:
            message += f' in "{version_string}"'
        super().__init__(message, version_string, component=component, cause=cause)
