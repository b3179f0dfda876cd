# SPDX-License-Identifier: MIT
"""Single-pass parser for semantic version strings.

The parser accepts ``MAJOR[.MINOR[.PATCH]][-PRERELEASE][+BUILD]`` with an
optional non-digit prefix such as ``v``. Missing minor and patch numbers
default to ``0``.

Example:
    >>> parse("v1.2-rc.1+exp.sha.5114f85")
    Version(major=1, minor=2, patch=0, prerelease_identifiers=('rc', '1'), build_metadata_identifiers=('exp', 'sha', '5114f85'))
"""

from __future__ import annotations

import functools
import logging
import numbers
import re
import string
from typing import Optional, Union

from .errors import (
    Component,
    ComponentParseError,
    DigitsNotFound,
    MalformedString,
    ParseError,
)
from .semver import Version

logger = logging.getLogger(__name__)

DOT_DELIMITER = "."
PRERELEASE_DELIMITER = "-"
BUILD_METADATA_DELIMITER = "+"

# Every character a version string may contain, anywhere
VALID_CHARACTERS_PATTERN = re.compile(r"[0-9A-Za-z.\-+]+")

_DIGITS = frozenset(string.digits)
_COMPONENT_DELIMITERS = frozenset(PRERELEASE_DELIMITER + BUILD_METADATA_DELIMITER)


class _Scanner:
    """Forward-only cursor over a string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0

    @property
    def is_at_end(self) -> bool:
        return self.position >= len(self.text)

    @property
    def remainder(self) -> str:
        return self.text[self.position :]

    def scan_up_to(self, stop: frozenset[str]) -> Optional[str]:
        """Consume characters until one in ``stop``; None if nothing was consumed."""
        start = self.position
        while self.position < len(self.text) and self.text[self.position] not in stop:
            self.position += 1
        return self.text[start : self.position] or None

    def scan_while(self, allowed: frozenset[str]) -> Optional[str]:
        """Consume characters while they are in ``allowed``; None if nothing was consumed."""
        start = self.position
        while self.position < len(self.text) and self.text[self.position] in allowed:
            self.position += 1
        return self.text[start : self.position] or None

    def scan_string(self, literal: str) -> bool:
        if self.text.startswith(literal, self.position):
            self.position += len(literal)
            return True
        return False


@functools.lru_cache(maxsize=None)
def _identifiers_pattern(delimiter: str) -> re.Pattern[str]:
    return re.compile(re.escape(delimiter) + r"(?P<identifiers>[0-9A-Za-z.\-]+)")


def _scan_next_number(scanner: _Scanner, version_string: str, component: Component) -> str:
    if scanner.is_at_end:
        return "0"
    # The dot is optional here; foreign separators were rejected up front
    scanner.scan_string(DOT_DELIMITER)
    digits = scanner.scan_while(_DIGITS)
    if digits is None:
        raise DigitsNotFound(version_string, component)
    return digits


def _extract_identifiers(
    remainder: str,
    delimiter: str,
    component: Component,
    version_string: str,
) -> tuple[tuple[str, ...], str]:
    """Match ``<delimiter><identifiers>`` at the start of ``remainder``.

    Returns the split identifiers (empty when there is no match) and the
    text left after the match.
    """
    try:
        pattern = _identifiers_pattern(delimiter)
    except re.error as e:
        raise ComponentParseError(component, e, version_string) from e

    match = pattern.match(remainder)
    if match is None:
        return (), remainder
    identifiers = tuple(match.group("identifiers").split(DOT_DELIMITER))
    return identifiers, remainder[match.end() :]


def _to_int(digits: str, version_string: str) -> int:
    try:
        return int(digits)
    except ValueError as e:
        # int() refuses very long digit strings (sys.set_int_max_str_digits)
        raise MalformedString(version_string, e, "numeric component too long") from e


def parse(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: Text of the form
            ``[prefix]MAJOR[.MINOR[.PATCH]][-PRERELEASE][+BUILD]``

    Returns:
        A fully populated Version

    Raises:
        TypeError: If ``version_string`` is not a string
        MalformedString: If the string contains characters outside
            ``[0-9A-Za-z.+-]``, starts with a bare ``-``, has no version core,
            or has content left over once every component is read
        DigitsNotFound: If a numeric component has no digits
        ComponentParseError: If the prerelease or build metadata matcher fails

    Examples:
        >>> parse("1")
        Version(major=1, minor=0, patch=0, prerelease_identifiers=(), build_metadata_identifiers=())

        >>> parse("1.2.3-alpha.1+build.5").prerelease_identifiers
        ('alpha', '1')
    """
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")

    if VALID_CHARACTERS_PATTERN.fullmatch(version_string) is None:
        logger.debug("Rejected %r: invalid characters", version_string)
        raise MalformedString(version_string, reason="unexpected characters")

    scanner = _Scanner(version_string)
    prefix = scanner.scan_up_to(_DIGITS)
    if prefix == PRERELEASE_DELIMITER:
        logger.debug("Rejected %r: bare prerelease delimiter prefix", version_string)
        raise MalformedString(version_string, reason="version cannot start with '-'")

    core = scanner.scan_up_to(_COMPONENT_DELIMITERS)
    if core is None:
        raise MalformedString(version_string, reason="no version core")

    core_scanner = _Scanner(core)
    major = core_scanner.scan_while(_DIGITS)
    if major is None:
        raise DigitsNotFound(version_string, Component.MAJOR)
    minor = _scan_next_number(core_scanner, version_string, Component.MINOR)
    patch = _scan_next_number(core_scanner, version_string, Component.PATCH)
    if not core_scanner.is_at_end:
        logger.debug("Rejected %r: unread version core %r", version_string, core_scanner.remainder)
        raise MalformedString(
            version_string, reason=f"unexpected {core_scanner.remainder!r} after patch"
        )

    prerelease_identifiers, remainder = _extract_identifiers(
        scanner.remainder,
        PRERELEASE_DELIMITER,
        Component.PRERELEASE_IDENTIFIERS,
        version_string,
    )
    build_metadata_identifiers, remainder = _extract_identifiers(
        remainder,
        BUILD_METADATA_DELIMITER,
        Component.BUILD_METADATA_IDENTIFIERS,
        version_string,
    )

    if remainder.strip():
        logger.debug("Rejected %r: trailing %r", version_string, remainder)
        raise MalformedString(version_string, reason=f"unexpected trailing {remainder!r}")

    version = Version(
        major=_to_int(major, version_string),
        minor=_to_int(minor, version_string),
        patch=_to_int(patch, version_string),
        prerelease_identifiers=prerelease_identifiers,
        build_metadata_identifiers=build_metadata_identifiers,
    )
    logger.debug("Parsed %r as %s", version_string, version)
    return version


def parse_version(version: Union[str, int, float, numbers.Number]) -> Version:
    """Parse a version given either as text or as a number.

    Numbers go through :meth:`Version.from_number`, so ``parse_version(12)``
    is the same as ``parse_version("12")``.

    Raises:
        TypeError: If ``version`` is neither a string nor a number
        ParseError: If the version is invalid
    """
    if isinstance(version, str):
        return parse(version)
    return Version.from_number(version)


def try_parse(version_string: str) -> Optional[Version]:
    """Parse a version string, returning None instead of raising ParseError."""
    try:
        return parse(version_string)
    except ParseError:
        return None


def is_valid_semver(version_string: str) -> bool:
    """Check if a string parses as a semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        True
        >>> is_valid_semver("1.0.0.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return try_parse(version_string) is not None
