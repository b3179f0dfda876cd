# SPDX-License-Identifier: MIT
"""Semantic version value type.

A :class:`Version` holds MAJOR.MINOR.PATCH plus the dot-separated
prerelease and build metadata identifiers:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +exp.sha.5114f85
"""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Union

# A single identifier, without the dots that separate identifiers
IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z\-]*")


def _freeze_identifiers(name: str, identifiers: Iterable[str]) -> tuple[str, ...]:
    if isinstance(identifiers, str):
        raise TypeError(f"{name} must be a sequence of strings, not a string")
    frozen = tuple(identifiers)
    for identifier in frozen:
        if not isinstance(identifier, str) or not IDENTIFIER_PATTERN.fullmatch(identifier):
            raise ValueError(f"Invalid identifier in {name}: {identifier!r}")
    # An absent component is an empty tuple, never a lone empty identifier
    if frozen == ("",):
        raise ValueError(f"{name} cannot consist of a single empty identifier")
    return frozen


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease_identifiers: Dot-separated pre-release identifiers
            (e.g. ``("alpha", "1")``), empty when there is no pre-release
        build_metadata_identifiers: Dot-separated build metadata identifiers
            (e.g. ``("build", "5")``), empty when there is no build metadata
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease_identifiers: tuple[str, ...] = field(default_factory=tuple)
    build_metadata_identifiers: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        object.__setattr__(
            self,
            "prerelease_identifiers",
            _freeze_identifiers("prerelease_identifiers", self.prerelease_identifiers),
        )
        object.__setattr__(
            self,
            "build_metadata_identifiers",
            _freeze_identifiers("build_metadata_identifiers", self.build_metadata_identifiers),
        )

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease_identifiers:
            version += f"-{self.prerelease}"
        if self.build_metadata_identifiers:
            version += f"+{self.build}"
        return version

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`semver_core.parser.parse`."""
        from .parser import parse

        return parse(version_string)

    @classmethod
    def from_number(cls, number: Union[int, float, numbers.Number]) -> "Version":
        """Parse the decimal text form of a number.

        ``Version.from_number(12)`` behaves exactly like ``Version.parse("12")``.

        Raises:
            TypeError: If ``number`` is not numeric (booleans are rejected)
            ParseError: If the text form is not a valid version
        """
        if isinstance(number, bool) or not isinstance(number, numbers.Number):
            raise TypeError(f"Expected a number, got {type(number).__name__}")
        return cls.parse(str(number))

    @property
    def prerelease(self) -> Optional[str]:
        """Return the dotted pre-release string, or None."""
        if not self.prerelease_identifiers:
            return None
        return ".".join(self.prerelease_identifiers)

    @property
    def build(self) -> Optional[str]:
        """Return the dotted build metadata string, or None."""
        if not self.build_metadata_identifiers:
            return None
        return ".".join(self.build_metadata_identifiers)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_identifiers)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping of the version components."""
        return {
            "version": str(self),
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "prerelease_identifiers": list(self.prerelease_identifiers),
            "build_metadata_identifiers": list(self.build_metadata_identifiers),
        }
