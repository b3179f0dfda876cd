# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, validate, project, installed

__all__ = ["parse", "validate", "project", "installed"]
