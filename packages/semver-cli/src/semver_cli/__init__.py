# SPDX-License-Identifier: MIT
"""Command line interface for semantic version parsing."""

__version__ = "0.1.0"
