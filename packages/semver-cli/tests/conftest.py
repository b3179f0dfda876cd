# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from semver_cli.config import ENV_OUTPUT, ENV_STRICT


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SEMVER_TOOLS_* settings from the caller's shell out of tests."""
    monkeypatch.delenv(ENV_OUTPUT, raising=False)
    monkeypatch.delenv(ENV_STRICT, raising=False)


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo the root logger setup done by --verbose."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["setuptools"]
build-backend = "setuptools.build_meta"

[project]
name = "test-project"
version = "2.1.0-rc.1+build.7"
description = "Test project"
"""
    )

    yield project_dir


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create a directory without any pyproject.toml."""
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory
