# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml and the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# pyproject.toml table holding CLI settings
TOOL_TABLE = "semver-tools"

OUTPUT_FORMATS = ("text", "json")

ENV_OUTPUT = "SEMVER_TOOLS_OUTPUT"
ENV_STRICT = "SEMVER_TOOLS_STRICT"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _check_output_format(value: Any, source: str) -> str:
    if value not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format {value!r} in {source} (expected one of: "
            f"{', '.join(OUTPUT_FORMATS)})"
        )
    return value


def _parse_bool(value: str, source: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean {value!r} in {source}")


@dataclass
class CLIConfig:
    """CLI configuration.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        output_format: Default output format, "text" or "json"
        strict: Whether ``validate`` fails when any input is invalid
    """

    project_dir: Optional[Path] = None
    output_format: str = "text"
    strict: bool = True

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary."""
        source = f"[tool.{TOOL_TABLE}]"
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")
        tool_config = tool.get(TOOL_TABLE, {})
        if not isinstance(tool_config, dict):
            raise ConfigError(f"{source} must be a table")

        output_format = _check_output_format(tool_config.get("output", "text"), source)

        strict = tool_config.get("strict", True)
        if not isinstance(strict, bool):
            raise ConfigError(f"'strict' in {source} must be a boolean")

        return cls(project_dir=project_dir, output_format=output_format, strict=strict)

    def with_environment(self, environ: Optional[Mapping[str, str]] = None) -> "CLIConfig":
        """Return a copy with SEMVER_TOOLS_* environment overrides applied."""
        environ = os.environ if environ is None else environ
        config = self

        if output := environ.get(ENV_OUTPUT):
            config = replace(config, output_format=_check_output_format(output, ENV_OUTPUT))
        if strict := environ.get(ENV_STRICT):
            config = replace(config, strict=_parse_bool(strict, ENV_STRICT))

        return config

    def has_pyproject(self) -> bool:
        """Check if pyproject.toml exists in the project directory."""
        return self.project_dir is not None and (self.project_dir / "pyproject.toml").exists()


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        if (current / "pyproject.toml").exists():
            return current
        if current == current.parent:
            break
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(
    project_dir: Optional[str | Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> CLIConfig:
    """Load CLI configuration.

    Settings come from the project's pyproject.toml, if any, overridden by
    environment variables.

    Args:
        project_dir: Project directory (defaults to finding project root)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If configuration is invalid
    """
    if project_dir is None:
        try:
            project_dir = find_project_root()
        except ConfigError:
            return CLIConfig().with_environment(environ)

    config = CLIConfig(project_dir=Path(project_dir))
    if config.has_pyproject():
        config = CLIConfig.from_pyproject(config.project_dir)

    return config.with_environment(environ)
