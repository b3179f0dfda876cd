# SPDX-License-Identifier: MIT
"""Tests for the semver entry point's error handling."""

from __future__ import annotations

import pytest

from semver_cli import main as main_module
from semver_cli.config import ConfigError


def _raising(error: BaseException):
    def fake_cli() -> None:
        raise error

    return fake_cli


class TestMain:
    """Tests for main() mapping errors to exit codes."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (ConfigError("bad output format"), "Error: bad output format"),
            (FileNotFoundError("pyproject.toml not found"), "Error: pyproject.toml not found"),
            (RuntimeError("boom"), "Error: Unexpected error: boom"),
        ],
    )
    def test_errors_exit_with_status_one(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        error: BaseException,
        expected: str,
    ) -> None:
        """Test that each handled error prints to stderr and exits 1."""
        monkeypatch.setattr(main_module, "cli", _raising(error))

        with pytest.raises(SystemExit) as excinfo:
            main_module.main()

        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert expected in captured.err
        assert captured.out == ""

    def test_success_does_not_exit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a clean run returns normally."""
        monkeypatch.setattr(main_module, "cli", lambda: None)

        main_module.main()
