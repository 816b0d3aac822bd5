"""Unit tests for the main CLI application."""

import logging
from pathlib import Path

import pytest
from fstree import __version__
from fstree.cli.main import app, configure_logging
from fstree.core.config import TreeConfig, save_config
from typer.testing import CliRunner

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("restore_logging")


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"fstree version {__version__}" in result.output

    def test_help(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("show", "levels", "node", "find", "export", "config"):
            assert command in result.output

    def test_verbose_logs_debug(self, nested_root: Path) -> None:
        result = runner.invoke(app, ["-v", "levels", str(nested_root)])
        assert result.exit_code == 0
        assert "Expanded level 0" in result.output

    def test_quiet_hides_warnings(self, nested_root: Path) -> None:
        result = runner.invoke(app, ["-q", "levels", str(nested_root)])
        assert result.exit_code == 0
        assert "Expanded level" not in result.output


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_verbose(self) -> None:
        assert configure_logging(verbose=True) == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG

    def test_quiet(self) -> None:
        assert configure_logging(quiet=True) == logging.ERROR

    def test_verbose_wins_over_quiet(self) -> None:
        assert configure_logging(verbose=True, quiet=True) == logging.DEBUG

    def test_default_from_config(self) -> None:
        assert configure_logging() == logging.WARNING
        save_config(TreeConfig(log_level="INFO"))
        assert configure_logging() == logging.INFO
