"""Unit tests for config CLI commands.

Tests for the fstree config show and fstree config init commands.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from fstree.cli.main import app
from fstree.core.config import TreeConfig, load_config, save_config
from fstree.core.paths import get_config_path
from typer.testing import CliRunner

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("restore_logging")


class TestConfigShow:
    """Tests for fstree config show."""

    def test_defaults_without_file(self) -> None:
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "showing defaults" in result.output
        assert "show_hidden = true" in result.output
        assert "max_render_depth" not in result.output

    def test_existing_file(self) -> None:
        save_config(TreeConfig(max_render_depth=2))
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Configuration file:" in result.output
        assert "max_render_depth = 2" in result.output


class TestConfigInit:
    """Tests for fstree config init."""

    def test_init_writes_defaults(self) -> None:
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0
        assert "Config written to" in result.output
        assert load_config(get_config_path()) == TreeConfig()

    def test_init_creates_config_dir(self, isolated_config: Path) -> None:
        assert not isolated_config.exists()
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0
        assert (isolated_config / "fstree").is_dir()

    def test_init_config_dir_failure(self) -> None:
        with patch(
            "fstree.cli.commands.config.ensure_config_dir",
            side_effect=RuntimeError("Cannot create config directory"),
        ):
            result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 1
        assert "Cannot create config directory" in result.output
        assert not get_config_path().exists()

    def test_init_refuses_overwrite(self) -> None:
        save_config(TreeConfig(show_hidden=False))
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 1
        assert "Config already exists" in result.output
        assert load_config().show_hidden is False

    def test_init_force(self) -> None:
        save_config(TreeConfig(show_hidden=False))
        result = runner.invoke(app, ["config", "init", "--force"])
        assert result.exit_code == 0
        assert load_config().show_hidden is True
