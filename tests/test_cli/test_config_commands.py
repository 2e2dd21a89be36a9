"""Tests for config CLI commands."""

from unittest.mock import patch

import pytest
from sqlalchemy import create_engine, inspect, text
from typer.testing import CliRunner

from modcore.cli.main import app
from modcore.settings import Settings
from tests.factories import SampleConfigHandler


runner = CliRunner()


@pytest.fixture
def saved_config(config_path):
    """Write the sample handler's config to disk and return its path."""
    config_handler = SampleConfigHandler("testmod")
    config_handler.initialize(config_path)
    config_handler.close()
    return config_path


class TestConfigShow:
    """Tests for 'modcore config show'."""

    def test_show_all_sections(self, saved_config):
        result = runner.invoke(app, ["config", "show", str(saved_config)])

        assert result.exit_code == 0
        assert "general" in result.output
        assert "client" in result.output
        assert "maxThings" in result.output
        assert "1..10" in result.output
        assert "game" in result.output

    def test_show_one_section(self, saved_config):
        result = runner.invoke(app, ["config", "show", str(saved_config), "--section", "CLIENT"])

        assert result.exit_code == 0
        assert "greeting" in result.output
        assert "maxThings" not in result.output

    def test_show_unknown_section(self, saved_config):
        result = runner.invoke(app, ["config", "show", str(saved_config), "-s", "nope"])

        assert result.exit_code == 1
        assert "Section nope does not exist!" in result.output

    def test_show_missing_file(self, tmp_path):
        missing = tmp_path / "missing.cfg.db"
        result = runner.invoke(app, ["config", "show", str(missing)])

        assert result.exit_code == 1
        assert "does not exist" in result.output
        assert not missing.exists()

    def test_show_missing_file_long_path(self, tmp_path):
        """Long paths do not split the error message across lines."""
        missing = tmp_path / ("nested_config_directory_" * 4) / "missing.cfg.db"
        result = runner.invoke(app, ["config", "show", str(missing)])

        assert result.exit_code == 1
        assert f"Config file {missing} does not exist" in result.output

    def test_show_non_database_file(self, tmp_path):
        notes = tmp_path / "notes.cfg.db"
        notes.write_text("just some notes\n" * 20)

        result = runner.invoke(app, ["config", "show", str(notes)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "is not a readable database" in result.output

    def test_show_foreign_database(self, tmp_path):
        """A SQLite file without config tables is reported and not modified."""
        path = tmp_path / "other.db"
        engine = create_engine(f"sqlite:///{path}")
        with engine.begin() as conn:
            conn.execute(text("CREATE TABLE t (x INTEGER)"))

        result = runner.invoke(app, ["config", "show", str(path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "is not a config file" in result.output
        assert inspect(engine).get_table_names() == ["t"]
        engine.dispose()


class TestConfigList:
    """Tests for 'modcore config list'."""

    def test_list_configs(self, saved_config):
        result = runner.invoke(app, ["config", "list", "--dir", str(saved_config.parent)])

        assert result.exit_code == 0
        assert "testmod" in result.output

    def test_list_uses_settings_dir(self, saved_config):
        settings = Settings(_env_file=None, config_dir=saved_config.parent)
        with patch("modcore.cli.commands.config.get_settings", return_value=settings):
            result = runner.invoke(app, ["config", "list"])

        assert "testmod" in result.output

    def test_list_empty(self, tmp_path):
        result = runner.invoke(app, ["config", "list", "--dir", str(tmp_path / "none")])

        assert result.exit_code == 0
        assert "No config files" in result.output
