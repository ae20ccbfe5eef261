"""Tests for configuration loading."""

from pathlib import Path

import pytest

from jobboard.config import (
    AppConfig,
    ConfigurationError,
    load_config,
    load_environment_config,
)
from jobboard.config.environment import DEFAULT_DATABASE_URL


class TestConfigurationLoading:
    """Test configuration loading from YAML files."""

    def test_load_valid_config(self, tmp_path, clean_env):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            """
site:
  title: Python Jobs
  tagline: Hiring Pythonistas
server:
  host: 0.0.0.0
  port: 8080
logging:
  level: DEBUG
  format: json
"""
        )

        app_config, env_config = load_config(config_file)

        assert app_config.site.title == "Python Jobs"
        assert app_config.site.tagline == "Hiring Pythonistas"
        assert app_config.server.host == "0.0.0.0"
        assert app_config.server.port == 8080
        assert app_config.logging.level == "DEBUG"
        assert app_config.logging.format == "json"
        assert env_config.database_url == DEFAULT_DATABASE_URL

    def test_defaults_when_no_config_file(self, tmp_path, clean_env):
        clean_env.chdir(tmp_path)

        app_config, _ = load_config()

        assert app_config == AppConfig()
        assert app_config.site.title == "Developer Jobs"
        assert app_config.server.port == 8000
        assert app_config.logging.format == "key-value"

    def test_finds_config_in_config_directory(self, tmp_path, clean_env):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("site:\n  title: Nested\n")
        clean_env.chdir(tmp_path)

        app_config, _ = load_config()

        assert app_config.site.title == "Nested"

    def test_empty_config_file_uses_defaults(self, tmp_path, clean_env):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        app_config, _ = load_config(config_file)

        assert app_config == AppConfig()

    def test_explicit_missing_file(self, clean_env):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(Path("nonexistent.yaml"))

    def test_invalid_yaml_syntax(self, tmp_path, clean_env):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("site: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            load_config(config_file)

    def test_top_level_must_be_mapping(self, tmp_path, clean_env):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(config_file)

    def test_invalid_port(self, tmp_path, clean_env):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 70000\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)

        assert any("server -> port" in error for error in exc_info.value.errors)

    def test_invalid_log_format(self, tmp_path, clean_env):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  format: xml\n")

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_unknown_section_rejected(self, tmp_path, clean_env):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("sources: []\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)

        assert exc_info.value.errors == ["Unknown field: sources"]

    def test_blank_title_rejected(self, tmp_path, clean_env):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("site:\n  title: '   '\n")

        with pytest.raises(ConfigurationError):
            load_config(config_file)

    def test_privileged_port_warns(self, tmp_path, clean_env):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 80\n")

        with pytest.warns(UserWarning, match="privileged"):
            load_config(config_file)

    def test_debug_in_production_warns(self, tmp_path, clean_env):
        clean_env.setenv("ENVIRONMENT", "production")
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  debug: true\n")

        with pytest.warns(UserWarning, match="debug"):
            load_config(config_file)


class TestEnvironmentConfig:
    """Test environment variable loading."""

    def test_defaults(self, clean_env):
        env_config = load_environment_config()

        assert env_config.database_url == DEFAULT_DATABASE_URL
        assert env_config.log_level is None
        assert env_config.environment == "local"

    def test_reads_variables(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite:///:memory:")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("ENVIRONMENT", "staging")

        env_config = load_environment_config()

        assert env_config.database_url == "sqlite:///:memory:"
        assert env_config.log_level == "DEBUG"
        assert env_config.environment == "staging"

    def test_invalid_log_level(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        assert "Invalid LOG_LEVEL" in exc_info.value.errors[0]

    def test_invalid_database_url(self, clean_env):
        clean_env.setenv("DATABASE_URL", "job_board.db")

        with pytest.raises(ConfigurationError, match="Environment variable validation failed"):
            load_environment_config()


class TestConfigurationError:
    def test_message_lists_errors_and_suggestions(self):
        error = ConfigurationError(
            "Configuration validation failed",
            errors=["server -> port: too large"],
            suggestions=["Use a port below 65536"],
        )

        text = str(error)

        assert text.startswith("Configuration validation failed")
        assert "1. server -> port: too large" in text
        assert "- Use a port below 65536" in text
