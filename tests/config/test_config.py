"""
Tests for configuration management.

Tests config loading from:
1. Environment variables
2. YAML files
3. Combined (env overrides YAML)
"""

import os

import pytest
import yaml
from pydantic import ValidationError

from mindnotes.config import (
    ENV_VARS,
    CategoryDeletePolicy,
    Config,
    LoggingConfig,
    StoreConfig,
)
from mindnotes.utils.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and any local .env file."""
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


class TestConfigDefaults:
    """Test default configuration values."""

    def test_default_config_creation(self):
        config = Config()

        assert config.store.default_category == "personal"
        assert config.store.category_delete_policy == CategoryDeletePolicy.REASSIGN
        assert config.store.random_seed is None
        assert config.store.seed_demo_data is False

        assert config.logging.level == "INFO"
        assert config.logging.log_to_file is False
        assert config.logging.log_dir == "logs"

    def test_invalid_policy_rejected(self):
        with pytest.raises(ValidationError):
            StoreConfig(category_delete_policy="shred")


class TestConfigFromEnv:
    """Test loading configuration from environment variables."""

    def test_from_env_basic(self, monkeypatch):
        monkeypatch.setenv("MINDNOTES_DEFAULT_CATEGORY", "inbox")
        monkeypatch.setenv("MINDNOTES_CATEGORY_DELETE_POLICY", "forbid")
        monkeypatch.setenv("MINDNOTES_LOG_LEVEL", "DEBUG")

        config = Config.from_env()

        assert config.store.default_category == "inbox"
        assert config.store.category_delete_policy == CategoryDeletePolicy.FORBID
        assert config.logging.level == "DEBUG"

    def test_from_env_with_numbers_and_booleans(self, monkeypatch):
        monkeypatch.setenv("MINDNOTES_RANDOM_SEED", "1234")
        monkeypatch.setenv("MINDNOTES_SEED_DEMO_DATA", "yes")
        monkeypatch.setenv("MINDNOTES_LOG_TO_FILE", "0")

        config = Config.from_env()

        assert config.store.random_seed == 1234
        assert config.store.seed_demo_data is True
        assert config.logging.log_to_file is False

    def test_empty_value_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("MINDNOTES_RANDOM_SEED", "")
        assert Config.from_env().store.random_seed is None

    def test_from_env_file(self, tmp_path):
        env_file = tmp_path / "test.env"
        env_file.write_text("MINDNOTES_CATEGORY_DELETE_POLICY=orphan\n")

        config = Config.from_env(env_file=env_file)
        # load_dotenv writes straight into os.environ
        os.environ.pop("MINDNOTES_CATEGORY_DELETE_POLICY", None)

        assert config.store.category_delete_policy == CategoryDeletePolicy.ORPHAN


class TestConfigFromYaml:
    """Test loading configuration from YAML files."""

    def test_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            yaml.safe_dump(
                {
                    "store": {"category_delete_policy": "forbid", "random_seed": 9},
                    "logging": {"level": "WARNING"},
                }
            )
        )

        config = Config.from_yaml(yaml_path)

        assert config.store.category_delete_policy == CategoryDeletePolicy.FORBID
        assert config.store.random_seed == 9
        assert config.logging == LoggingConfig(level="WARNING")

    def test_from_yaml_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            yaml.safe_dump({"store": {"seed_demo_data": True}, "logging": {"level": "ERROR"}})
        )
        monkeypatch.setenv("MINDNOTES_LOG_LEVEL", "DEBUG")

        config = Config.from_env_or_yaml(yaml_path=yaml_path)

        assert config.logging.level == "DEBUG"
        assert config.store.seed_demo_data is True

    def test_no_sources_gives_defaults(self):
        assert Config.from_env_or_yaml() == Config()

    def test_env_overrides_yaml_per_key(self, tmp_path, monkeypatch):
        """Test an env var replaces only its own key, keeping YAML siblings."""
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            yaml.safe_dump(
                {
                    "store": {"category_delete_policy": "forbid"},
                    "logging": {"level": "ERROR", "log_dir": "yaml-logs"},
                }
            )
        )
        monkeypatch.setenv("MINDNOTES_RANDOM_SEED", "3")
        monkeypatch.setenv("MINDNOTES_LOG_LEVEL", "DEBUG")

        config = Config.from_env_or_yaml(yaml_path=yaml_path)

        assert config.store.category_delete_policy == CategoryDeletePolicy.FORBID
        assert config.store.random_seed == 3
        assert config.logging.level == "DEBUG"
        assert config.logging.log_dir == "yaml-logs"

    def test_env_overrides_only_set_keys(self, monkeypatch):
        monkeypatch.setenv("MINDNOTES_LOG_TO_FILE", "true")
        monkeypatch.setenv("MINDNOTES_RANDOM_SEED", "")

        assert Config.env_overrides() == {"logging": {"log_to_file": True}}

    def test_invalid_yaml_raises_configuration_error(self, tmp_path):
        yaml_path = tmp_path / "broken.yaml"
        yaml_path.write_text("store: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_yaml(yaml_path)
        assert exc_info.value.context == {"path": str(yaml_path)}

    def test_non_mapping_yaml_raises_configuration_error(self, tmp_path):
        yaml_path = tmp_path / "list.yaml"
        yaml_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            Config.from_env_or_yaml(yaml_path=yaml_path)
