"""
Configuration for MindNotes.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from mindnotes.models.category import DEFAULT_CATEGORY_ID
from mindnotes.utils.exceptions import ConfigurationError


class CategoryDeletePolicy(str, Enum):
    """What happens to notes that reference a category being deleted."""

    REASSIGN = "reassign"  # move them to the default category
    FORBID = "forbid"  # refuse the delete while any note references it
    ORPHAN = "orphan"  # delete anyway, leaving dangling references


class StoreConfig(BaseModel):
    """Entity store configuration."""

    default_category: str = DEFAULT_CATEGORY_ID
    category_delete_policy: CategoryDeletePolicy = CategoryDeletePolicy.REASSIGN
    # Seed for the note color picker; None means nondeterministic
    random_seed: int | None = None
    seed_demo_data: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


# env var -> (section, field, type)
ENV_VARS: dict[str, tuple[str, str, type]] = {
    "MINDNOTES_DEFAULT_CATEGORY": ("store", "default_category", str),
    "MINDNOTES_CATEGORY_DELETE_POLICY": ("store", "category_delete_policy", str),
    "MINDNOTES_RANDOM_SEED": ("store", "random_seed", int),
    "MINDNOTES_SEED_DEMO_DATA": ("store", "seed_demo_data", bool),
    "MINDNOTES_LOG_LEVEL": ("logging", "level", str),
    "MINDNOTES_LOG_TO_FILE": ("logging", "log_to_file", bool),
    "MINDNOTES_LOG_DIR": ("logging", "log_dir", str),
    "MINDNOTES_LOG_FILE_ROTATION": ("logging", "file_rotation", str),
    "MINDNOTES_LOG_FILE_RETENTION": ("logging", "file_retention", str),
    "MINDNOTES_LOG_COMPRESSION": ("logging", "compression", str),
    "MINDNOTES_LOG_SERIALIZE": ("logging", "serialize", bool),
}


class Config(BaseModel):
    """Main configuration."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @staticmethod
    def env_overrides(env_file: str | Path | None = None) -> dict[str, dict[str, Any]]:
        """
        Collect the configuration values actually set in the environment.

        Unset and empty variables are left out, so callers can merge the
        result over another source key by key.

        Args:
            env_file: Optional path to .env file (default: .env in working directory)

        Returns:
            Nested mapping of section -> field -> converted value
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def convert(value: str, target: type) -> Any:
            """Convert an environment string to the field's type."""
            # Convert boolean strings
            if target is bool:
                return value.lower() in ("true", "1", "yes")
            # Convert numeric strings
            if target is int:
                return int(value)
            return value

        overrides: dict[str, dict[str, Any]] = {}
        for key, (section, field, target) in ENV_VARS.items():
            value = os.getenv(key)
            # Unset or empty string: keep the lower-priority value
            if not value:
                continue
            overrides.setdefault(section, {})[field] = convert(value, target)
        return overrides

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in working directory)

        Returns:
            Config instance

        Environment variables:
            MINDNOTES_DEFAULT_CATEGORY: Category assigned to new notes
            MINDNOTES_CATEGORY_DELETE_POLICY: reassign, forbid or orphan
            MINDNOTES_RANDOM_SEED: Seed for note color assignment
            MINDNOTES_SEED_DEMO_DATA: Load demo notes and categories on startup
            MINDNOTES_LOG_LEVEL: Log level
            MINDNOTES_LOG_TO_FILE: Enable rotating file sink
            MINDNOTES_LOG_DIR: Directory for log files
        """
        return cls(**cls.env_overrides(env_file))

    @staticmethod
    def _read_yaml(yaml_path: Path) -> dict[str, Any]:
        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in config file {yaml_path}: {e}", context={"path": str(yaml_path)}
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {yaml_path} must contain a mapping", context={"path": str(yaml_path)}
            )
        return data

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ConfigurationError: If YAML is invalid or not a mapping
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        return cls(**cls._read_yaml(yaml_path))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Env vars override YAML per key; YAML keys without a matching env var
        are kept.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance

        Raises:
            ConfigurationError: If the YAML file is invalid or not a mapping
        """
        if yaml_path and Path(yaml_path).exists():
            config_dict = cls._read_yaml(Path(yaml_path))
        else:
            config_dict = {}

        for section, values in cls.env_overrides(env_file).items():
            config_dict[section] = {**(config_dict.get(section) or {}), **values}

        return cls(**config_dict)
