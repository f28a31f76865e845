"""Configuration loading and validation for fuzzy-edit."""

import codecs
import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_NAME = "fuzzy-edit.yaml"


class EditConfig(BaseModel):
    """File editing configuration."""

    encoding: str = Field(default="utf-8", description="Encoding used to read and write files")
    context_lines: int = Field(
        default=3, ge=0, le=20, description="Context lines around each change in diffs"
    )
    trim_diff: bool = Field(
        default=True, description="Strip common indentation from diff output"
    )
    normalize_line_endings: bool = Field(
        default=True, description="Convert CRLF to LF before matching"
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in valid:
            raise ValueError(f"Log level must be one of: {valid}")
        return v


class Config(BaseSettings):
    """Main configuration for fuzzy-edit."""

    model_config = SettingsConfigDict(
        env_prefix="FUZZY_EDIT_",
        env_nested_delimiter="__",
    )

    edit: EditConfig = Field(default_factory=EditConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Config":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Loaded Config instance

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValueError: If the config is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        # Substitute environment variables in string values
        data = _substitute_env_vars(data)

        return cls(**data)

    @classmethod
    def find_config(cls) -> Optional[Path]:
        """Find configuration file in standard locations.

        Searches in order:
        1. ./fuzzy-edit.yaml
        2. ./fuzzy-edit.yml
        3. ~/.config/fuzzy-edit/config.yaml
        4. ~/.fuzzy-edit.yaml

        Returns:
            Path to config file if found, None otherwise
        """
        search_paths = [
            Path(f"./{DEFAULT_CONFIG_NAME}"),
            Path("./fuzzy-edit.yml"),
            Path.home() / ".config" / "fuzzy-edit" / "config.yaml",
            Path.home() / ".fuzzy-edit.yaml",
        ]

        for path in search_paths:
            if path.exists():
                return path

        return None

    @classmethod
    def load(cls, config_path: Optional[Path | str] = None) -> "Config":
        """Load configuration from file or defaults.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Loaded Config instance

        Raises:
            FileNotFoundError: If explicit path provided but not found
        """
        if config_path:
            return cls.from_yaml(config_path)

        found = cls.find_config()
        if found:
            return cls.from_yaml(found)

        # Every setting has a default, so running without a file is fine
        return cls()


def _substitute_env_vars(data):
    """Recursively substitute ${VAR} patterns with environment variables."""
    if isinstance(data, dict):
        return {k: _substitute_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_substitute_env_vars(item) for item in data]
    elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
        var_name = data[2:-1]
        return os.environ.get(var_name, data)
    return data


def setup_logging(config: Config, log_file: Optional[Path] = None) -> None:
    """Configure logging based on config settings.

    Args:
        config: Application configuration
        log_file: Optional path to log file
    """
    log_level = getattr(logging, config.logging.level)
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(log_format, date_format))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        root_logger.addHandler(file_handler)
