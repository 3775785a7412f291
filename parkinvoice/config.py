"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

from .services.customer_policy import ADMIT_ALL, POLICY_FACTORIES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseModel):
    """Application configuration."""
    customer_policy: str = ADMIT_ALL
    data_file: Path | None = None  # Defaults to the bundled seed data
    log_level: str = "WARNING"
    currency: str = "EUR"  # Display label only

    @field_validator("customer_policy")
    @classmethod
    def validate_customer_policy(cls, value: str) -> str:
        """Ensure the policy name is one of the known policies."""
        if value not in POLICY_FACTORIES:
            raise ValueError(
                f"customer_policy must be one of {', '.join(POLICY_FACTORIES)}, got '{value}'"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and validate the logging level name."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level

    def get_log_level(self) -> int:
        """Get the log level as a logging constant."""
        return logging.getLevelName(self.log_level)

    def resolve_data_file(self, base_dir: Path) -> Path | None:
        """Resolve a relative ``data_file`` against the config file's directory."""
        if self.data_file is None or self.data_file.is_absolute():
            return self.data_file
        return base_dir / self.data_file

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        config = cls(**data)
        config.data_file = config.resolve_data_file(config_path.parent)
        return config


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
