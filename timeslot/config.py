"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)


class DefaultsConfig(BaseModel):
    """Default duration for new timeslots."""
    hours: int = 1
    minutes: int = 0

    @field_validator("hours", "minutes")
    @classmethod
    def validate_non_negative(cls, value: int) -> int:
        """Ensure duration parts are not negative."""
        if value < 0:
            raise ValueError(f"Duration parts must not be negative, got {value}")
        return value

    @field_validator("minutes")
    @classmethod
    def validate_minutes(cls, value: int) -> int:
        """Validate minutes stay below a full hour."""
        if value > 59:
            raise ValueError(f"minutes must be between 0 and 59, got {value}")
        return value

    @model_validator(mode="after")
    def validate_not_empty(self) -> "DefaultsConfig":
        """Ensure the default slot has a length."""
        if self.hours == 0 and self.minutes == 0:
            raise ValueError("Default duration must be longer than zero")
        return self


class DisplayConfig(BaseModel):
    """How slots are rendered on the console."""
    datetime_format: str = "YYYY-MM-DD HH:mm:ss"
    locale: str = "en"


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: str = "Europe/Berlin"
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone is known to pendulum."""
        try:
            pendulum.timezone(value)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: '{value}'") from exc
        return value

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
                f"See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        logger.debug("Loaded configuration from %s", config_path)
        return cls(**data)


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


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load the configuration used by the CLI.

    An explicit path must exist. Without one, a missing default file
    falls back to the built-in defaults.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if not default_path.exists():
        logger.debug("No config file at %s, using defaults", default_path)
        return AppConfig()

    return AppConfig.load_from_yaml(default_path)
