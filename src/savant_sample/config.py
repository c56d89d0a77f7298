"""
Configuration Management for Savant Sample

Pydantic models validated from an optional TOML file, with SAVANT_*
environment variables layered on top. Only the process environment is
consulted; no dotenv file is read.

Example configuration file (~/.config/savant-sample/config.toml):
    [logging]
    enabled = true
    level = "DEBUG"
    format = "json"
    output = ["console"]

    [categories]
    extra = ["Smoke: quick checks run before every deploy"]
    include = ["Unit"]
    exclude = []
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

import tomli_w
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .exceptions import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

DEFAULT_CONFIG_FILE = Path("~/.config/savant-sample/config.toml")


class LogLevel(str, Enum):
    """Valid logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingSettings(BaseModel):
    """Handlers the plugin installs for the duration of a test run."""
    enabled: bool = Field(False, description="Install log handlers during test runs")
    level: LogLevel = LogLevel.INFO
    format: Literal["console", "json", "rich"] = "console"
    output: List[Literal["console", "file"]] = Field(default_factory=lambda: ["console"])
    file_path: Optional[Path] = Field(None, description="Defaults to logs/savant-sample.log")
    max_file_size: int = Field(10 * 1024 * 1024, ge=1024, description="Bytes before rotating")
    backup_count: int = Field(5, ge=1, le=20, description="Rotated files to keep")


class CategoryConfig(BaseModel):
    """Test category registration and default selection."""
    extra: List[str] = Field(
        default_factory=list,
        description="Additional categories as 'Name: description' lines"
    )
    include: List[str] = Field(
        default_factory=list,
        description="Categories to run when none are given on the command line"
    )
    exclude: List[str] = Field(
        default_factory=list,
        description="Categories to skip when none are excluded on the command line"
    )


class SampleConfig(BaseModel):
    """Root configuration model."""
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    categories: CategoryConfig = Field(default_factory=CategoryConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class SampleSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    savant_log_enabled: Optional[bool] = Field(None, alias="SAVANT_LOG_ENABLED")
    savant_log_level: Optional[str] = Field(None, alias="SAVANT_LOG_LEVEL")
    savant_log_format: Optional[str] = Field(None, alias="SAVANT_LOG_FORMAT")
    savant_log_output: Optional[str] = Field(None, alias="SAVANT_LOG_OUTPUT")
    savant_log_file: Optional[str] = Field(None, alias="SAVANT_LOG_FILE")

    savant_categories: Optional[str] = Field(None, alias="SAVANT_CATEGORIES")
    savant_exclude_categories: Optional[str] = Field(None, alias="SAVANT_EXCLUDE_CATEGORIES")

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _validation_messages(error: ValidationError) -> List[str]:
    return [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    ]


class ConfigManager:
    """Loads, validates and saves the Savant Sample configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to a config file that must exist when loading.
                If None, the default location is used and read only if present.
        """
        self.explicit = config_file is not None
        self.config_file = Path(config_file) if self.explicit else DEFAULT_CONFIG_FILE.expanduser()
        self._config: Optional[SampleConfig] = None

    def load_config(self) -> SampleConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.explicit or self.config_file.exists():
            config_data = self._load_toml_file()

        try:
            settings = SampleSettings()
            self._config = SampleConfig(**self._apply_env_overrides(config_data, settings))
        except ValidationError as e:
            raise ConfigurationValidationError(_validation_messages(e)) from e

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, 'rb') as f:
                return tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found: {self.config_file}",
                "Check the path passed with --savant-config"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {e}",
                f"Make sure {self.config_file} is a readable file"
            ) from e
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise InvalidConfigurationError(
                str(self.config_file),
                str(e),
                "UTF-8 encoded TOML"
            ) from e

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any], settings: SampleSettings) -> Dict[str, Any]:
        logging_data = config_data.setdefault("logging", {})
        categories_data = config_data.setdefault("categories", {})
        if not isinstance(logging_data, dict) or not isinstance(categories_data, dict):
            # Left for model validation to report
            return config_data

        if settings.savant_log_enabled is not None:
            logging_data["enabled"] = settings.savant_log_enabled
        if settings.savant_log_level:
            logging_data["level"] = settings.savant_log_level.upper()
        if settings.savant_log_format:
            logging_data["format"] = settings.savant_log_format
        if settings.savant_log_output:
            logging_data["output"] = _split_list(settings.savant_log_output)
        if settings.savant_log_file:
            logging_data["file_path"] = settings.savant_log_file

        if settings.savant_categories:
            categories_data["include"] = _split_list(settings.savant_categories)
        if settings.savant_exclude_categories:
            categories_data["exclude"] = _split_list(settings.savant_exclude_categories)

        return config_data

    def save_config(self, config: Optional[SampleConfig] = None) -> None:
        """Save configuration to TOML file."""
        if config is None:
            config = self.load_config()

        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        # TOML has no null; unset optional fields are left out
        config_dict = config.model_dump(mode='json', exclude_none=True)

        try:
            with open(self.config_file, 'wb') as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration file: {e}",
                f"Check write permissions for {self.config_file.parent}"
            ) from e

        self._config = config

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        self._config = SampleConfig()
        self.save_config()
