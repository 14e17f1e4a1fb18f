"""Configuration management for the typography configuration engine."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidYamlError,
    InvertedBoundsError,
    NonPositiveSizeError,
)
from .models import TextCase

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ScaleDefaultsConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SCALE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Defaults used when a style editor opens."""

    style_name: str = Field("Untitled style", description="Default style name")
    initial_size: float = Field(12, gt=0.0, description="Auto scale base size in px")
    steps: int = Field(9, ge=1, description="Auto scale step count")
    line_height: float = Field(1.2, gt=0.0, description="Line height multiplier")
    letter_spacing: float = Field(0.0, description="Letter spacing in percent")
    text_case: TextCase = Field(TextCase.TITLE, description="Default text case")
    scale_ratio: float = Field(1.2, gt=0.0, description="Auto scale ratio")

    # Manual scale seed
    manual_base_size: float = Field(10, description="Size of the first manual entry")
    manual_base_line_height: float = Field(1.2, gt=0.0, description="Manual line height")

    @field_validator("manual_base_size")
    @classmethod
    def validate_manual_base_size(cls, v):
        if v <= 0:
            raise NonPositiveSizeError()
        return v


class ValidationRulesConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VALIDATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Bounds enforced by the validator. Line height bounds are percentages."""

    line_height_min: float = Field(50, description="Minimum line height (%)")
    line_height_max: float = Field(500, description="Maximum line height (%)")
    letter_spacing_min: float = Field(-100, description="Minimum letter spacing (%)")
    letter_spacing_max: float = Field(200, description="Maximum letter spacing (%)")
    font_size_min: float = Field(1, description="Minimum font size (px)")
    font_size_max: float = Field(1000, description="Maximum font size (px)")

    @model_validator(mode="after")
    def validate_bounds(self):
        for name in ("line_height", "letter_spacing", "font_size"):
            if getattr(self, f"{name}_min") >= getattr(self, f"{name}_max"):
                raise InvertedBoundsError(name)
        return self


class SearchConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font search configuration."""

    font_query_limit: int = Field(100, ge=1, description="Maximum fonts returned by a search")


class AppConfig(BaseSettings):
    """Main application configuration that loads from multiple sources."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development", description="Environment (development, staging, production)"
    )
    log_level: str = Field("INFO", description="Application log level")

    scale: ScaleDefaultsConfig = Field(default_factory=ScaleDefaultsConfig)
    validation: ValidationRulesConfig = Field(default_factory=ValidationRulesConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    def model_post_init(self, __context) -> None:
        """Reload nested configs so SCALE_, VALIDATION_ and SEARCH_ env vars apply."""
        if any(key.upper().startswith(("SCALE_", "VALIDATION_", "SEARCH_")) for key in os.environ):
            env_file = getattr(self, "_env_file", ".env")
            env_file = env_file if env_file and Path(env_file).exists() else None
            self.scale = ScaleDefaultsConfig(_env_file=env_file)
            self.validation = ValidationRulesConfig(_env_file=env_file)
            self.search = SearchConfig(_env_file=env_file)

    @classmethod
    def load_from_env(cls, env_file: str | Path | None = ".env") -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        if env_file:
            env_file = Path(env_file)
            if env_file.exists():
                return cls(_env_file=env_file)
        return cls()


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        # YAML-backed configs must not pick up values from a stray .env file
        if issubclass(config_class, BaseSettings):

            class YamlConfig(config_class):
                model_config = SettingsConfigDict(
                    env_file=None,
                    case_sensitive=False,
                    extra="ignore",
                )

            return YamlConfig(**config_data)
        return config_class(**config_data)

    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigLoadError(str(e)) from e


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure root logging from the application config."""
    level = config.log_level if config else "INFO"
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)


def _add_yaml_methods():
    """Add YAML loading methods to configuration classes."""

    @classmethod
    def from_yaml(cls, config_path: str | Path):
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(cls, yaml_path: str | Path | None = None, env_file: str = ".env"):
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)

    for config_class in [
        ScaleDefaultsConfig,
        ValidationRulesConfig,
        SearchConfig,
        AppConfig,
    ]:
        config_class.from_yaml = from_yaml
        config_class.from_env_and_yaml = from_env_and_yaml


_add_yaml_methods()
