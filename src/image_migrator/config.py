"""Configuration management module"""
import os
from pathlib import Path
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from .exception import ConfigurationError

INSTANCE_PATH_ENV = "IMAGE_MIGRATOR_INSTANCE_PATH"


def get_instance_path() -> Path:
    """Get the current instance path from environment or default"""
    instance_path = os.environ.get(INSTANCE_PATH_ENV)
    if instance_path:
        return Path(instance_path).expanduser()
    return Path.home() / ".image-migrator"


def get_config_file() -> Path | None:
    """Get config file path if it exists"""
    config_file = get_instance_path() / "config.toml"
    if config_file.exists():
        return config_file
    return None


class Settings(BaseSettings):
    """Migration settings

    Sources, highest priority first: init arguments, environment
    (IMAGE_MIGRATOR_*), .env, instance config.toml.
    """

    # Legacy store (read only) and destination store
    source_database_url: str = "sqlite:///./data/legacy.db"
    destination_database_url: str = "sqlite:///./data/images.db"
    debug: bool = False  # echo SQL

    # Image host serving the legacy files
    base_url: str = "https://pic.jingyijun.xyz:8443/i"
    fetch_timeout: float = Field(default=30.0, gt=0)

    # Rows per page read from the legacy store
    page_size: int = Field(default=10000, gt=0)

    # Logging configuration
    logging_level: str = "INFO"
    log_dir: str | None = None  # default: {instance_path}/logs

    @field_validator("logging_level")
    @classmethod
    def _normalize_logging_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown logging level: {value}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="IMAGE_MIGRATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML file"""
        config_file = get_config_file()
        if config_file:
            toml_settings = TomlConfigSettingsSource(
                settings_cls, toml_file=config_file
            )
            return (
                init_settings,
                env_settings,
                dotenv_settings,
                toml_settings,
                file_secret_settings,
            )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

    def resolved_log_dir(self) -> Path:
        if self.log_dir:
            return Path(self.log_dir).expanduser()
        return get_instance_path() / "logs"


def load_settings(**overrides) -> Settings:
    """Load settings, converting validation failures to ConfigurationError

    Args:
        **overrides: Values taking priority over every other source

    Raises:
        ConfigurationError: If any source holds an invalid value
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e
