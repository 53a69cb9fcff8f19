import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hooklog.core.logging import get_logger

from .hooks import HookSettings
from .logging import LoggingSettings


__all__ = ["Settings", "ConfigurationError", "find_toml_config_file"]


CONFIG_FILE_NAMES = ("hooklog.toml", ".hooklog.toml")


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def find_toml_config_file(start: Path | None = None) -> Path | None:
    """Find a config file in ``start`` (default: current directory)."""
    directory = start or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


class Settings(BaseSettings):
    """
    Configuration settings for hooklog.

    Settings are loaded from environment variables (prefix ``HOOKLOG_``,
    nested with ``__``, e.g. ``HOOKLOG_LOGGING__LEVEL=DEBUG``), .env files
    and TOML configuration files. Environment variables take precedence over
    TOML values; explicit overrides passed to :meth:`from_config` take
    precedence over both.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOOKLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Handler output and diagnostics configuration",
    )

    hooks: HookSettings = Field(
        default_factory=HookSettings,
        description="Hooks installed by the command line demo",
    )

    @classmethod
    def load_toml_config(cls, toml_path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file."""
        try:
            with toml_path.open("rb") as f:
                return tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TOML config file {toml_path}: {e}"
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {toml_path}: {e}") from e

    @classmethod
    def from_config(
        cls,
        config_path: Path | str | None = None,
        **kwargs: Any,
    ) -> "Settings":
        """Create Settings from a TOML file, the environment and overrides.

        Args:
            config_path: TOML file; defaults to ``HOOKLOG_CONFIG_FILE`` or a
                ``hooklog.toml`` in the current directory
            **kwargs: Section overrides, e.g. ``logging={"level": "DEBUG"}``

        Raises:
            ConfigurationError: If the file cannot be read or the merged
                configuration is invalid
        """
        if config_path is None:
            config_path_env = os.environ.get("HOOKLOG_CONFIG_FILE")
            if config_path_env:
                config_path = Path(config_path_env)

        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = find_toml_config_file()

        config_data: dict[str, Any] = {}
        if config_path is not None:
            if not config_path.exists():
                raise ConfigurationError(f"Config file not found: {config_path}")
            config_data = cls.load_toml_config(config_path)
            get_logger(__name__).debug("config_file_loaded", path=str(config_path))

        try:
            settings = cls()
            merged: dict[str, Any] = {}
            env_keys = {name.upper() for name in os.environ}
            for key, value in config_data.items():
                if key not in cls.model_fields:
                    continue
                current = getattr(settings, key)
                if isinstance(value, dict) and isinstance(current, BaseModel):
                    section = current.model_dump()
                    for nested_key, nested_value in value.items():
                        env_key = f"HOOKLOG_{key.upper()}__{nested_key.upper()}"
                        if env_key not in env_keys:
                            section[nested_key] = nested_value
                    merged[key] = section
                else:
                    merged[key] = value

            for key, value in kwargs.items():
                current = merged.get(key)
                if current is None and isinstance(getattr(settings, key, None), BaseModel):
                    current = getattr(settings, key).model_dump()
                if isinstance(value, dict) and isinstance(current, dict):
                    merged[key] = {**current, **value}
                else:
                    merged[key] = value

            if not merged:
                return settings
            data = settings.model_dump()
            data.update(merged)
            return cls.model_validate(data)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
