"""
Configuration Management.

Loads console settings from a YAML file (default ~/.migconsole) and
overrides from MIGCONSOLE_* environment variables.

Settings (YAML):
    api.url         - Base URL of the API, e.g. http://localhost:1664/api/v1/
    api.timeout     - Request timeout in seconds
    logging.*       - Level, format and optional rotating file handler

Environment:
    MIGCONSOLE_API_URL    - Overrides api.url
    MIGCONSOLE_LOG_LEVEL  - Overrides logging.level

The resolved base URL is passed explicitly to the session; nothing reads
configuration from module state after startup.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from modules.core.config_schema import ConsoleConfigSchema
from modules.core.exceptions import ConfigurationError

CONFIG_FILENAME = ".migconsole"


def find_home_dir() -> Path:
    """Return the current user's home directory."""
    try:
        return Path.home()
    except RuntimeError as e:
        raise ConfigurationError(f"Could not determine home directory: {e}") from e


def default_config_path() -> Path:
    """Default location of the configuration file."""
    return find_home_dir() / CONFIG_FILENAME


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from path."""
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}:\n{e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping")
    return data


class Settings(BaseSettings):
    """Overrides loaded from MIGCONSOLE_* environment variables."""

    api_url: str | None = None
    log_level: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="MIGCONSOLE_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached environment overrides."""
    return Settings()


def load_console_config(
    path: Path | None = None,
    api_url: str | None = None,
    settings: Settings | None = None,
) -> ConsoleConfigSchema:
    """
    Load and validate the console configuration.

    Precedence for the base URL is api_url, then MIGCONSOLE_API_URL, then
    the file. A missing file is only an error when neither override
    supplies the URL.

    Args:
        path: Configuration file. Defaults to ~/.migconsole.
        api_url: Explicit base URL override (e.g. from --api-url).
        settings: Environment overrides. Defaults to get_settings().

    Returns:
        Validated ConsoleConfigSchema.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    path = path or default_config_path()
    settings = settings if settings is not None else get_settings()
    url_override = api_url or settings.api_url

    try:
        raw = load_yaml_config(path)
    except FileNotFoundError as e:
        if url_override is None:
            raise ConfigurationError(str(e)) from e
        raw = {}

    if url_override is not None:
        raw.setdefault("api", {})
        if not isinstance(raw["api"], dict):
            raise ConfigurationError(f"Invalid configuration in {path}: 'api' must be a mapping")
        raw["api"]["url"] = url_override

    if settings.log_level is not None:
        raw.setdefault("logging", {})
        if isinstance(raw["logging"], dict):
            raw["logging"]["level"] = settings.log_level

    try:
        return ConsoleConfigSchema.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}:\n{e}") from e
