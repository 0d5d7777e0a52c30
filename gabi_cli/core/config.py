"""
Configuration Management.

Settings come from three layers, later layers winning:
    settings.yaml  - optional file (--config, $GABI_CONFIG, or
                     ~/.config/gabi-cli/settings.yaml)
    environment    - GABI_* variables
    CLI flags      - applied by the entry point via Settings.model_copy

Cluster credentials never live here; they are read from kubeconfig.
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gabi_cli.core.config_schema import LogLevel, SettingsFileSchema, normalize_log_level

DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "gabi-cli" / "settings.yaml"


class Settings(BaseSettings):
    """Runtime settings. Every field can be set through a GABI_* variable."""

    route_prefix: str = "gabi-"
    query_path: str = "/query"
    delimiter: str = Field(default=";", min_length=1, max_length=1)
    prompt: str = "> "
    timeout: float | None = None
    verify_tls: bool = True
    log_level: LogLevel = "INFO"
    log_format: Literal["console", "json"] = "console"
    log_file: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="GABI_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        return normalize_log_level(value)


def resolve_settings_path(explicit: str | None = None) -> Path | None:
    """
    Find the settings file to load.

    An explicit path or $GABI_CONFIG must exist; the default location is
    optional and skipped when absent.
    """
    configured = explicit or os.environ.get("GABI_CONFIG")
    if configured:
        return Path(configured).expanduser()
    if DEFAULT_SETTINGS_PATH.is_file():
        return DEFAULT_SETTINGS_PATH
    return None


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load a YAML settings file."""
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path) as f:
        return yaml.safe_load(f) or {}


def _load_validated(path: Path) -> dict[str, Any]:
    """Load YAML and validate against the schema. Returns Settings field values."""
    raw = load_yaml_config(path)
    try:
        return SettingsFileSchema(**raw).to_settings_values()
    except (ValidationError, TypeError) as e:
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e


def load_settings(config_path: str | None = None) -> Settings:
    """
    Build Settings from the YAML file and the environment.

    Args:
        config_path: Explicit settings file. Overrides $GABI_CONFIG.

    Raises:
        FileNotFoundError: If an explicitly configured file is missing
        ValueError: If the file or the environment holds invalid values
    """
    path = resolve_settings_path(config_path)
    file_values = _load_validated(path) if path is not None else {}

    try:
        from_env = Settings()
    except ValidationError as e:
        raise ValueError(f"Invalid GABI_* environment settings:\n{e}") from e
    env_values = from_env.model_dump(include=from_env.model_fields_set)
    return Settings(**{**file_values, **env_values})

