"""
Configuration Schemas.

Pydantic model defining the expected structure of the optional YAML
settings file. Unknown keys or wrong types raise a clear ValidationError
at startup instead of a cryptic KeyError deep in the shell.

    SettingsFileSchema → ~/.config/gabi-cli/settings.yaml
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def normalize_log_level(value: Any) -> Any:
    """Accept level names in any case."""
    if isinstance(value, str):
        return value.strip().upper()
    return value


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


class LoggingFileSchema(_StrictBase):
    level: LogLevel | None = None
    format: Literal["console", "json"] | None = None
    file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> Any:
        return normalize_log_level(value)


class SettingsFileSchema(_StrictBase):
    route_prefix: str | None = None
    query_path: str | None = None
    delimiter: str | None = Field(default=None, min_length=1, max_length=1)
    prompt: str | None = None
    timeout: float | None = Field(default=None, gt=0)
    verify_tls: bool | None = None
    logging: LoggingFileSchema | None = None

    def to_settings_values(self) -> dict:
        """Flatten into Settings field names, dropping keys the file left unset."""
        values = self.model_dump(exclude={"logging"}, exclude_none=True)
        if self.logging is not None:
            log = self.logging.model_dump(exclude_none=True)
            for key in ("level", "format", "file"):
                if key in log:
                    values[f"log_{key}"] = log[key]
        return values
