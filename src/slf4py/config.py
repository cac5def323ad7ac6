"""
Logging Configuration.

Environment-driven defaults for the level registry. Every field maps to an
``SLF4PY_``-prefixed environment variable, and a local ``.env`` file is read
when present.

Usage:
    SLF4PY_LEVEL=WARN
    SLF4PY_LEVELS='{"db": "DEBUG", "db:pool": "TRACE"}'
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import LogLevel


class LoggingSettings(BaseSettings):
    """Default levels applied to a freshly built level registry."""

    model_config = SettingsConfigDict(
        env_prefix="SLF4PY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Global default log level")
    levels: Dict[str, LogLevel] = Field(
        default_factory=dict,
        description='Per-selector overrides keyed by "group" or "group:name"',
    )

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> LogLevel:
        return LogLevel.from_name(value)

    @field_validator("levels", mode="before")
    @classmethod
    def _parse_levels(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(selector): LogLevel.from_name(level) for selector, level in value.items()}
        return value
