"""
Configuration models.

Provides Pydantic models for polyhash configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_ALGORITHM = "md5"

# Algorithms reported by `polyhash digest` when none are requested
DEFAULT_REPORT_ALGORITHMS = [
    "md5",
    "sha1",
    "sha256",
    "sha512",
    "fnv32",
    "fnv32a",
    "fnv64",
    "fnv64a",
    "fnv128",
    "fnv128a",
    "blake3",
    "adler32",
    "mmh3",
    "whirlpool",
    "crc32",
    "xxhash",
]


def _check_algorithm(name: str) -> str:
    from ...hashing.registry import get_registry

    if name not in get_registry():
        raise ValueError(f"Unknown hash algorithm: {name}")
    return name


class ConfigBaseModel(BaseModel):
    """Base model for config sections.

    Values are coerced, since TOML and env give strings for everything.
    Unknown keys are ignored so a newer config file still loads.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")


class HashConfig(ConfigBaseModel):
    """Hash algorithm configuration section."""

    algorithm: str = DEFAULT_ALGORITHM
    report: list[str] = Field(default_factory=lambda: list(DEFAULT_REPORT_ALGORITHMS))

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        return _check_algorithm(v.strip().lower())

    @field_validator("report", mode="before")
    @classmethod
    def parse_comma_separated(cls, v: Any) -> list[str]:
        """Parse comma-separated string to list."""
        if isinstance(v, str):
            return [x.strip() for x in v.split(",") if x.strip()]
        return v if v else []

    @field_validator("report")
    @classmethod
    def validate_report(cls, v: list[str]) -> list[str]:
        return [_check_algorithm(name.strip().lower()) for name in v]


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v
