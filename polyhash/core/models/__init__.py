"""Pydantic models for polyhash."""

from .config import (
    DEFAULT_ALGORITHM,
    DEFAULT_REPORT_ALGORITHMS,
    ConfigBaseModel,
    HashConfig,
    LoggingConfig,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_REPORT_ALGORITHMS",
    "ConfigBaseModel",
    "HashConfig",
    "LoggingConfig",
]
