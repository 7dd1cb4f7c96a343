"""
Core building blocks for polyhash.

This module provides:
- Hasher and ILogger interfaces
- Custom exception hierarchy
- Settings loading (TOML + environment)
"""

from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    HashMismatchError,
    InvalidHasherError,
    PhashNotSupportedForTextError,
    PolyhashConfigError,
    PolyhashException,
    PolyhashHashingError,
    StreamNotReadyError,
    UnknownAlgorithmError,
    UnsupportedInputTypeError,
)
from .interfaces import Hasher, ILogger

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "HashMismatchError",
    "Hasher",
    "ILogger",
    "InvalidHasherError",
    "PhashNotSupportedForTextError",
    "PolyhashConfigError",
    "PolyhashException",
    "PolyhashHashingError",
    "StreamNotReadyError",
    "UnknownAlgorithmError",
    "UnsupportedInputTypeError",
]
