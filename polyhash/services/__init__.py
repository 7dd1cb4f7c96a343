"""Supporting services (logging)."""

from .logging import NullLogger, PolyhashLogger, configure_logging, get_logger, reset_logging

__all__ = [
    "NullLogger",
    "PolyhashLogger",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
