"""Abstract interfaces shared across polyhash."""

from .hasher import HASHER_OPERATIONS, Hasher
from .logger import ILogger

__all__ = [
    "HASHER_OPERATIONS",
    "Hasher",
    "ILogger",
]
