"""
Hasher interface.

The four-operation contract every algorithm adapter implements. The
facade only ever talks to this interface, so built-in and user-defined
hashers are interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Any

# Operations a user-defined hasher must expose
HASHER_OPERATIONS = (
    "generate_from_text",
    "generate_from_stream",
    "compare_text",
    "compare_stream",
)


class Hasher(ABC):
    """
    Interface for digest generation and comparison.

    Implementations must provide:
    - generate_from_text(): digest of a string
    - generate_from_stream(): digest of everything a stream yields
    - compare_text(): raise HashMismatchError unless the text matches
    - compare_stream(): raise HashMismatchError unless the stream matches
    """

    @abstractmethod
    def generate_from_text(self, text: str) -> bytes:
        """Generate a digest from a string."""
        pass

    @abstractmethod
    def generate_from_stream(self, stream: IO[Any]) -> bytes:
        """Generate a digest from a readable stream, consuming it fully."""
        pass

    @abstractmethod
    def compare_text(self, digest: bytes, text: str) -> None:
        """
        Compare a digest against a string.

        Returns None when they match.

        Raises:
            HashMismatchError: If the digest of text differs from digest
        """
        pass

    @abstractmethod
    def compare_stream(self, digest: bytes, stream: IO[Any]) -> None:
        """
        Compare a digest against a readable stream.

        Returns None when they match.

        Raises:
            HashMismatchError: If the digest of the stream differs from digest
        """
        pass
