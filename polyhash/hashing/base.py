"""
Shared hasher behaviour.

BaseHasher implements both compare operations on top of the generate
operations, so concrete hashers only decide how a digest is produced.
"""

from __future__ import annotations

import hmac
from typing import IO, Any

from ..core.exceptions import HashMismatchError
from ..core.interfaces.hasher import Hasher


class BaseHasher(Hasher):
    """
    Hasher whose comparisons are exact byte equality of regenerated digests.

    Generation errors raised while regenerating propagate unchanged.
    """

    name: str = "custom"

    def compare_text(self, digest: bytes, text: str) -> None:
        self._check(digest, self.generate_from_text(text))

    def compare_stream(self, digest: bytes, stream: IO[Any]) -> None:
        self._check(digest, self.generate_from_stream(stream))

    def _check(self, expected: bytes, actual: bytes) -> None:
        # compare_digest is False for unequal lengths
        if not hmac.compare_digest(bytes(expected), actual):
            raise HashMismatchError(expected=bytes(expected), actual=actual)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
