"""
Generic incremental hasher.

One adapter body serves every algorithm whose native engine accepts bytes
in chunks and produces a digest on demand. Algorithms differ only in the
engine factory and in how the final digest is read off the engine:

- variable width: the engine's own digest() bytes
- 32-bit / 64-bit: the engine's integer result packed big-endian
"""

from __future__ import annotations

from collections.abc import Callable
from typing import IO, Any

from ..inputs import encode_text, iter_chunks
from .base import BaseHasher

EngineFactory = Callable[[], Any]
DigestExtractor = Callable[[Any], bytes]


def object_digest(engine: Any) -> bytes:
    """Read the digest of a hashlib-style object."""
    return engine.digest()


def uint_digest(bits: int) -> DigestExtractor:
    """Build an extractor that packs engine.intdigest() into bits/8 big-endian bytes."""
    size = bits // 8

    def extract(engine: Any) -> bytes:
        return engine.intdigest().to_bytes(size, "big")

    return extract


class IncrementalHasher(BaseHasher):
    """
    Hasher over a fresh incremental engine per call.

    Engines are created inside each generate call and dropped afterwards,
    so no state survives between calls and a single instance can be
    shared across threads.
    """

    def __init__(
        self,
        name: str,
        engine_factory: EngineFactory,
        digest: DigestExtractor = object_digest,
        digest_size: int | None = None,
    ) -> None:
        """
        Args:
            name: Registered algorithm name
            engine_factory: Zero-argument callable returning a new engine
                with an update(bytes) method
            digest: Reads the final digest bytes from a fed engine
            digest_size: Declared digest width in bytes, if fixed
        """
        self.name = name
        self._engine_factory = engine_factory
        self._digest = digest
        self.digest_size = digest_size

    def generate_from_text(self, text: str) -> bytes:
        engine = self._engine_factory()
        engine.update(encode_text(text))
        return self._digest(engine)

    def generate_from_stream(self, stream: IO[Any]) -> bytes:
        engine = self._engine_factory()
        for chunk in iter_chunks(stream):
            engine.update(chunk)
        return self._digest(engine)


def variable_width(
    name: str,
    engine_factory: EngineFactory,
    digest: DigestExtractor = object_digest,
    digest_size: int | None = None,
) -> IncrementalHasher:
    """Hasher over an engine that produces its own digest bytes."""
    return IncrementalHasher(name, engine_factory, digest=digest, digest_size=digest_size)


def width32(name: str, engine_factory: EngineFactory) -> IncrementalHasher:
    """Hasher over an engine with a 32-bit integer result."""
    return IncrementalHasher(name, engine_factory, digest=uint_digest(32), digest_size=4)


def width64(name: str, engine_factory: EngineFactory) -> IncrementalHasher:
    """Hasher over an engine with a 64-bit integer result."""
    return IncrementalHasher(name, engine_factory, digest=uint_digest(64), digest_size=8)
