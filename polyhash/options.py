"""
Configuration options for the Hash facade.

An option is a pure function from one HashState to the next. Hash folds
its options over default_state() from left to right, so the last option
that sets a hasher wins. Options never mutate the state they receive.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

from .core.exceptions import InvalidHasherError
from .core.interfaces.hasher import HASHER_OPERATIONS, Hasher
from .hashing import algorithms
from .hashing.registry import HashAlgorithmRegistry, get_registry


@dataclass(frozen=True)
class HashState:
    """Facade configuration: the active hasher."""

    hasher: Hasher


Option = Callable[[HashState], HashState]


def default_state() -> HashState:
    """Initial state before any option is applied (MD5)."""
    return HashState(hasher=algorithms.new_md5_hasher())


def _using(factory: Callable[[], Hasher]) -> Option:
    def option(state: HashState) -> HashState:
        return replace(state, hasher=factory())

    return option


def with_user_defined_algorithm(hasher: Hasher) -> Option:
    """
    Use a caller-supplied hasher.

    Any object exposing the four hasher operations is accepted, whether
    or not it subclasses Hasher.

    Raises:
        InvalidHasherError: If an operation is missing
    """
    missing = [op for op in HASHER_OPERATIONS if not callable(getattr(hasher, op, None))]
    if missing:
        raise InvalidHasherError(
            f"{type(hasher).__name__} does not implement the hasher operations",
            missing=missing,
        )

    def option(state: HashState) -> HashState:
        return replace(state, hasher=hasher)

    return option


def with_algorithm(name: str, registry: HashAlgorithmRegistry | None = None) -> Option:
    """
    Use a registered algorithm by name.

    The name is resolved immediately, so an unknown name fails here
    rather than at Hash construction.

    Raises:
        UnknownAlgorithmError: If name is not registered
    """
    hasher = (registry or get_registry()).create(name)
    return with_user_defined_algorithm(hasher)


def with_md5() -> Option:
    return _using(algorithms.new_md5_hasher)


def with_sha1() -> Option:
    return _using(algorithms.new_sha1_hasher)


def with_sha256() -> Option:
    return _using(algorithms.new_sha256_hasher)


def with_sha512() -> Option:
    return _using(algorithms.new_sha512_hasher)


def with_phash() -> Option:
    """Perceptual image hash; text input is rejected."""
    return _using(algorithms.new_phash_hasher)


def with_fnv32() -> Option:
    return _using(algorithms.new_fnv32_hasher)


def with_fnv32a() -> Option:
    return _using(algorithms.new_fnv32a_hasher)


def with_fnv64() -> Option:
    return _using(algorithms.new_fnv64_hasher)


def with_fnv64a() -> Option:
    return _using(algorithms.new_fnv64a_hasher)


def with_fnv128() -> Option:
    return _using(algorithms.new_fnv128_hasher)


def with_fnv128a() -> Option:
    return _using(algorithms.new_fnv128a_hasher)


def with_blake3() -> Option:
    return _using(algorithms.new_blake3_hasher)


def with_adler32() -> Option:
    return _using(algorithms.new_adler32_hasher)


def with_mmh3() -> Option:
    return _using(algorithms.new_mmh3_hasher)


def with_whirlpool() -> Option:
    return _using(algorithms.new_whirlpool_hasher)


def with_crc32() -> Option:
    return _using(algorithms.new_crc32_hasher)


def with_xxhash() -> Option:
    return _using(algorithms.new_xxhash_hasher)
