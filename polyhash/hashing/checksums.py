"""
Engine wrapper for running-value checksums.

zlib's crc32/adler32 and fnvhash's fnv/fnva are plain functions that
take the previous value and return the next one. ChecksumEngine gives them
the hashlib-style update()/digest() surface the incremental hasher feeds.
"""

from __future__ import annotations

import zlib
from collections.abc import Callable

import fnvhash

UpdateFunc = Callable[[bytes, int], int]

# FNV parameters (offset basis, prime) by width
FNV_PARAMETERS: dict[int, tuple[int, int]] = {
    32: (0x811C9DC5, 0x01000193),
    64: (0xCBF29CE484222325, 0x100000001B3),
    128: (0x6C62272E07BB014262B821756295C58D, 0x0000000001000000000000000000013B),
}


class ChecksumEngine:
    """hashlib-style engine around a running-value checksum function."""

    def __init__(self, update_func: UpdateFunc, initial: int, bits: int) -> None:
        self._update_func = update_func
        self._value = initial
        self._mask = (1 << bits) - 1
        self.digest_size = bits // 8

    def update(self, data: bytes) -> None:
        self._value = self._update_func(data, self._value) & self._mask

    def intdigest(self) -> int:
        return self._value

    def digest(self) -> bytes:
        return self._value.to_bytes(self.digest_size, "big")


def crc32_engine() -> ChecksumEngine:
    """CRC-32 (IEEE polynomial)."""
    return ChecksumEngine(zlib.crc32, 0, 32)


def adler32_engine() -> ChecksumEngine:
    return ChecksumEngine(zlib.adler32, 1, 32)


def fnv_engine(bits: int, variant_a: bool = False) -> ChecksumEngine:
    """
    FNV-1 (or FNV-1a) engine of the given width.

    Args:
        bits: 32, 64 or 128
        variant_a: Use FNV-1a (xor before multiply)
    """
    offset, prime = FNV_PARAMETERS[bits]
    size = 1 << bits
    func = fnvhash.fnva if variant_a else fnvhash.fnv

    def update(data: bytes, value: int) -> int:
        return func(data, value, prime, size)

    return ChecksumEngine(update, offset, bits)
