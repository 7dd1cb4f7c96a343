"""
Built-in hasher constructors.

Each constructor wires one algorithm to the generic incremental hasher
with the right engine and declared width. The perceptual hasher is the
only built-in with its own adapter body.
"""

from __future__ import annotations

import hashlib
from functools import partial

import blake3
import mmh3
import whirlpool
import xxhash

from .checksums import adler32_engine, crc32_engine, fnv_engine
from .incremental import IncrementalHasher, variable_width, width32, width64
from .perceptual import PerceptualHasher

BLAKE3_DIGEST_SIZE = 64


def new_md5_hasher() -> IncrementalHasher:
    """MD5 - legacy compatibility, not for security."""
    return variable_width("md5", partial(hashlib.md5, usedforsecurity=False), digest_size=16)


def new_sha1_hasher() -> IncrementalHasher:
    return variable_width("sha1", partial(hashlib.sha1, usedforsecurity=False), digest_size=20)


def new_sha256_hasher() -> IncrementalHasher:
    return variable_width("sha256", hashlib.sha256, digest_size=32)


def new_sha512_hasher() -> IncrementalHasher:
    return variable_width("sha512", hashlib.sha512, digest_size=64)


def new_whirlpool_hasher() -> IncrementalHasher:
    """Whirlpool from the NESSIE reference code, independent of OpenSSL."""
    return variable_width("whirlpool", whirlpool.new, digest_size=64)


def new_blake3_hasher() -> IncrementalHasher:
    """BLAKE3 with a 512-bit extended output."""
    return variable_width(
        "blake3",
        blake3.blake3,
        digest=lambda engine: engine.digest(length=BLAKE3_DIGEST_SIZE),
        digest_size=BLAKE3_DIGEST_SIZE,
    )


def new_mmh3_hasher() -> IncrementalHasher:
    """MurmurHash3 x64 128-bit, seed 0."""
    return variable_width("mmh3", mmh3.mmh3_x64_128, digest_size=16)


def new_crc32_hasher() -> IncrementalHasher:
    return width32("crc32", crc32_engine)


def new_adler32_hasher() -> IncrementalHasher:
    return width32("adler32", adler32_engine)


def new_fnv32_hasher() -> IncrementalHasher:
    return width32("fnv32", partial(fnv_engine, 32))


def new_fnv32a_hasher() -> IncrementalHasher:
    return width32("fnv32a", partial(fnv_engine, 32, variant_a=True))


def new_fnv64_hasher() -> IncrementalHasher:
    return width64("fnv64", partial(fnv_engine, 64))


def new_fnv64a_hasher() -> IncrementalHasher:
    return width64("fnv64a", partial(fnv_engine, 64, variant_a=True))


def new_fnv128_hasher() -> IncrementalHasher:
    return variable_width("fnv128", partial(fnv_engine, 128), digest_size=16)


def new_fnv128a_hasher() -> IncrementalHasher:
    return variable_width("fnv128a", partial(fnv_engine, 128, variant_a=True), digest_size=16)


def new_xxhash_hasher() -> IncrementalHasher:
    """XXH64, seed 0."""
    return width64("xxhash", xxhash.xxh64)


def new_phash_hasher() -> PerceptualHasher:
    return PerceptualHasher()


BUILTIN_HASHERS = {
    "md5": new_md5_hasher,
    "sha1": new_sha1_hasher,
    "sha256": new_sha256_hasher,
    "sha512": new_sha512_hasher,
    "phash": new_phash_hasher,
    "fnv32": new_fnv32_hasher,
    "fnv32a": new_fnv32a_hasher,
    "fnv64": new_fnv64_hasher,
    "fnv64a": new_fnv64a_hasher,
    "fnv128": new_fnv128_hasher,
    "fnv128a": new_fnv128a_hasher,
    "blake3": new_blake3_hasher,
    "adler32": new_adler32_hasher,
    "mmh3": new_mmh3_hasher,
    "whirlpool": new_whirlpool_hasher,
    "crc32": new_crc32_hasher,
    "xxhash": new_xxhash_hasher,
}
