"""
polyhash - generate and verify digests through one interface.

Cryptographic hashes, checksums and perceptual image hashes share the
same generate/compare surface; the algorithm is chosen with an option
when the Hash is built.

    from polyhash import Hash, with_sha256

    h = Hash(with_sha256())
    digest = h.generate("example")
    h.compare(digest, "example")
"""

from .core.exceptions import (
    HashMismatchError,
    InvalidHasherError,
    PhashNotSupportedForTextError,
    PolyhashException,
    StreamNotReadyError,
    UnknownAlgorithmError,
    UnsupportedInputTypeError,
)
from .core.interfaces.hasher import Hasher
from .hasher import Hash
from .options import (
    HashState,
    Option,
    with_adler32,
    with_algorithm,
    with_blake3,
    with_crc32,
    with_fnv32,
    with_fnv32a,
    with_fnv64,
    with_fnv64a,
    with_fnv128,
    with_fnv128a,
    with_md5,
    with_mmh3,
    with_phash,
    with_sha1,
    with_sha256,
    with_sha512,
    with_user_defined_algorithm,
    with_whirlpool,
    with_xxhash,
)

__all__ = [
    "Hash",
    "HashMismatchError",
    "HashState",
    "Hasher",
    "InvalidHasherError",
    "Option",
    "PhashNotSupportedForTextError",
    "PolyhashException",
    "StreamNotReadyError",
    "UnknownAlgorithmError",
    "UnsupportedInputTypeError",
    "with_adler32",
    "with_algorithm",
    "with_blake3",
    "with_crc32",
    "with_fnv128",
    "with_fnv128a",
    "with_fnv32",
    "with_fnv32a",
    "with_fnv64",
    "with_fnv64a",
    "with_md5",
    "with_mmh3",
    "with_phash",
    "with_sha1",
    "with_sha256",
    "with_sha512",
    "with_user_defined_algorithm",
    "with_whirlpool",
    "with_xxhash",
]
