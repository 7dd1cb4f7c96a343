"""
Unit tests for the Hash facade.

Tests cover:
- Known digests of "test" for every built-in algorithm
- Text and byte stream inputs producing the same digest
- compare() success and mismatch
- Rejection of unsupported input types
- User-defined hashers
"""

import io
from typing import IO, Any

import mmh3
import pytest

from polyhash import (
    Hash,
    HashMismatchError,
    Hasher,
    InvalidHasherError,
    StreamNotReadyError,
    UnsupportedInputTypeError,
    with_adler32,
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

KNOWN_DIGESTS = {
    "md5": (with_md5, "098f6bcd4621d373cade4e832627b4f6"),
    "sha1": (with_sha1, "a94a8fe5ccb19ba61c4c0873d391e987982fbbd3"),
    "sha256": (
        with_sha256,
        "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08",
    ),
    "sha512": (
        with_sha512,
        "ee26b0dd4af7e749aa1a8ee3c10ae9923f618980772e473f8819a5d4940e0db2"
        "7ac185f8a0e1d5f84f88bc887fd67b143732c304cc5fa9ad8e6f57f50028a8ff",
    ),
    "whirlpool": (
        with_whirlpool,
        "b913d5bbb8e461c2c5961cbe0edcdadfd29f068225ceb37da6defcf89849368f"
        "8c6c2eb6a4c4ac75775d032a0ecfdfe8550573062b653fe92fc7b8fb3b7be8d6",
    ),
    "crc32": (with_crc32, "d87f7e0c"),
    "adler32": (with_adler32, "045d01c1"),
    "fnv32": (with_fnv32, "bc2c0be9"),
    "fnv32a": (with_fnv32a, "afd071e5"),
    "fnv64": (with_fnv64, "8c093f7e9fccbf69"),
    "fnv64a": (with_fnv64a, "f9e6e6ef197c2b25"),
    "fnv128": (with_fnv128, "66ab2a8b6f757277b806e89c56faf339"),
    "fnv128a": (with_fnv128a, "69d061a9c5757277b806e99413dd99a5"),
    "xxhash": (with_xxhash, "4fdcca5ddb678139"),
    "blake3": (
        with_blake3,
        "4878ca0425c739fa427f7eda20fe845f6b2e46ba5fe2a14df5b1e32f50603215"
        "c82f77a5bd07f7048a95a699e056d0e32bd2bdadc37ee096719c3d9ec12f29a6",
    ),
}

# Every algorithm that accepts text
TEXT_OPTIONS = [option for option, _ in KNOWN_DIGESTS.values()] + [with_mmh3]

ALL_OPTIONS = [*TEXT_OPTIONS, with_phash]


def _ids(options):
    return [option.__name__.removeprefix("with_") for option in options]


class TestKnownDigests:
    """Digests of the text "test"."""

    @pytest.mark.parametrize("name", sorted(KNOWN_DIGESTS))
    def test_text_digest(self, name):
        """generate("test") matches the published digest."""
        option, expected = KNOWN_DIGESTS[name]
        assert Hash(option()).generate("test").hex() == expected

    @pytest.mark.parametrize("name", sorted(KNOWN_DIGESTS))
    def test_stream_digest(self, name):
        """A byte stream of b"test" produces the same digest as the text."""
        option, expected = KNOWN_DIGESTS[name]
        assert Hash(option()).generate(io.BytesIO(b"test")).hex() == expected

    def test_mmh3_matches_library(self):
        """mmh3 digest is the x64 128-bit MurmurHash3 of the bytes."""
        assert Hash(with_mmh3()).generate("test") == mmh3.hash_bytes(b"test")

    def test_default_is_md5(self):
        """A Hash built without options uses MD5."""
        h = Hash()
        assert h.algorithm == "md5"
        assert h.generate("test").hex() == KNOWN_DIGESTS["md5"][1]

    def test_file_stream(self, text_file):
        """An open binary file is hashed like its contents."""
        with open(text_file, "rb") as f:
            digest = Hash(with_sha256()).generate(f)
        assert digest.hex() == KNOWN_DIGESTS["sha256"][1]


class TestDigestWidths:
    """Digest lengths per algorithm."""

    @pytest.mark.parametrize(
        "option,size",
        [
            (with_md5, 16),
            (with_sha1, 20),
            (with_sha256, 32),
            (with_sha512, 64),
            (with_whirlpool, 64),
            (with_blake3, 64),
            (with_mmh3, 16),
            (with_crc32, 4),
            (with_adler32, 4),
            (with_fnv32, 4),
            (with_fnv32a, 4),
            (with_fnv64, 8),
            (with_fnv64a, 8),
            (with_fnv128, 16),
            (with_fnv128a, 16),
            (with_xxhash, 8),
        ],
        ids=lambda v: v.__name__.removeprefix("with_") if callable(v) else str(v),
    )
    def test_digest_length(self, option, size):
        """Digest width is fixed per algorithm, including for empty input."""
        h = Hash(option())
        assert len(h.generate("test")) == size
        assert len(h.generate("")) == size


class TestTextStreamEquivalence:
    """Text and stream inputs carrying the same bytes."""

    @pytest.mark.parametrize("option", TEXT_OPTIONS, ids=_ids(TEXT_OPTIONS))
    def test_text_equals_stream(self, option):
        """generate(s) equals generate(stream of s.encode('utf-8'))."""
        h = Hash(option())
        text = "héllo wörld ✓"
        assert h.generate(text) == h.generate(io.BytesIO(text.encode("utf-8")))

    @pytest.mark.parametrize("option", TEXT_OPTIONS, ids=_ids(TEXT_OPTIONS))
    def test_empty_text_equals_empty_stream(self, option):
        """The empty string and an empty stream hash identically."""
        h = Hash(option())
        assert h.generate("") == h.generate(io.BytesIO(b""))

    @pytest.mark.parametrize("option", TEXT_OPTIONS, ids=_ids(TEXT_OPTIONS))
    def test_large_stream_matches_text(self, option):
        """Streams longer than one read chunk are fully consumed."""
        h = Hash(option())
        text = "abcdefghij" * 10_000
        assert h.generate(io.BytesIO(text.encode("utf-8"))) == h.generate(text)

    def test_text_mode_stream(self):
        """A text-mode stream is hashed as its UTF-8 encoding."""
        h = Hash(with_sha1())
        assert h.generate(io.StringIO("test")) == h.generate("test")


class TestCompare:
    """compare() behaviour."""

    @pytest.mark.parametrize("option", TEXT_OPTIONS, ids=_ids(TEXT_OPTIONS))
    def test_round_trip(self, option):
        """compare(generate(x), x) returns None for text and streams."""
        h = Hash(option())
        digest = h.generate("round trip")
        assert h.compare(digest, "round trip") is None
        assert h.compare(digest, io.BytesIO(b"round trip")) is None

    @pytest.mark.parametrize("option", TEXT_OPTIONS, ids=_ids(TEXT_OPTIONS))
    def test_mismatch(self, option):
        """A digest of different content raises HashMismatchError."""
        h = Hash(option())
        digest = h.generate("expected")
        with pytest.raises(HashMismatchError):
            h.compare(digest, "something else")
        with pytest.raises(HashMismatchError):
            h.compare(digest, io.BytesIO(b"something else"))

    def test_truncated_digest_mismatches(self):
        """A digest of the wrong length never matches."""
        h = Hash(with_sha256())
        digest = h.generate("test")
        with pytest.raises(HashMismatchError):
            h.compare(digest[:-1], "test")

    def test_mismatch_carries_digests(self):
        """HashMismatchError records expected and actual digests."""
        h = Hash(with_crc32())
        with pytest.raises(HashMismatchError) as exc_info:
            h.compare(b"\x00\x00\x00\x00", "test")
        err = exc_info.value
        assert err.expected == b"\x00\x00\x00\x00"
        assert err.actual.hex() == "d87f7e0c"
        assert err.recoverable is False
        assert "hash mismatch" in str(err)

    def test_mismatch_is_logged(self, recording_logger):
        """A mismatch is logged at info level before propagating."""
        h = Hash(with_md5(), logger=recording_logger)
        with pytest.raises(HashMismatchError):
            h.compare(b"\x00" * 16, "test")
        assert any("mismatch" in msg for msg in recording_logger.messages("info"))


class TestUnsupportedInput:
    """Values that are neither text nor streams."""

    @pytest.mark.parametrize("value", [1, 3.5, None, b"test", bytearray(b"test"), ["test"]])
    @pytest.mark.parametrize("option", ALL_OPTIONS, ids=_ids(ALL_OPTIONS))
    def test_generate_rejects(self, option, value):
        """generate() raises UnsupportedInputTypeError."""
        with pytest.raises(UnsupportedInputTypeError):
            Hash(option()).generate(value)

    @pytest.mark.parametrize("option", ALL_OPTIONS, ids=_ids(ALL_OPTIONS))
    def test_compare_rejects(self, option):
        """compare() raises UnsupportedInputTypeError before hashing."""
        with pytest.raises(UnsupportedInputTypeError):
            Hash(option()).compare(b"\x00", 42)

    def test_error_names_type(self):
        """The error records the rejected type and is a TypeError."""
        with pytest.raises(UnsupportedInputTypeError) as exc_info:
            Hash().generate(b"raw bytes")
        assert exc_info.value.input_type == "bytes"
        assert isinstance(exc_info.value, TypeError)


class UserHash(Hasher):
    """Hasher returning a fixed digest and accepting every comparison."""

    def generate_from_text(self, text: str) -> bytes:
        return b"test"

    def generate_from_stream(self, stream: IO[Any]) -> bytes:
        return b"test"

    def compare_text(self, digest: bytes, text: str) -> None:
        return None

    def compare_stream(self, digest: bytes, stream: IO[Any]) -> None:
        return None


class DuckHash:
    """Duck-typed hasher that counts calls."""

    def __init__(self):
        self.calls = []

    def generate_from_text(self, text):
        self.calls.append(("generate_from_text", text))
        return text[::-1].encode()

    def generate_from_stream(self, stream):
        self.calls.append(("generate_from_stream", stream))
        return stream.read()[::-1]

    def compare_text(self, digest, text):
        self.calls.append(("compare_text", text))

    def compare_stream(self, digest, stream):
        self.calls.append(("compare_stream", stream))


class TestUserDefinedAlgorithm:
    """Caller-supplied hashers."""

    def test_user_hash_text_and_stream(self):
        """The facade returns whatever the user hasher produces."""
        h = Hash(with_user_defined_algorithm(UserHash()))
        assert h.generate("test") == b"test"
        assert h.generate(io.BytesIO(b"anything")) == b"test"
        assert h.compare(b"test", "test") is None
        assert h.compare(b"test", io.BytesIO(b"test")) is None

    def test_duck_typed_hasher(self):
        """Objects without the Hasher base class are accepted."""
        duck = DuckHash()
        h = Hash(with_user_defined_algorithm(duck))
        stream = io.BytesIO(b"abc")

        assert h.generate("abc") == b"cba"
        assert h.generate(stream) == b"cba"
        h.compare(b"cba", "abc")

        assert [call[0] for call in duck.calls] == [
            "generate_from_text",
            "generate_from_stream",
            "compare_text",
        ]
        assert h.algorithm == "DuckHash"

    def test_user_hasher_still_rejects_bytes(self):
        """Input classification happens before the user hasher is called."""
        duck = DuckHash()
        with pytest.raises(UnsupportedInputTypeError):
            Hash(with_user_defined_algorithm(duck)).generate(b"abc")
        assert duck.calls == []

    def test_incomplete_hasher_rejected(self):
        """An object missing operations raises InvalidHasherError."""

        class HalfHasher:
            def generate_from_text(self, text):
                return b""

        with pytest.raises(InvalidHasherError) as exc_info:
            with_user_defined_algorithm(HalfHasher())
        assert set(exc_info.value.missing) == {
            "generate_from_stream",
            "compare_text",
            "compare_stream",
        }


class TestStreams:
    """Stream handling details."""

    class TrickleReader:
        """Stream that returns at most three bytes per read."""

        def __init__(self, data: bytes):
            self._buf = io.BytesIO(data)

        def read(self, size=-1):
            return self._buf.read(min(size, 3) if size and size > 0 else 3)

    class FailingReader:
        def read(self, size=-1):
            raise OSError("disk went away")

    class NotReadyReader:
        """Non-blocking stream: one chunk, then no data available yet."""

        def __init__(self):
            self._reads = [b"te", None, b"st"]

        def read(self, size=-1):
            return self._reads.pop(0) if self._reads else b""

    @pytest.mark.parametrize("option", TEXT_OPTIONS, ids=_ids(TEXT_OPTIONS))
    def test_short_reads(self, option):
        """Streams that return short reads produce the same digest."""
        h = Hash(option())
        data = b"the quick brown fox jumps over the lazy dog"
        assert h.generate(self.TrickleReader(data)) == h.generate(io.BytesIO(data))

    def test_read_error_propagates(self):
        """A failing read surfaces unchanged."""
        with pytest.raises(OSError, match="disk went away"):
            Hash(with_sha256()).generate(self.FailingReader())

    def test_none_read_is_not_eof(self):
        """A read() returning None raises instead of truncating the digest."""
        with pytest.raises(StreamNotReadyError) as exc_info:
            Hash(with_whirlpool()).generate(self.NotReadyReader())
        assert exc_info.value.context["stream_type"] == "NotReadyReader"

    def test_stream_consumed_from_current_position(self):
        """Bytes before the current position are not hashed."""
        stream = io.BytesIO(b"xxtest")
        stream.seek(2)
        assert Hash().generate(stream).hex() == KNOWN_DIGESTS["md5"][1]

    def test_repeated_calls_are_independent(self):
        """No engine state carries over between generate calls."""
        h = Hash(with_fnv64a())
        first = h.generate("test")
        h.generate("unrelated input")
        assert h.generate("test") == first

    def test_repr(self):
        assert repr(Hash(with_xxhash())) == "Hash(algorithm='xxhash')"
