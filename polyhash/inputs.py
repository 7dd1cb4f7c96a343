"""
Input classification for the facade.

A value handed to Hash.generate/compare is resolved exactly once into
either a TextInput or a StreamInput. Anything else is rejected with
UnsupportedInputTypeError.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from dataclasses import dataclass
from typing import IO, Any

from .core.exceptions import StreamNotReadyError, UnsupportedInputTypeError

# Read size used when copying a stream into an engine
CHUNK_SIZE = 32 * 1024


@dataclass(frozen=True)
class TextInput:
    """In-memory text, hashed as UTF-8."""

    text: str


@dataclass(frozen=True)
class StreamInput:
    """A readable stream, consumed once until exhaustion."""

    stream: IO[Any]


HashInput = TextInput | StreamInput


def is_readable(value: Any) -> bool:
    """Return True if value looks like a readable stream."""
    return callable(getattr(value, "read", None))


def classify_input(value: Any) -> HashInput:
    """
    Resolve a raw value into a TextInput or StreamInput.

    Args:
        value: A str or an object with a read() method

    Returns:
        The classified input

    Raises:
        UnsupportedInputTypeError: For any other value (bytes included)
    """
    if isinstance(value, str):
        return TextInput(value)
    if is_readable(value):
        return StreamInput(value)
    raise UnsupportedInputTypeError(input_type=type(value).__name__)


def is_text_stream(stream: IO[Any]) -> bool:
    """Return True for streams that yield str rather than bytes."""
    return isinstance(stream, io.TextIOBase)


def encode_text(text: str) -> bytes:
    return text.encode("utf-8")


def iter_chunks(stream: IO[Any], chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield byte chunks from a stream until it is exhausted.

    str chunks from text-mode streams are UTF-8 encoded. Read errors
    propagate to the caller. The stream must be blocking: a read() that
    returns None raises StreamNotReadyError.
    """
    while True:
        chunk = stream.read(chunk_size)
        if chunk is None:
            raise StreamNotReadyError(context={"stream_type": type(stream).__name__})
        if not chunk:
            return
        if isinstance(chunk, str):
            yield encode_text(chunk)
        else:
            yield bytes(chunk)
