"""
Perceptual image hasher.

Decodes a byte stream with Pillow and fingerprints it with the DCT-based
pHash from ImageHash. The 64-bit result is returned as 8 little-endian
bytes. Text input is rejected outright.
"""

from __future__ import annotations

from typing import IO, Any

import imagehash
from PIL import Image

from ..core.exceptions import PhashNotSupportedForTextError
from ..inputs import is_text_stream
from .base import BaseHasher


class PerceptualHasher(BaseHasher):
    """
    pHash over decoded image pixels.

    ImageHash scales and transforms the image differently from the Go
    azr/phash DCT, so these digests will not match ones produced by that
    tool for the same image.

    Decoder errors (PIL.UnidentifiedImageError, OSError) propagate
    unchanged. The stream is not closed.
    """

    name = "phash"
    digest_size = 8
    hash_size = 8

    def generate_from_text(self, text: str) -> bytes:
        raise PhashNotSupportedForTextError()

    def compare_text(self, digest: bytes, text: str) -> None:
        raise PhashNotSupportedForTextError()

    def generate_from_stream(self, stream: IO[Any]) -> bytes:
        if is_text_stream(stream):
            raise PhashNotSupportedForTextError(context={"stream_type": type(stream).__name__})

        with Image.open(stream) as image:
            image.load()
            fingerprint = imagehash.phash(image, hash_size=self.hash_size)

        return int(str(fingerprint), 16).to_bytes(self.digest_size, "little")
