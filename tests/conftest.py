"""
Shared pytest fixtures for polyhash tests.

This module provides:
- sample files and generated images
- a recording logger
- isolation from POLYHASH_* environment variables and installed loggers
"""

import io
import random
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from polyhash.core.interfaces.logger import ILogger
from polyhash.services.logging import reset_logging


class RecordingLogger(ILogger):
    """Logger that keeps (level, formatted message) pairs."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _record(self, level: str, message: str, *args: Any) -> None:
        self.records.append((level, message % args if args else message))

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("debug", message, *args)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("info", message, *args)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("warning", message, *args)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("error", message, *args)

    def set_level(self, level: str) -> None:
        pass

    def messages(self, level: str) -> list[str]:
        return [msg for lvl, msg in self.records if lvl == level]


def make_image(seed: int, size: int = 64, fmt: str = "PNG") -> bytes:
    """
    Render a grayscale noise image and return its encoded bytes.

    Args:
        seed: Seed for the pixel values
        size: Width and height in pixels
        fmt: Pillow format name
    """
    rng = random.Random(seed)
    image = Image.new("L", (size, size))
    image.putdata([rng.randrange(256) for _ in range(size * size)])

    buf = io.BytesIO()
    image.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Drop POLYHASH_* variables and any installed logger around each test."""
    for name in (
        "POLYHASH_HASH__ALGORITHM",
        "POLYHASH_HASH__REPORT",
        "POLYHASH_LOGGING__LEVEL",
        "POLYHASH_LOGGING__CONSOLE",
        "POLYHASH_LOGGING__FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A file whose contents are the UTF-8 bytes of 'test'."""
    path = tmp_path / "test.txt"
    path.write_bytes(b"test")
    return path


@pytest.fixture
def image_bytes() -> bytes:
    return make_image(seed=1)


@pytest.fixture
def other_image_bytes() -> bytes:
    return make_image(seed=2)
