"""
Hash facade.

Hash holds one active hasher and exposes generate/compare over text or
byte streams, whatever algorithm computes the digest.

Example:
    from polyhash import Hash, with_sha256

    h = Hash(with_sha256())
    digest = h.generate("example")
    h.compare(digest, "example")  # raises HashMismatchError on mismatch

    with open("example.txt", "rb") as f:
        digest = h.generate(f)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .core.exceptions import HashMismatchError, UnsupportedInputTypeError
from .core.interfaces.hasher import Hasher
from .inputs import HashInput, TextInput, classify_input
from .options import Option, default_state, with_algorithm
from .services.logging import get_logger

if TYPE_CHECKING:
    from .core.interfaces.logger import ILogger
    from .core.settings import PolyhashSettings


class Hash:
    """
    Digest generation and comparison through a single active hasher.

    The default hasher is MD5; options given at construction replace it,
    the last one winning. The configuration does not change afterwards.
    """

    def __init__(self, *options: Option, logger: ILogger | None = None) -> None:
        state = default_state()
        for option in options:
            state = option(state)
        self._state = state
        self._logger = logger or get_logger()
        self._logger.debug("Hash configured with algorithm %s", self.algorithm)

    @classmethod
    def from_settings(
        cls, settings: PolyhashSettings | None = None, logger: ILogger | None = None
    ) -> Hash:
        """
        Build a facade for the algorithm named in settings.

        Args:
            settings: Loaded settings (loaded from the environment if None)
            logger: Optional logger override
        """
        if settings is None:
            from .core.settings import load_settings

            settings = load_settings()
        return cls(with_algorithm(settings.hash.algorithm), logger=logger)

    @property
    def hasher(self) -> Hasher:
        """The active hasher."""
        return self._state.hasher

    @property
    def algorithm(self) -> str:
        """Name of the active algorithm."""
        return getattr(self._state.hasher, "name", type(self._state.hasher).__name__)

    def generate(self, value: Any) -> bytes:
        """
        Generate a digest from text or a readable stream.

        Raises:
            UnsupportedInputTypeError: If value is neither str nor a stream
        """
        source = self._classify(value)
        if isinstance(source, TextInput):
            digest = self.hasher.generate_from_text(source.text)
        else:
            digest = self.hasher.generate_from_stream(source.stream)

        self._logger.debug(
            "Generated %s digest (%d bytes) from %s", self.algorithm, len(digest), type(source).__name__
        )
        return digest

    def compare(self, digest: bytes, value: Any) -> None:
        """
        Compare a digest against text or a readable stream.

        Returns None when they match.

        Raises:
            HashMismatchError: If the regenerated digest differs
            UnsupportedInputTypeError: If value is neither str nor a stream
        """
        source = self._classify(value)
        try:
            if isinstance(source, TextInput):
                self.hasher.compare_text(digest, source.text)
            else:
                self.hasher.compare_stream(digest, source.stream)
        except HashMismatchError:
            self._logger.info("%s digest mismatch for %s", self.algorithm, type(source).__name__)
            raise

    def _classify(self, value: Any) -> HashInput:
        try:
            return classify_input(value)
        except UnsupportedInputTypeError as e:
            self._logger.debug("Rejected input of type %s", e.input_type)
            raise

    def __repr__(self) -> str:
        return f"Hash(algorithm={self.algorithm!r})"
