"""
Custom exception hierarchy for polyhash.

Every failure the package raises on its own derives from PolyhashException.
Lower-level failures (stream read errors, image decode errors) are not
wrapped and reach the caller unchanged.
"""

from __future__ import annotations


class PolyhashException(Exception):
    """
    Base exception for all polyhash errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (algorithm, input type, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Hashing Errors
# =============================================================================


class PolyhashHashingError(PolyhashException):
    """
    Base class for errors raised by generate/compare.

    None of these are retryable: the caller has to change the input or
    the configured algorithm.
    """

    recoverable: bool = False


class UnsupportedInputTypeError(PolyhashHashingError, TypeError):
    """
    Input is neither text nor a readable byte stream.

    Inherits from TypeError so callers that already guard against bad
    argument types keep working.
    """

    def __init__(
        self,
        message: str = "unsupported input type",
        *,
        input_type: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if input_type:
            ctx["input_type"] = input_type
        super().__init__(message, context=ctx, cause=cause)
        self.input_type = input_type


class HashMismatchError(PolyhashHashingError):
    """
    A computed digest differs from the digest supplied for comparison.

    This is the expected "verification failed" outcome, not a fault.
    """

    def __init__(
        self,
        message: str = "hash mismatch",
        *,
        expected: bytes | None = None,
        actual: bytes | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if expected is not None:
            ctx["expected"] = expected.hex()
        if actual is not None:
            ctx["actual"] = actual.hex()
        super().__init__(message, context=ctx, cause=cause)
        self.expected = expected
        self.actual = actual


class PhashNotSupportedForTextError(PolyhashHashingError, ValueError):
    """Perceptual hashing is only defined over decoded images, never text."""

    def __init__(
        self,
        message: str = "phash does not support text input",
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class StreamNotReadyError(PolyhashHashingError):
    """
    A non-blocking stream had no data ready.

    Streams are read until EOF, so a read() returning None would otherwise
    end the digest early.
    """

    def __init__(
        self,
        message: str = "stream returned no data; use a blocking stream",
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


# =============================================================================
# Configuration Errors
# =============================================================================


class PolyhashConfigError(PolyhashException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(PolyhashConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, file not found, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(PolyhashConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError for code that catches ValueError for
    validation errors.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


class UnknownAlgorithmError(ConfigValidationError):
    """Requested algorithm name is not registered."""

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, key="hash.algorithm", value=algorithm, context=context, cause=cause)
        self.algorithm = algorithm


class InvalidHasherError(ConfigValidationError):
    """
    A user-defined hasher does not provide the four hasher operations.

    Raised by with_user_defined_algorithm before the facade ever sees it.
    """

    def __init__(
        self,
        message: str,
        *,
        missing: list[str] | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if missing:
            ctx["missing"] = missing
        super().__init__(message, context=ctx, cause=cause)
        self.missing = missing or []
