"""
Diagnostics logging for polyhash.

PolyhashLogger sits on a stdlib logger named "polyhash" and attaches up to
two handlers, chosen by the [logging] settings section:

- console: stderr
- file: ~/.polyhash/polyhash.log, rotated at 10MB with 3 backups

The active logger lives in the service container. Until configure_logging
registers one, get_logger() hands out a NullLogger and the package is
silent.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from ..core.container import get_container, resolve_or_default
from ..core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..core.models.config import LoggingConfig
    from ..core.settings import PolyhashSettings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class PolyhashLogger(ILogger):
    """stdlib-backed logger with optional stderr and rotating file output."""

    DEFAULT_LOG_FILE = Path.home() / ".polyhash" / "polyhash.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024
    BACKUP_COUNT = 3

    LEVELS: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "polyhash",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            name: stdlib logger name
            level: Threshold applied to every handler
            console_enabled: Attach a stderr handler
            file_enabled: Attach a rotating file handler
            log_file: File handler target (defaults to DEFAULT_LOG_FILE)
        """
        self._logger = logging.getLogger(name)
        # Handlers do the filtering
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        self.log_file = log_file or self.DEFAULT_LOG_FILE
        self._handlers: list[logging.Handler] = []

        if console_enabled:
            self._attach(logging.StreamHandler(sys.stderr), level)
        if file_enabled:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._attach(
                RotatingFileHandler(
                    self.log_file,
                    maxBytes=self.MAX_FILE_SIZE,
                    backupCount=self.BACKUP_COUNT,
                ),
                level,
            )

    @classmethod
    def from_config(cls, config: LoggingConfig, log_file: Path | None = None) -> PolyhashLogger:
        """Build a logger from the [logging] settings section."""
        return cls(
            level=config.level,
            console_enabled=config.console,
            file_enabled=config.file,
            log_file=log_file,
        )

    def _attach(self, handler: logging.Handler, level: str) -> None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handler.setLevel(self._to_level(level))
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    @classmethod
    def _to_level(cls, level: str) -> int:
        return cls.LEVELS.get(level.lower(), logging.WARNING)

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._handlers)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Change the threshold of every attached handler."""
        for handler in self._handlers:
            handler.setLevel(self._to_level(level))


class NullLogger(ILogger):
    """Logger that discards everything."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass


def get_logger() -> ILogger:
    """Return the registered logger, or a NullLogger if none is registered."""
    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def configure_logging(settings: PolyhashSettings) -> ILogger:
    """
    Register a PolyhashLogger built from settings.logging.

    Returns:
        The registered logger
    """
    logger = PolyhashLogger.from_config(settings.logging)
    get_container().register_singleton(ILogger, implementation=logger)  # type: ignore[type-abstract]
    return logger


def reset_logging() -> None:
    """Unregister the logger; get_logger() falls back to NullLogger."""
    get_container().unregister(ILogger)
