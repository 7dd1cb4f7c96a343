"""
Click context extension for polyhash CLI.

Provides PolyhashContext dataclass that holds the loaded settings and the
configured logger, passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.interfaces.logger import ILogger
from ..core.settings import PolyhashSettings, load_settings
from ..services.logging import configure_logging


@dataclass
class PolyhashContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        settings: Loaded settings (file + environment + defaults)
        logger: Logger configured from the logging settings section
    """

    cwd: Path
    settings: PolyhashSettings
    logger: ILogger

    @classmethod
    def create(cls, cwd: Path | None = None) -> PolyhashContext:
        """Create a PolyhashContext for the current environment.

        Args:
            cwd: Working directory override (defaults to Path.cwd())

        Raises:
            ConfigValidationError: If the configuration is invalid
        """
        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(start_dir=str(cwd))
        logger = configure_logging(settings)

        return cls(cwd=cwd, settings=settings, logger=logger)
