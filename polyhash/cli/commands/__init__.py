"""
Click command implementations for polyhash CLI.

Each module corresponds to a polyhash command. Commands are registered
with the main CLI group via register_commands() in polyhash.cli.
"""

from .algorithms import algorithms
from .config import config
from .digest import digest
from .generate import compare, generate

COMMANDS = [
    algorithms,
    compare,
    config,
    digest,
    generate,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "compare",
    "config",
    "digest",
    "generate",
]
