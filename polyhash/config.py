"""Configuration loading for polyhash."""

from pathlib import Path

from .core.models.config import DEFAULT_ALGORITHM, DEFAULT_REPORT_ALGORITHMS
from .core.settings import load_settings

# Config keys shown by `polyhash config list`
CONFIGURABLE_KEYS = {
    "hash.algorithm": {
        "type": str,
        "default": DEFAULT_ALGORITHM,
        "description": "Algorithm used by Hash.from_settings and `polyhash generate/compare`",
    },
    "hash.report": {
        "type": list,
        "default": DEFAULT_REPORT_ALGORITHMS,
        "description": "Algorithms reported by `polyhash digest` (comma-separated)",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to ~/.polyhash/polyhash.log",
    },
}


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'hash.algorithm'."""
    parts = key.split(".")
    for part in parts:
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied
    """
    settings = load_settings(config_path=config_path, start_dir=start_dir)
    return settings.to_dict()


def config_get(key: str, start_dir: str | None = None):
    """Get a config value."""
    config = load_config(start_dir=start_dir)
    return _get_nested(config, key)


def config_list():
    """List all configurable keys with descriptions."""
    return CONFIGURABLE_KEYS
