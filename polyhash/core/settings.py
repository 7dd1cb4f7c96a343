"""
Pydantic Settings for polyhash configuration.

Settings are layered from init values, POLYHASH_* environment variables,
one TOML file and the model defaults. The TOML file is either passed
explicitly or discovered by walking up from a start directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import HashConfig, LoggingConfig

CONFIG_DIR = ".polyhash"
CONFIG_NAME = "config.toml"

_MISSING = object()


def _get_logger():
    from ..services.logging import get_logger

    return get_logger()


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _tool_table(data: dict[str, Any]) -> Any:
    return data.get("tool", {}).get("polyhash")


def _declares_polyhash(pyproject: Path) -> bool:
    """Whether a pyproject.toml carries a [tool.polyhash] table."""
    try:
        return isinstance(_tool_table(_read_toml(pyproject)), dict)
    except (tomllib.TOMLDecodeError, OSError) as e:
        _get_logger().debug("Skipping %s during config search: %s", pyproject, e)
        return False


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find the nearest polyhash config file at or above start_dir (or cwd).

    In each directory .polyhash/config.toml wins over a pyproject.toml with
    a [tool.polyhash] table.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_DIR / CONFIG_NAME
        if candidate.is_file():
            return candidate
        pyproject = directory / "pyproject.toml"
        if pyproject.is_file() and _declares_polyhash(pyproject):
            return pyproject

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """
    Settings source backed by a single polyhash TOML file.

    The file is read once, when the source is built. The source keeps the
    outcome (path, parsed tables or read error) so load_settings can
    report problems against the file that was actually used.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self.explicit = config_path is not None
        self.path = Path(config_path) if config_path is not None else find_config_file(start_dir)
        self.error: str | None = None
        self.data = self._read()

    def _read(self) -> dict[str, Any]:
        if self.path is None:
            return {}
        try:
            data = _read_toml(self.path)
        except tomllib.TOMLDecodeError as e:
            self.error = f"Failed to parse config file: {e}"
            return {}
        except OSError as e:
            self.error = f"Failed to read config file: {e}"
            return {}

        if self.path.name == "pyproject.toml":
            table = _tool_table(data)
            return table if isinstance(table, dict) else {}
        return data

    @property
    def config_file(self) -> str | None:
        """Path of the file the settings were read from, if any."""
        if self.path is None or self.error:
            return None
        return str(self.path)

    def value_at(self, loc: tuple[Any, ...]) -> Any:
        """The file's value at a dotted settings location, or _MISSING."""
        node: Any = self.data
        for part in loc:
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self.data


class PolyhashSettings(BaseSettings):
    """Polyhash configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (POLYHASH_<section>__<field>)
    3. TOML config file (.polyhash/config.toml or pyproject.toml [tool.polyhash])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "POLYHASH_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    hash: HashConfig = HashConfig()
    logging: LoggingConfig = LoggingConfig()

    # Set by load_settings from the TOML source
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Add TOML loading below environment variables.

        The TOML location comes in, and the built source goes back out,
        through module-level variables owned by load_settings().
        """
        global _current_source

        _current_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            _current_source,
        )

    @property
    def config_file(self) -> str | None:
        return self._config_file

    @property
    def config_error(self) -> str | None:
        return self._config_error

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain nested dict."""
        result: dict[str, Any] = {
            "hash": self.hash.model_dump(),
            "logging": self.logging.model_dump(),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


# Hand-off between load_settings and settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None
_current_source: TomlConfigSource | None = None


def _invalid_configuration(e: ValidationError, source: TomlConfigSource | None) -> ConfigValidationError:
    """
    Turn the first pydantic error into a ConfigValidationError.

    When the rejected value is the one the TOML file holds, the error
    carries that file's path as well as the dotted key.
    """
    first = e.errors()[0]
    loc = tuple(first.get("loc", ()))
    key = ".".join(str(part) for part in loc)

    context: dict[str, Any] = {}
    if source is not None and source.config_file:
        file_value = source.value_at(loc)
        if file_value is not _MISSING and file_value == first.get("input"):
            context["file_path"] = source.config_file

    return ConfigValidationError(
        f"Invalid configuration: {first.get('msg', e)}",
        key=key or None,
        context=context,
        cause=e,
    )


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> PolyhashSettings:
    """Load polyhash settings from config file and environment.

    A discovered file that cannot be read or parsed is logged once and
    recorded in settings.config_error; defaults apply in its place.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        PolyhashSettings instance with all sources merged

    Raises:
        ConfigValidationError: If a configured value is invalid
        ConfigFileError: If an explicit config_path cannot be read or parsed
    """
    global _current_config_path, _current_start_dir, _current_source

    _current_config_path = config_path
    _current_start_dir = start_dir
    _current_source = None

    try:
        try:
            settings = PolyhashSettings()
        except ValidationError as e:
            raise _invalid_configuration(e, _current_source) from e
        source = _current_source
    finally:
        _current_config_path = None
        _current_start_dir = None
        _current_source = None

    if source is None:
        return settings

    if source.error:
        if source.explicit:
            raise ConfigFileError(source.error, file_path=str(source.path))
        _get_logger().warning("Ignoring %s: %s", source.path, source.error)
        settings._config_error = source.error

    settings._config_file = source.config_file
    return settings
