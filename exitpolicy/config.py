"""Exit-status settings loaded from overrides, environment, and an optional TOML file."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

from exitpolicy.constants import MODE_ALIASES, CompatibilityMode
from exitpolicy.errors import ConfigurationError

log = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".exitpolicy.toml"
CONFIG_FILE_ENV = "EXITPOLICY_CONFIG_FILE"
CONFIG_SECTION = "exit_status"

_ENV_KEYS = {
    "mode": "EXITPOLICY_EXIT_STATUS",
    "deprecations_as_errors": "EXITPOLICY_DEPRECATIONS_AS_ERRORS",
}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Configuration consulted each time an exit code is resolved."""

    mode: str | None = None
    deprecations_as_errors: bool = False

    @property
    def compatibility_mode(self) -> CompatibilityMode:
        """Return the compatibility mode named by ``mode``."""
        return parse_mode(self.mode)


def parse_mode(value: str | None) -> CompatibilityMode:
    """
    Map an ``exit_status`` setting to a compatibility mode.

    Unset, empty and ``legacy`` mean legacy behavior; ``enabled``/``strict`` mean
    strict validation; ``disabled`` skips validation. Any other value is logged
    and treated as legacy.
    """
    if value is None:
        return CompatibilityMode.LEGACY
    try:
        return MODE_ALIASES[_mode_key(value)]
    except KeyError:
        log.warning("Unsupported exit_status mode %r, using legacy behavior", value)
        return CompatibilityMode.LEGACY


def is_known_mode(value: str) -> bool:
    """Return whether ``value`` names a compatibility mode."""
    return _mode_key(value) in MODE_ALIASES


def _mode_key(value: object) -> str:
    return str(value).strip().lstrip(":").lower()


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")


def _read_config_file(config_file: str | Path | None, environ: Mapping[str, str]) -> dict[str, Any]:
    """Return the ``[exit_status]`` table of the config file, or an empty dict."""
    path = Path(config_file or environ.get(CONFIG_FILE_ENV) or DEFAULT_CONFIG_FILE)
    if not path.is_file():
        return {}

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid config file {path}: {exc}") from exc

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"[{CONFIG_SECTION}] section must be a table in {path}")
    return section


def load_settings(
    environ: Mapping[str, str] | None = None,
    config_file: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """
    Load exit-status settings.

    Precedence (highest first): ``overrides``, environment variables, the TOML
    config file, built-in defaults. When ``environ`` is omitted the process
    environment is used, after loading a ``.env`` file if one exists.

    Parameters:
        environ (Mapping[str, str] | None): Environment to read instead of ``os.environ``.
        config_file (str | Path | None): Explicit config file path.
        overrides (Mapping[str, Any] | None): Values that win over everything else.

    Returns:
        Settings: The merged settings.

    Raises:
        ConfigurationError: On unknown override keys or malformed values.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    known = {field.name for field in fields(Settings)}
    values: dict[str, Any] = {}

    for key, value in _read_config_file(config_file, environ).items():
        if key in known:
            values[key] = value

    for key, env_name in _ENV_KEYS.items():
        if env_name in environ:
            values[key] = environ[env_name]

    for key, value in (overrides or {}).items():
        if key not in known:
            raise ConfigurationError(f"Unsupported setting override key: {key}")
        if value is not None:
            values[key] = value

    settings = Settings()
    if "mode" in values:
        mode = values["mode"]
        settings = replace(settings, mode=None if mode is None else str(mode))
    if "deprecations_as_errors" in values:
        settings = replace(
            settings,
            deprecations_as_errors=_parse_bool("deprecations_as_errors", values["deprecations_as_errors"]),
        )
    return settings
