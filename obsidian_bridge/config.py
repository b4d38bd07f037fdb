"""Configuration loading for the Obsidian REST bridge."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from obsidian_bridge.constants import (
    API_KEY_ENV,
    CONFIG_PATH,
    CONFIG_PATH_ENV,
    DEFAULT_OBSIDIAN_URL,
    LOG_LEVEL,
    LOG_LEVEL_ENV,
    URL_ENV,
)
from obsidian_bridge.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BridgeSettings:
    """Immutable settings shared by the vault client and the dispatcher."""

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_OBSIDIAN_URL
    log_level: str = LOG_LEVEL

    def as_payload(self) -> dict[str, Any]:
        """Return a serializable payload with the API key masked."""
        return {
            "base_url": self.base_url,
            "api_key": "***" if self.api_key else "",
            "log_level": self.log_level,
        }


def _read_config_file(config_path: Path) -> dict[str, Any]:
    """Read the optional YAML settings file.

    Args:
        config_path: Location of the YAML file.

    Returns:
        The parsed mapping, or an empty dict when the file does not exist.

    Raises:
        ConfigurationError: If the file cannot be parsed or is not a mapping.
    """
    if not config_path.exists():
        return {}

    try:
        raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Could not parse configuration file {config_path}: {exc}") from exc

    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")

    logger.debug("Loaded configuration file %s", config_path)
    return raw_config


def _pick(environ: Mapping[str, str], env_name: str, file_config: dict[str, Any], key: str) -> Optional[str]:
    value = environ.get(env_name)
    if value is not None and value.strip():
        return value.strip()

    file_value = file_config.get(key)
    if file_value is None:
        return None
    if not isinstance(file_value, str):
        raise ConfigurationError(f"Configuration key '{key}' must be a string")
    return file_value.strip() or None


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
) -> BridgeSettings:
    """Build the bridge settings from the environment and an optional YAML file.

    Environment variables take precedence over values from the file.

    Args:
        environ: Mapping used in place of ``os.environ``.
        config_path: YAML file to read. Defaults to ``$OBSIDIAN_CONFIG`` or
            ``obsidian.yaml`` next to the package.

    Returns:
        A populated :class:`BridgeSettings`.

    Raises:
        ConfigurationError: If no API key is configured, the log level is not a
            logging level name or the file is malformed.
    """
    if environ is None:
        environ = os.environ

    if config_path is None:
        override = environ.get(CONFIG_PATH_ENV)
        config_path = Path(override).expanduser() if override else CONFIG_PATH

    file_config = _read_config_file(config_path)

    api_key = _pick(environ, API_KEY_ENV, file_config, "api_key")
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV} environment variable must be set")

    base_url = _pick(environ, URL_ENV, file_config, "url") or DEFAULT_OBSIDIAN_URL
    log_level = (_pick(environ, LOG_LEVEL_ENV, file_config, "log_level") or LOG_LEVEL).upper()
    if not isinstance(getattr(logging, log_level, None), int):
        raise ConfigurationError(f"Unknown log level '{log_level}'")

    return BridgeSettings(api_key=api_key, base_url=base_url.rstrip("/"), log_level=log_level)
