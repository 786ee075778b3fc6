"""Configuration loading utilities using importlib.

Client settings live in a plain Python module exposing a ``CONFIGURATION``
dict (see ``configs/thecamp.py``). This module imports it dynamically,
merges it over the built-in defaults and validates the result.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, fields
from typing import Any

from thecamp.iterator import DEFAULT_PAGE_SIZE
from thecamp.transport import DEFAULT_TIMEOUT, HOST, USER_AGENT

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_MODULE = "configs.thecamp"


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


@dataclass(frozen=True)
class ClientSettings:
    host: str = HOST
    user_agent: str = USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ClientSettings:
        """Validate a raw configuration dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")
        values = {key: value for key, value in config.items() if key in known}

        try:
            if "timeout" in values:
                values["timeout"] = float(values["timeout"])
            if "page_size" in values:
                values["page_size"] = int(values["page_size"])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid numeric configuration value: {e}") from e

        settings = cls(**values)
        if not settings.host.startswith(("http://", "https://")):
            raise ConfigError(f"Host must be an http(s) URL, got '{settings.host}'")
        if settings.timeout <= 0:
            raise ConfigError(f"Timeout must be positive, got {settings.timeout}")
        if settings.page_size < 1:
            raise ConfigError(f"Page size must be positive, got {settings.page_size}")
        if not settings.user_agent:
            raise ConfigError("User agent must not be empty")
        return settings


def load_config_from_module(
    module_path: str,
    config_name: str = "CONFIGURATION",
    default: Any | None = None,
) -> Any:
    """Load a configuration object from a Python module using importlib.

    Args:
        module_path: Dotted module path (e.g., "configs.thecamp")
        config_name: Name of the configuration object to retrieve (default: "CONFIGURATION")
        default: Default value to return if loading fails

    Returns:
        The configuration object from the module, or default if loading fails

    Examples:
        >>> config = load_config_from_module("configs.thecamp")
        >>> custom = load_config_from_module("myapp.camp_config", "SETTINGS")
    """
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        logger.warning(f"Could not import module '{module_path}': {e}")
        return default

    if not hasattr(module, config_name):
        logger.warning(f"Module '{module_path}' does not have attribute '{config_name}'")
        return default

    config = getattr(module, config_name)
    logger.debug(f"Loaded configuration from {module_path}.{config_name}")
    return config


def load_client_settings(
    module_path: str = DEFAULT_CONFIG_MODULE,
    config_name: str = "CONFIGURATION",
) -> ClientSettings:
    """Load and validate client settings, falling back to defaults.

    Raises:
        ConfigError: if the loaded configuration is not a dict or holds invalid values
    """
    raw = load_config_from_module(module_path, config_name, default={})
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Configuration '{module_path}.{config_name}' must be a dict, got {type(raw).__name__}"
        )
    settings = ClientSettings.from_dict(raw)
    logger.debug(f"Client settings: host={settings.host} timeout={settings.timeout}")
    return settings
