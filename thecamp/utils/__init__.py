"""Utility functions for thecamp."""

from thecamp.utils.config import (
    ClientSettings,
    ConfigError,
    load_client_settings,
    load_config_from_module,
)
from thecamp.utils.env import load_env_file_if_present, parse_env_lines

__all__ = [
    "load_env_file_if_present",
    "parse_env_lines",
    "load_config_from_module",
    "load_client_settings",
    "ClientSettings",
    "ConfigError",
]
