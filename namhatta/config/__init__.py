"""
Configuration management package.

This module provides:
- Config class for loading YAML configuration files
- Lookup of the active config file (--etc-dir, ./etc, packaged defaults)
- Schema validation using Pydantic
"""

from .config import Config, get_default_config_path, load_config, resolve_config_path
from .constants import DEFAULT_CONFIG_FILENAME, DEFAULT_ENV_PREFIX, MAX_CONFIG_SIZE_BYTES
from .schemas import (
    ApiSettingsSchema,
    LauncherSettings,
    LoggingSettings,
    NamhattaConfig,
    TargetSettings,
    validate_config,
)

__all__ = [
    "Config",
    "load_config",
    "resolve_config_path",
    "get_default_config_path",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_ENV_PREFIX",
    "MAX_CONFIG_SIZE_BYTES",
    "NamhattaConfig",
    "LoggingSettings",
    "LauncherSettings",
    "TargetSettings",
    "ApiSettingsSchema",
    "validate_config",
]
