"""
Logging built on the standard library with structured extra fields.

This module extends Python's standard logging with:
- A TRACE level below DEBUG
- Structured ``extra=`` fields rendered as ``[key:value]``
- Colored console output with ANSI escape sequences
- Root/derived logger tree (``/``, ``/launcher/dev``, ...)
- Complete disable via level False or "false"
"""

import logging

from .colors import ColorManager
from .config import LogConfig, resolve_level
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")


def create_root_lg(
    level: str | int | bool = "info",
    micros: bool = False,
    colors: bool | None = None,
) -> Logger:
    """
    Create a root logger with the specified configuration.

    Args:
        level: Log level name, number, or False to disable logging
        micros: Show microsecond timestamps
        colors: Colored output; None auto-detects
    """
    return LoggerFactory.create_root(LogConfig.from_params(level, micros, colors))


__all__ = [
    "ColorManager",
    "LogConfig",
    "LogConstants",
    "LogError",
    "InvalidLogLevelError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
    "create_root_lg",
    "resolve_level",
]
