"""
Immutable logger configuration.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


def resolve_level(level: str | int | bool) -> int | bool:
    """
    Resolve log level from a name, a numeric value, or a boolean.

    Args:
        level: Level name ("info", "debug", ...), number, or False/"false"
            to disable logging. True maps to INFO.

    Returns:
        Numeric level, or False when logging is disabled

    Raises:
        InvalidLogLevelError: If the name is not a known level
    """
    if isinstance(level, bool):
        return logging.INFO if level else False
    if isinstance(level, int):
        return level
    if level.isnumeric():
        return int(level)
    resolved = LogConstants.LEVEL_NAMES.get(level.lower())
    if resolved is None:
        raise InvalidLogLevelError(level)
    return resolved


def _detect_colors() -> bool:
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return sys.stderr.isatty()


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable configuration for a root logger.

    Attributes:
        level: Numeric level, or False to disable logging
        micros: Show microsecond timestamps
        colors: Emit ANSI colors
    """

    level: int | bool = logging.INFO
    micros: bool = False
    colors: bool = False

    @classmethod
    def from_params(
        cls,
        level: str | int | bool = "info",
        micros: bool = False,
        colors: bool | None = None,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (name, number, or False to disable logging)
            micros: Whether to show microsecond precision
            colors: Colored output; None auto-detects (NO_COLOR, FORCE_COLOR, tty)
        """
        return cls(
            level=resolve_level(level),
            micros=micros,
            colors=_detect_colors() if colors is None else colors,
        )

    @classmethod
    def from_config(cls, config_dict: dict[str, Any], section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Example:
            config = load_config()
            log_config = LogConfig.from_config(config.to_dict())
        """
        current: Any = config_dict
        for part in section.split("."):
            current = current.get(part, {}) if isinstance(current, dict) else {}

        return cls.from_params(
            level=current.get("level", "info"),
            micros=current.get("micros", False),
            colors=current.get("colors"),
        )
