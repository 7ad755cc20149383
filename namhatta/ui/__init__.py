"""Terminal output helpers."""

from .console import NAMHATTA_THEME, Console

__all__ = ["Console", "NAMHATTA_THEME"]
