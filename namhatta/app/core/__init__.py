"""
Core application framework components.

- App: argument parsing, config loading, logger setup and tool dispatch
- ShutdownManager: SIGINT/SIGTERM handling for the app process
"""

from .app import App
from .shutdown import ShutdownManager

__all__ = ["App", "ShutdownManager"]
