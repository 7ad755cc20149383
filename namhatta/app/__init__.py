"""
Application framework for the namhatta command line.

Provides the App class, the Tool base class for subcommands and the
errors raised when tools are defined or registered incorrectly.
"""

from .core import App, ShutdownManager
from .errors import (
    AppError,
    CommandError,
    DupToolError,
    MissingParentError,
    ToolRegistrationError,
    UndefNameError,
)
from .tools import Tool, ToolConfig, ToolRegistry

__all__ = [
    "App",
    "ShutdownManager",
    "Tool",
    "ToolConfig",
    "ToolRegistry",
    "AppError",
    "CommandError",
    "DupToolError",
    "MissingParentError",
    "ToolRegistrationError",
    "UndefNameError",
]
