"""
Tool framework components.

This module provides the tool framework:
- Base tool class
- Tool registration utilities
"""

from .base import Tool, ToolConfig
from .registry import ToolRegistry

__all__ = ["Tool", "ToolConfig", "ToolRegistry"]
