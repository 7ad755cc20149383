"""
Tool registration and lookup by name or alias.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ..errors import DupToolError, ToolRegistrationError

if TYPE_CHECKING:
    from .base import Tool

# Names must be usable as argparse subcommands
_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")


def _validate_name(tool_name: str, what: str = "Tool name") -> None:
    if not _NAME_PATTERN.match(tool_name):
        raise ToolRegistrationError(
            tool_name,
            f"{what} must start with a lowercase letter and contain only "
            "lowercase letters, numbers, underscores, and hyphens",
        )


class ToolRegistry:
    """Registered tools, in registration order."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}
        self._aliases: dict[str, str] = {}

    def register(self, tool: Tool) -> None:
        """
        Register a tool and its aliases.

        Raises:
            ToolRegistrationError: If the name or an alias is invalid or taken
            DupToolError: If the tool name is already registered
        """
        _validate_name(tool.name)
        if tool.name in self._tools:
            raise DupToolError(tool)

        for alias in tool.config.aliases:
            _validate_name(alias, f"Alias '{alias}'")
            if alias in self._aliases or alias in self._tools:
                raise ToolRegistrationError(tool.name, f"Alias '{alias}' already registered")

        self._tools[tool.name] = tool
        for alias in tool.config.aliases:
            self._aliases[alias] = tool.name

    def get_tool(self, name: str) -> Tool | None:
        """Get tool by name or alias."""
        if name in self._tools:
            return self._tools[name]
        real_name = self._aliases.get(name)
        return self._tools.get(real_name) if real_name else None

    def list_tools(self) -> list[str]:
        return list(self._tools.keys())

    def list_aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def tools(self) -> list[Tool]:
        return list(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
