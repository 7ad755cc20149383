"""
Error classes for the namhatta.app package.

These cover mistakes in how tools are defined and registered, as opposed to
NamhattaError which covers failures of the tooling itself.
"""

from typing import Any


class AppError(Exception):
    """Base exception for namhatta.app package."""

    pass


class UndefNameError(AppError):
    """Raised when a tool name is not defined."""

    def __init__(self, cls: Any | None = None, tool: Any | None = None) -> None:
        self.cls = cls
        self.tool = tool
        if cls:
            super().__init__(f"Tool class {cls.__name__} must define a name property")
        elif tool:
            super().__init__(f"Tool {tool} must have a name")
        else:
            super().__init__("Tool name is not defined")


class DupToolError(AppError):
    """Raised when attempting to register a duplicate tool."""

    def __init__(self, tool: Any) -> None:
        self.tool = tool
        super().__init__(f"Tool '{tool.name}' is already registered")


class ToolRegistrationError(AppError):
    """Raised when tool registration fails."""

    def __init__(self, tool_name: str, reason: str):
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"Failed to register tool '{tool_name}': {reason}")


class CommandError(AppError):
    """Raised when command execution fails."""

    def __init__(self, message: str):
        super().__init__(f"Command error: {message}")


class MissingParentError(AppError):
    """Raised when accessing parent-dependent resources without a parent."""

    def __init__(self, tool_name: str, property_name: str):
        self.tool_name = tool_name
        self.property_name = property_name
        super().__init__(
            f"Tool '{tool_name}' cannot access '{property_name}' without a parent. "
            f"Register the tool with an App before running it."
        )
