"""
Unified exception hierarchy for the namhatta tooling.

All tooling errors derive from NamhattaError so callers can catch every
failure raised by this package with a single except clause.
"""

from typing import Any


class NamhattaError(Exception):
    """
    Base exception for all namhatta tooling errors.

    Example:
        try:
            cfg = MigrationConfig.from_env(Dialect.POSTGRESQL)
        except NamhattaError as e:
            lg.error("cannot resolve migration config", extra={"exception": e})
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(NamhattaError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or unreadable
        - Invalid YAML syntax
        - Missing required environment variable (e.g. DATABASE_URL)
        - Value rejected by schema validation
    """

    pass


class ValidationError(NamhattaError):
    """Raised when input data fails validation."""

    pass


class LaunchError(NamhattaError):
    """Base class for process launcher errors."""

    pass


class SpawnError(LaunchError):
    """
    Raised when the child process could not be started.

    Covers a missing target script, a missing interpreter, and any other
    OS-level failure during process creation.
    """

    def __init__(self, target: str, reason: str, **context: Any) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"cannot start '{target}': {reason}", **context)
