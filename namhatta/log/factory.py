"""
Factory for creating root loggers and deriving child loggers.

Root loggers own the stream handler. Derived loggers have no handlers of
their own and propagate records to their parent, so one handler serves the
whole tree while each logger keeps its own name and extra fields.
"""

import logging
import sys
from typing import Any, TextIO

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(
        config: LogConfig,
        stream: TextIO | None = None,
        logger_class: type[Logger] = Logger,
    ) -> Logger:
        """
        Create the root logger ("/") writing to stream.

        Args:
            config: Logger configuration
            stream: Output stream (default: sys.stderr, keeping stdout free
                for child process passthrough and command output)
            logger_class: Logger class to use

        Example:
            >>> lg = LoggerFactory.create_root(LogConfig.from_params("info"))
            >>> lg.info("started", extra={"target": "dev"})
            [12:34:56,789] [I] started          [target:dev] [1234] [/]
        """
        return LoggerFactory.create("/", config, stream, logger_class)

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        stream: TextIO | None = None,
        logger_class: type[Logger] = Logger,
        extra: dict[str, Any] | None = None,
    ) -> Logger:
        """Create a standalone logger with its own console handler."""
        lg = logger_class(name, config, extra)

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        if config.level is not False:
            handler.setLevel(config.level)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        return lg

    @staticmethod
    def derive(
        parent: Logger,
        name: str | list[str],
        extra: dict[str, Any] | None = None,
    ) -> Logger:
        """
        Derive a child logger below parent.

        Args:
            parent: Parent logger
            name: Child name or list of path components
            extra: Extra fields added on top of the parent's

        Example:
            >>> dev_lg = LoggerFactory.derive(lg, ["launcher", "dev"])
            >>> dev_lg.name
            '/launcher/dev'
        """
        parts = [name] if isinstance(name, str) else list(name)
        base = parent.name.rstrip("/")
        child_name = base + "/" + "/".join(parts)

        merged = parent.extra
        if extra:
            merged.update(extra)

        child = type(parent)(child_name, parent.config, merged)
        child.disabled = parent.disabled
        child.setLevel(parent.level)
        child.parent = parent
        child.propagate = True
        return child
