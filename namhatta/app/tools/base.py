"""
Base tool class for command-line subcommands.

A tool is one subcommand of an App: it declares its arguments, gets a logger
derived from the app's root logger, and returns an exit code from run().
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ...log import Logger, LoggerFactory
from ..errors import MissingParentError, UndefNameError

if TYPE_CHECKING:
    from ..core.app import App


@dataclass
class ToolConfig:
    """Configuration for a tool."""

    name: str
    aliases: list[str] = field(default_factory=list)
    help_text: str = ""
    description: str = ""


class Tool:
    """
    Base class for subcommands.

    Subclasses pass a ToolConfig (or override _create_config), add their
    arguments in add_args() and implement run().

    Example:
        class HelloTool(Tool):
            def __init__(self, parent=None):
                super().__init__(parent, ToolConfig(name="hello"))

            def run(self, **kwargs):
                self.lg.info("hello")
                return 0
    """

    def __init__(self, parent: App | None = None, config: ToolConfig | None = None):
        """
        Initialize the tool.

        Args:
            parent: Owning application (set by App.add_tool when omitted)
            config: Tool configuration (optional)
        """
        self._parent = parent
        self.config = config or self._create_config()
        self._logger: Logger | None = None
        self._arg_prs: argparse.ArgumentParser | None = None
        self._initialized = False

    def _create_config(self) -> ToolConfig:
        """Create default configuration. Override in subclasses."""
        raise UndefNameError(cls=self.__class__)

    @property
    def parent(self) -> App | None:
        return self._parent

    def set_parent(self, parent: App | None) -> None:
        self._parent = parent

    @property
    def name(self) -> str:
        if self.config and self.config.name:
            return self.config.name
        raise UndefNameError(self.__class__)

    @property
    def cmd(self) -> tuple[list[str], dict[str, Any]]:
        """
        Get command configuration for argument parsing.

        Returns:
            tuple: (command_args, command_kwargs) for add_parser()
        """
        return [self.name], {
            "aliases": self.config.aliases,
            "help": self.config.help_text,
            "description": self.config.description or self.config.help_text,
        }

    @property
    def lg(self) -> Logger:
        """Logger derived from the app logger; available after setup()."""
        if self._logger is None:
            raise MissingParentError(self.name, "lg (setup() has not been called)")
        return self._logger

    @property
    def args(self) -> argparse.Namespace:
        """Parsed command-line arguments of the owning app."""
        if self._parent is None:
            raise MissingParentError(self.name, "args")
        args = self._parent.args
        if args is None:
            raise MissingParentError(self.name, "args (arguments not parsed yet)")
        return args

    @property
    def app(self) -> App:
        """The owning App instance."""
        if self._parent is None:
            raise MissingParentError(self.name, "app")
        return self._parent

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def arg_prs(self) -> argparse.ArgumentParser | None:
        return self._arg_prs

    def set_args(self, parser: argparse.ArgumentParser) -> None:
        """Attach this tool's arguments to its subparser."""
        self._arg_prs = parser
        self.add_args(parser)

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        """
        Add arguments to the parser.

        Override this method in subclasses to add tool-specific arguments.
        """
        pass

    def setup(self, **kwargs: Any) -> None:
        """Create the tool logger and run configure(); runs once."""
        if self._initialized:
            return
        self.setup_lg()
        self.configure()
        self._initialized = True

    def setup_lg(self) -> None:
        """Set up the logger for this tool."""
        if self._parent is None:
            raise MissingParentError(self.name, "lg")
        self._logger = LoggerFactory.derive(self._parent.lg, self.name)

    def configure(self) -> None:
        """
        Configure the tool after setup.

        Override this method in subclasses to perform custom configuration.
        """
        pass

    def run(self, **kwargs: Any) -> int:
        """
        Run the tool.

        Returns:
            int: Exit code
        """
        raise NotImplementedError(f"tool '{self.name}' does not implement run()")
