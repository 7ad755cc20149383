"""
Core app class for the namhatta command line.

The App owns the argument parser, the loaded configuration and the root
logger, registers tools as subcommands and runs the selected one.
"""

import argparse
import sys
import threading
import time
from collections.abc import Mapping, Sequence

from namhatta.config import Config, NamhattaConfig, load_config, validate_config
from namhatta.dot_dict import DotDict
from namhatta.exceptions import NamhattaError
from namhatta.log import LogConfig, Logger, LoggerFactory
from namhatta.ui import Console

from ..errors import CommandError
from ..tools import ToolRegistry
from ..tools.base import Tool
from .shutdown import ShutdownManager


class App:
    """
    Command-line application with tool subcommands.

    Setup order: register tools, build the parser, parse arguments, load and
    validate configuration, create the root logger, install shutdown signal
    handlers. Command-line logging options override the ``logging:`` config
    section.

    Example:
        app = App("namhatta", description="Namhatta dev tooling")
        app.add_tool(ApiUrlTool())
        sys.exit(app.main())
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        version: str | None = None,
        config: Config | DotDict | None = None,
        console: Console | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """
        Initialize the app.

        Args:
            name: Program name shown in usage and --version
            description: Help description
            version: Version string for --version (omitted when None)
            config: Preloaded configuration; skips loading from --etc-dir
            console: Console for command output (default: stdout console)
            environ: Environment for config overrides (default: os.environ)
        """
        self.name = name
        self.description = description
        self.version = version
        self.config: Config | DotDict = config if config is not None else DotDict()
        self.settings: NamhattaConfig = NamhattaConfig()
        self.registry: ToolRegistry = ToolRegistry()
        self.parser: argparse.ArgumentParser | None = None
        self._preloaded_config = config is not None
        self._console = console
        self._environ = environ
        self._parsed_args: argparse.Namespace | None = None
        self._lg: Logger | None = None
        self._shutdown = ShutdownManager()

    def add_tool(self, tool: Tool) -> None:
        """Register a tool, making this app its parent if it has none."""
        if tool.parent is None:
            tool.set_parent(self)
        self.registry.register(tool)

    def create_tools(self) -> None:
        """
        Create and register tools for the application.

        Override this method in subclasses to register application-specific tools.
        """
        pass

    def create_args(self) -> None:
        """Create the argument parser with standard options and tool subcommands."""
        self.parser = argparse.ArgumentParser(prog=self.name, description=self.description)
        self.add_default_args()
        self.add_args()

        if len(self.registry):
            subs = self.parser.add_subparsers(dest="tool", metavar="COMMAND")
            for tool in self.registry.tools():
                cmd_args, cmd_kwargs = tool.cmd
                tool.set_args(subs.add_parser(*cmd_args, **cmd_kwargs))

    def add_default_args(self) -> None:
        """Add default command-line arguments."""
        assert self.parser is not None
        self.parser.add_argument(
            "--etc-dir",
            type=str,
            default=None,
            metavar="DIR",
            help="configuration directory (default: ./etc/ or packaged defaults)",
        )
        self.parser.add_argument(
            "-l",
            "--log-level",
            default=None,
            metavar="LEVEL",
            help="log level (default: from config or 'info')",
        )
        self.parser.add_argument(
            "-q", "--quiet", action="store_true", help="disable logging"
        )
        if self.version is not None:
            self.parser.add_argument(
                "--version", action="version", version=f"{self.name} {self.version}"
            )

    def add_args(self) -> None:
        """
        Add application-specific arguments.

        Override this method in subclasses to add custom arguments.
        """
        pass

    def configure(self) -> None:
        """
        Configure the application after setup.

        Override this method in subclasses to perform custom configuration.
        """
        pass

    def setup(self, argv: Sequence[str] | None = None) -> None:
        """Set up the application framework."""
        start_t = time.monotonic()

        self.create_tools()
        self.create_args()
        assert self.parser is not None
        self._parsed_args = self.parser.parse_args(argv)

        self._load_config()
        self._lg = self._create_logger()
        if isinstance(self.config, Config):
            self.lg.debug("loaded config", extra={"file": str(self.config.path)})

        if threading.current_thread() is threading.main_thread():
            self._shutdown.register_signal_handlers()

        self.configure()
        self.lg.trace(
            "app setup complete",
            extra={"after": f"{time.monotonic() - start_t:.3f}s"},
        )

    def _load_config(self) -> None:
        if not self._preloaded_config:
            etc_dir = getattr(self._parsed_args, "etc_dir", None)
            self.config = load_config(etc_dir=etc_dir, environ=self._environ)
        self.settings = validate_config(self.config.to_dict())

    def _log_level_from_args(self, default: str | int | bool) -> str | int | bool:
        args = self._parsed_args
        if args is None:
            return default
        if getattr(args, "quiet", False):
            return False
        return getattr(args, "log_level", None) or default

    def _create_logger(self) -> Logger:
        """Root logger from the logging settings with CLI overrides applied."""
        logging_settings = self.settings.logging
        config = LogConfig.from_params(
            level=self._log_level_from_args(logging_settings.level),
            micros=logging_settings.micros,
            colors=logging_settings.colors,
        )
        return LoggerFactory.create_root(config)

    def run_no_tool(self) -> int:
        """
        Handle the case where no tool is selected.

        Prints usage to stderr. Override to provide a default action.
        """
        assert self.parser is not None
        self.parser.print_help(sys.stderr)
        return 0

    def run(self) -> int:
        """Run the selected tool and return its exit code."""
        tool_name = getattr(self._parsed_args, "tool", None)
        if tool_name is None:
            return self.run_no_tool()

        tool = self.registry.get_tool(tool_name)
        if tool is None:
            raise CommandError(f"unknown command '{tool_name}'")

        start_t = time.monotonic()
        tool.setup()
        return_code = tool.run()
        self.lg.trace(
            "tool finished",
            extra={
                "tool": tool.name,
                "code": return_code,
                "after": f"{time.monotonic() - start_t:.3f}s",
            },
        )
        return return_code

    def main(self, argv: Sequence[str] | None = None) -> int:
        """
        Main application entry point.

        Returns:
            int: Exit code. 130/143 when interrupted by SIGINT/SIGTERM, 1 on
            a namhatta error, otherwise the tool's exit code.
        """
        try:
            self.setup(argv)
            return self.run()

        except KeyboardInterrupt:
            self.lg.info("... interrupted by user")
            return self._shutdown.get_signal_return_code()
        except NamhattaError as e:
            self.lg.error("app error", extra={"exception": e})
            return 1
        except Exception as e:
            self.lg.error("app exception", extra={"exception": e})
            raise
        finally:
            self._shutdown.restore_signal_handlers()

    @property
    def args(self) -> argparse.Namespace | None:
        """Get parsed command-line arguments."""
        return self._parsed_args

    @property
    def lg(self) -> Logger:
        """
        Get the application logger.

        Before setup has created the configured logger (e.g. when the config
        file itself fails to load) this is an info-level logger.
        """
        if self._lg is None:
            quiet = bool(getattr(self._parsed_args, "quiet", False))
            self._lg = LoggerFactory.create_root(
                LogConfig.from_params(False if quiet else "info")
            )
        return self._lg

    @property
    def console(self) -> Console:
        """Console for command output."""
        if self._console is None:
            self._console = Console()
        return self._console

    def __repr__(self) -> str:
        return f"App(name={self.name!r}, tools={self.registry.list_tools()!r})"
