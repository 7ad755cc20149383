"""
Launch tools: ``namhatta dev`` and ``namhatta seed``.

Each tool runs one built-in launch target under the process launcher and
returns the launcher's exit code, so the command exits exactly as the child
did (1 when the child could not be started).
"""

from pathlib import Path
from typing import Any

from namhatta.app import App, Tool, ToolConfig
from namhatta.launcher import BUILTIN_TARGETS, LaunchTarget, ProcessLauncher, target_from_settings


class LaunchTool(Tool):
    """Run a built-in launch target as a supervised child process."""

    def __init__(self, target_name: str, parent: App | None = None):
        """
        Args:
            target_name: Built-in target to run ("dev" or "seed")
            parent: Owning application
        """
        builtin = BUILTIN_TARGETS[target_name]
        config = ToolConfig(
            name=target_name,
            help_text=builtin.banner,
            description=(
                f"{builtin.banner}: run {builtin.script} as a child process "
                "with the runtime mode forced, forward SIGINT/SIGTERM to it "
                "and exit with its exit code."
            ),
        )
        super().__init__(parent, config)

    def add_args(self, parser: Any) -> None:
        parser.add_argument(
            "--base-dir",
            default=None,
            metavar="DIR",
            help="directory the script is resolved against "
            "(default: launcher.base_dir from config, else the current directory)",
        )
        parser.add_argument(
            "--script",
            default=None,
            metavar="PATH",
            help="script to run instead of the configured one",
        )

    def target(self) -> LaunchTarget:
        """The built-in target adjusted by the ``launcher:`` config section."""
        return target_from_settings(self.name, self.app.settings.launcher)

    def base_dir(self) -> Path:
        base_dir = getattr(self.args, "base_dir", None) or self.app.settings.launcher.base_dir
        return Path(base_dir) if base_dir else Path.cwd()

    def run(self, **kwargs: Any) -> int:
        launcher = ProcessLauncher(self.lg, self.target(), base_dir=self.base_dir())
        result = launcher.run(getattr(self.args, "script", None))
        return result.exit_code
