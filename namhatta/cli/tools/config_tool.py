"""
Configuration tool for the namhatta CLI.

Displays the active configuration with environment overrides applied and
variable substitutions completed.
"""

from typing import Any

from namhatta.app import App, Tool, ToolConfig

from ..output import FORMATS, format_data


class ConfigTool(Tool):
    """CLI tool to display the resolved configuration."""

    def __init__(self, parent: App | None = None):
        config = ToolConfig(
            name="config",
            aliases=["c", "cfg"],
            help_text="Display resolved configuration",
            description=(
                "Display the active configuration file (--etc-dir, ./etc or the "
                "packaged defaults) with NAMHATTA_* environment overrides applied "
                "and ${...} substitutions completed."
            ),
        )
        super().__init__(parent, config)

    def add_args(self, parser: Any) -> None:
        parser.add_argument(
            "--format",
            "-f",
            choices=FORMATS,
            default="yaml",
            help="output format (default: yaml)",
        )
        parser.add_argument(
            "--section",
            "-s",
            default=None,
            help="show only a specific section (e.g. 'logging' or 'launcher.targets')",
        )

    def run(self, **kwargs: Any) -> int:
        data = self._filter_section(self.app.config.to_dict())
        if data is None:
            return 1
        self.app.console.print_plain(format_data(data, self.args.format))
        return 0

    def _filter_section(self, data: dict[str, Any]) -> dict[str, Any] | None:
        section = getattr(self.args, "section", None)
        if section is None:
            return data

        current: Any = data
        for part in section.split("."):
            if not isinstance(current, dict) or part not in current:
                self.lg.error("section not found", extra={"section": section})
                return None
            current = current[part]

        if isinstance(current, dict):
            return current
        return {section.split(".")[-1]: current}
