"""
Migration config tool: show the resolved migration settings for a dialect.

The connection URL comes from DATABASE_URL and is printed with its
password masked.
"""

from typing import Any

from namhatta.app import App, Tool, ToolConfig
from namhatta.db import Dialect, MigrationConfig
from namhatta.exceptions import ConfigError

from ..output import FORMATS, format_data, make_table


class DbConfigTool(Tool):
    """Print the migration configuration for PostgreSQL or MySQL."""

    def __init__(self, parent: App | None = None):
        config = ToolConfig(
            name="db-config",
            aliases=["db"],
            help_text="Show migration config for a database dialect",
            description=(
                "Resolve the migration configuration (output directory, schema "
                "module, connection URL from DATABASE_URL) for a dialect."
            ),
        )
        super().__init__(parent, config)

    def add_args(self, parser: Any) -> None:
        parser.add_argument(
            "dialect",
            choices=[d.value for d in Dialect],
            help="database dialect",
        )
        parser.add_argument(
            "--format",
            "-f",
            choices=["table", *FORMATS],
            default="table",
            help="output format (default: table)",
        )

    def run(self, **kwargs: Any) -> int:
        try:
            migration = MigrationConfig.from_env(self.args.dialect)
        except ConfigError as e:
            self.lg.error("cannot resolve migration config", extra={"exception": e})
            return 1

        data = migration.to_dict()
        if self.args.format == "table":
            self.app.console.print(
                make_table(data, title=f"{migration.dialect.label} migrations")
            )
        else:
            self.app.console.print_plain(format_data(data, self.args.format))
        return 0
