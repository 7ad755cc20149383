#!/usr/bin/env python3
"""
Namhatta CLI - developer and operator commands.

Usage:
    namhatta dev
    namhatta seed
    namhatta api-url /api/devotees --mode production --base-url https://api.example.org
    namhatta db-config postgresql --format yaml
    namhatta config --section launcher
"""

import namhatta
from namhatta.app import App
from namhatta.cli.tools import ApiUrlTool, ConfigTool, DbConfigTool, LaunchTool


def _build_app() -> App:
    """Build the CLI application with all tools registered."""
    app = App(
        "namhatta",
        description="Namhatta Management System dev tooling",
        version=namhatta.__version__,
    )
    app.add_tool(LaunchTool("dev"))
    app.add_tool(LaunchTool("seed"))
    app.add_tool(ApiUrlTool())
    app.add_tool(DbConfigTool())
    app.add_tool(ConfigTool())
    return app


def main() -> int:
    """Main entry point for the namhatta CLI."""
    return _build_app().main()


if __name__ == "__main__":
    raise SystemExit(main())
