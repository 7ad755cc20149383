"""API URL tool: print the request URL a client would use for an endpoint."""

from dataclasses import replace
from typing import Any

from namhatta.api import ApiSettings, build_api_url, log_api_config
from namhatta.app import App, Tool, ToolConfig


class ApiUrlTool(Tool):
    """
    Resolve an endpoint against the API base URL.

    MODE and API_BASE_URL are read from the environment; --mode and
    --base-url take precedence over them.
    """

    def __init__(self, parent: App | None = None):
        config = ToolConfig(
            name="api-url",
            aliases=["url"],
            help_text="Print the API URL for an endpoint",
            description=(
                "Build the request URL for ENDPOINT the way API clients do: "
                "origin-relative in development mode, otherwise prefixed with "
                "API_BASE_URL."
            ),
        )
        super().__init__(parent, config)

    def add_args(self, parser: Any) -> None:
        parser.add_argument("endpoint", help="endpoint path, e.g. /api/devotees")
        parser.add_argument(
            "--mode",
            default=None,
            help="runtime mode (default: $MODE)",
        )
        parser.add_argument(
            "--base-url",
            default=None,
            metavar="URL",
            help="base URL used outside development mode (default: $API_BASE_URL)",
        )

    def settings(self) -> ApiSettings:
        settings = ApiSettings.from_env(timeout=self.app.settings.api.timeout)
        if self.args.mode is not None:
            settings = replace(settings, mode=self.args.mode)
        if self.args.base_url is not None:
            settings = replace(settings, base_url_override=self.args.base_url)
        return settings

    def run(self, **kwargs: Any) -> int:
        settings = self.settings()
        log_api_config(self.lg, settings)
        self.app.console.print_plain(build_api_url(self.args.endpoint, settings))
        return 0
