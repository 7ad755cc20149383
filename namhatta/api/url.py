"""
API base URL resolution and request URL building.

In development mode the API is served from the same origin as the client,
so URLs are origin-relative and the base URL override is ignored. Otherwise
the override (API_BASE_URL) is used, defaulting to same-origin.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from namhatta.log import Logger

MODE_ENV_VAR = "MODE"
BASE_URL_ENV_VAR = "API_BASE_URL"
DEVELOPMENT_MODE = "development"
DEFAULT_TIMEOUT = 10.0

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
)


@dataclass(frozen=True)
class ApiSettings:
    """
    Settings for building API request URLs.

    Attributes:
        mode: Runtime mode ("development", "production", ...)
        base_url_override: Base URL used outside development mode
        timeout: Request timeout in seconds
        default_headers: Headers sent with every request
    """

    mode: str = ""
    base_url_override: str = ""
    timeout: float = DEFAULT_TIMEOUT
    default_headers: Mapping[str, str] = field(default_factory=lambda: DEFAULT_HEADERS)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> ApiSettings:
        """Read MODE and API_BASE_URL from environ (default: os.environ)."""
        env = environ if environ is not None else os.environ
        return cls(
            mode=env.get(MODE_ENV_VAR, ""),
            base_url_override=env.get(BASE_URL_ENV_VAR, ""),
            timeout=timeout,
        )


def _settings(settings: ApiSettings | None) -> ApiSettings:
    return settings if settings is not None else ApiSettings.from_env()


def is_development(settings: ApiSettings | None = None) -> bool:
    return _settings(settings).mode == DEVELOPMENT_MODE


def get_api_base_url(settings: ApiSettings | None = None) -> str:
    """
    Base URL for API requests.

    Returns "" (origin-relative) in development mode, otherwise the
    override or "" when none is set.
    """
    settings = _settings(settings)
    if settings.mode == DEVELOPMENT_MODE:
        return ""
    return settings.base_url_override or ""


def build_api_url(endpoint: str, settings: ApiSettings | None = None) -> str:
    """
    Build a request URL from an endpoint path.

    One trailing slash is trimmed from the base URL and a leading slash is
    added to the endpoint when missing, so the two join with a single slash.

    Example:
        >>> s = ApiSettings(mode="production", base_url_override="https://host.example/")
        >>> build_api_url("api/devotees", s)
        'https://host.example/api/devotees'
    """
    base_url = get_api_base_url(settings)
    if base_url.endswith("/"):
        base_url = base_url[:-1]
    if not endpoint.startswith("/"):
        endpoint = "/" + endpoint
    return base_url + endpoint


def api_config(settings: ApiSettings | None = None) -> dict[str, Any]:
    """Client configuration: base URL, timeout and default headers."""
    settings = _settings(settings)
    return {
        "base_url": get_api_base_url(settings),
        "timeout": settings.timeout,
        "default_headers": dict(settings.default_headers),
    }


def log_api_config(lg: Logger, settings: ApiSettings | None = None) -> None:
    """Log the API configuration at debug level, in development mode only."""
    settings = _settings(settings)
    if not is_development(settings):
        return
    lg.debug(
        "api configuration",
        extra={
            "base_url": get_api_base_url(settings) or "<same-origin>",
            "mode": settings.mode,
            "is_dev": True,
        },
    )
