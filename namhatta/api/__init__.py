"""API client configuration: base URL resolution and URL building."""

from .url import (
    BASE_URL_ENV_VAR,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    DEVELOPMENT_MODE,
    MODE_ENV_VAR,
    ApiSettings,
    api_config,
    build_api_url,
    get_api_base_url,
    is_development,
    log_api_config,
)

__all__ = [
    "BASE_URL_ENV_VAR",
    "DEFAULT_HEADERS",
    "DEFAULT_TIMEOUT",
    "DEVELOPMENT_MODE",
    "MODE_ENV_VAR",
    "ApiSettings",
    "api_config",
    "build_api_url",
    "get_api_base_url",
    "is_development",
    "log_api_config",
]
