"""
Configuration loading for YAML files with substitution and env overrides.

This module provides a Config class that extends DotDict to load a YAML file,
apply NAMHATTA_* environment variable overrides and resolve ``${path}``
references to other configuration values.
"""

import os
import re
from collections.abc import Mapping
from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from namhatta.dot_dict import DotDict, DotDictPathNotFoundError
from namhatta.exceptions import ConfigError

from .constants import DEFAULT_CONFIG_FILENAME, DEFAULT_ENV_PREFIX, MAX_CONFIG_SIZE_BYTES

# Restricted to config key characters so substitution can't backtrack badly
_VAR_PATTERN = re.compile(r"\$\{([a-zA-Z0-9_.]+)\}")


def _check_file_size(path: Path) -> None:
    """Reject config files above the size limit."""
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"Configuration file '{path}' is {file_size} bytes, "
            f"exceeding maximum size of {MAX_CONFIG_SIZE_BYTES} bytes",
            path=str(path),
        )


def _read_yaml(path: Path) -> dict[str, Any]:
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError("invalid YAML", path=str(path), error=str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("config root must be a mapping", path=str(path))
    return data


class Config(DotDict):
    """
    Configuration loaded from a YAML file.

    Environment Variable Override Format:
        NAMHATTA_<SECTION>_<KEY>=value

    Underscores separate path components, except where the joined name
    matches a key that already exists in the file, so
    ``NAMHATTA_LAUNCHER_MODE_VAR`` sets ``launcher.mode_var``.
    Values are parsed as YAML scalars (``true``, ``3``, ``1.5``, ``null``).

    Example:
        config = Config("etc/namhatta.yaml")
        level = config.get("logging.level", "info")
        mode = config.launcher.mode
    """

    def __init__(
        self,
        fname: str | Path,
        enable_env_overrides: bool = True,
        env_prefix: str = DEFAULT_ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ):
        """
        Load configuration from a YAML file.

        Args:
            fname: Path to the YAML configuration file
            enable_env_overrides: Whether to apply environment variable overrides
            env_prefix: Prefix for override variables (default: 'NAMHATTA_')
            environ: Environment to read overrides from (default: os.environ)
        """
        super().__init__()
        self._enable_env_overrides = enable_env_overrides
        self._env_prefix = env_prefix
        self._environ = environ
        self._config_path = Path(fname).resolve()
        self._load()

    @property
    def path(self) -> Path:
        """Resolved path of the loaded file."""
        return self._config_path

    def _load(self) -> None:
        path = self._config_path
        if not path.is_file():
            raise ConfigError("config file not found", path=str(path))
        _check_file_size(path)

        data = _read_yaml(path)
        if self._enable_env_overrides:
            data = self._apply_env_overrides(data)

        self.set(**data)
        try:
            self.set(**self._resolve(self.to_dict()))
        except DotDictPathNotFoundError as e:
            raise ConfigError(
                "undefined variable in config", path=str(path), variable=e.path
            ) from e

    def reload(self) -> "Config":
        """Re-read the file and re-apply overrides and substitution."""
        for key in list(self.dict().keys()):
            delattr(self, key)
        self._load()
        return self

    def _resolve(self, content: Any) -> Any:
        """Recursively replace ``${path}`` references with config values."""
        if isinstance(content, dict):
            return {k: self._resolve(v) for k, v in content.items()}
        if isinstance(content, list):
            return [self._resolve(v) for v in content]
        if isinstance(content, str):
            return _VAR_PATTERN.sub(self._substitute_var, content)
        return content

    def _substitute_var(self, match: re.Match) -> str:
        var_name = match.group(1)
        if not self.has(var_name):
            raise DotDictPathNotFoundError(self, var_name)
        return str(self.get(var_name))

    def _collect_env_vars(self) -> dict[str, str]:
        environ = self._environ if self._environ is not None else os.environ
        return {k: v for k, v in environ.items() if k.startswith(self._env_prefix)}

    def _apply_env_overrides(self, data: dict[str, Any]) -> dict[str, Any]:
        for env_key, env_value in sorted(self._collect_env_vars().items()):
            parts = env_key[len(self._env_prefix) :].lower().split("_")
            if not all(parts):
                continue
            self._set_nested_value(data, parts, yaml.safe_load(env_value))
        return data

    @staticmethod
    def _set_nested_value(data: dict[str, Any], parts: list[str], value: Any) -> None:
        """Set value at the path described by underscore-split env key parts."""
        current = data
        i = 0
        while i < len(parts):
            # Prefer the longest joined name that matches an existing key
            key, consumed = parts[i], 1
            for j in range(len(parts), i + 1, -1):
                candidate = "_".join(parts[i:j])
                if candidate in current:
                    key, consumed = candidate, j - i
                    break

            i += consumed
            if i >= len(parts):
                current[key] = value
                return
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]

    def get_env_overrides(self) -> dict[str, Any]:
        """Return the overrides that would be applied, keyed by env variable."""
        if not self._enable_env_overrides:
            return {}
        return {k: yaml.safe_load(v) for k, v in self._collect_env_vars().items()}


def get_default_config_path() -> Path:
    """Path of the defaults shipped inside the package."""
    return Path(str(files("namhatta") / "etc" / DEFAULT_CONFIG_FILENAME))


def resolve_config_path(etc_dir: str | Path | None = None) -> Path:
    """
    Find the config file to load.

    Lookup order: ``<etc_dir>/namhatta.yaml`` when etc_dir is given,
    ``./etc/namhatta.yaml`` when present, then the packaged defaults.

    Raises:
        ConfigError: If etc_dir is given but holds no config file
    """
    if etc_dir is not None:
        path = Path(etc_dir) / DEFAULT_CONFIG_FILENAME
        if not path.is_file():
            raise ConfigError("config file not found", path=str(path))
        return path

    local = Path.cwd() / "etc" / DEFAULT_CONFIG_FILENAME
    if local.is_file():
        return local
    return get_default_config_path()


def load_config(
    etc_dir: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load the active configuration (see resolve_config_path for lookup)."""
    return Config(resolve_config_path(etc_dir), environ=environ)
