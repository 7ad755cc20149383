"""
Configuration schemas using Pydantic for validation.

The loaded YAML is validated into typed settings objects before any of it
is used to build launch targets or loggers.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from namhatta.exceptions import ConfigError

_VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "FALSE")


class LoggingSettings(BaseModel):
    """Configuration for logging."""

    level: str | int | bool = Field(default="info", description="Global log level")
    colors: bool | None = Field(
        default=None, description="Colored output (None: auto-detect from the tty)"
    )
    micros: bool = Field(default=False, description="Show microsecond timestamps")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        """Validate log level is a recognized level."""
        if isinstance(v, str) and not v.isnumeric() and v.upper() not in _VALID_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(_VALID_LEVELS)}"
            )
        return v

    model_config = ConfigDict(extra="allow")


class TargetSettings(BaseModel):
    """Per-target launcher overrides."""

    script: str | None = Field(
        default=None, description="Script path relative to the launcher base dir"
    )
    interpreter: list[str] | None = Field(
        default=None, description="Interpreter argv prefix for this target"
    )

    model_config = ConfigDict(extra="forbid")


class LauncherSettings(BaseModel):
    """Configuration for the process launcher."""

    base_dir: str | None = Field(
        default=None, description="Directory scripts are resolved against (default: cwd)"
    )
    interpreter: list[str] | None = Field(
        default=None,
        description="Interpreter argv prefix (default: the running Python interpreter)",
    )
    mode_var: str = Field(
        default="NODE_ENV", min_length=1, description="Runtime mode variable name"
    )
    mode: str = Field(default="development", description="Value forced on mode_var")
    targets: dict[str, TargetSettings] = Field(default_factory=dict)

    @field_validator("interpreter")
    @classmethod
    def validate_interpreter(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and (not v or not v[0]):
            raise ValueError("interpreter must name an executable")
        return v

    model_config = ConfigDict(extra="forbid")


class ApiSettingsSchema(BaseModel):
    """Configuration for API clients."""

    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")

    model_config = ConfigDict(extra="allow")


class NamhattaConfig(BaseModel):
    """Top-level configuration."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    launcher: LauncherSettings = Field(default_factory=LauncherSettings)
    api: ApiSettingsSchema = Field(default_factory=ApiSettingsSchema)

    model_config = ConfigDict(extra="allow")


def validate_config(config_dict: dict[str, Any]) -> NamhattaConfig:
    """
    Validate a configuration dictionary.

    Raises:
        ConfigError: If any section fails validation
    """
    try:
        return NamhattaConfig.model_validate(config_dict)
    except PydanticValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError("invalid configuration", errors=errors) from e
