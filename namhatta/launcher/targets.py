"""
Launch target definitions.

A target names a script to run under an interpreter plus the messages the
launcher logs around it. The built-in ``dev`` and ``seed`` targets are
adjusted from the ``launcher:`` config section by target_from_settings().
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from namhatta.config import LauncherSettings
from namhatta.exceptions import ConfigError

DEFAULT_MODE_VAR = "NODE_ENV"
DEFAULT_MODE = "development"


def _frozen(env: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(env))


@dataclass(frozen=True)
class LaunchTarget:
    """
    Definition of a script the launcher can run.

    Attributes:
        name: Target name (also the CLI command)
        script: Script path, relative to the launcher base directory
        interpreter: Interpreter argv prefix; the script path is appended
        env: Environment overrides merged over the parent's environment
        banner: Message logged before spawning
        failure_message: Prefix logged when the child can't be spawned
        exit_message: Message logged (debug) when the child exits
        success_message: Message logged (info) when the child exits with 0
        stop_message: Message logged when a signal is forwarded
    """

    name: str
    script: str
    interpreter: tuple[str, ...] = field(default_factory=lambda: (sys.executable,))
    env: Mapping[str, str] = field(
        default_factory=lambda: _frozen({DEFAULT_MODE_VAR: DEFAULT_MODE})
    )
    banner: str = ""
    failure_message: str = "failed to start child process"
    exit_message: str = "child process exited"
    success_message: str | None = None
    stop_message: str = "stopping child process"

    def __post_init__(self) -> None:
        if not self.interpreter:
            raise ConfigError("interpreter must not be empty", target=self.name)
        # Keep env read-only even if a plain dict was passed in
        object.__setattr__(self, "env", _frozen(self.env))
        object.__setattr__(self, "interpreter", tuple(self.interpreter))

    def with_env(self, **overrides: str) -> LaunchTarget:
        """Copy of this target with additional environment overrides."""
        env = dict(self.env)
        env.update(overrides)
        return replace(self, env=env)


DEV_TARGET = LaunchTarget(
    name="dev",
    script="server/main.py",
    banner="starting Namhatta Management System",
    failure_message="failed to start server",
    exit_message="server exited",
    stop_message="shutting down server",
)

SEED_TARGET = LaunchTarget(
    name="seed",
    script="scripts/seed.py",
    banner="running database seed script",
    failure_message="failed to run seed script",
    exit_message="seed script exited",
    success_message="seed script completed successfully",
    stop_message="stopping seed script",
)

BUILTIN_TARGETS: dict[str, LaunchTarget] = {
    DEV_TARGET.name: DEV_TARGET,
    SEED_TARGET.name: SEED_TARGET,
}


def target_from_settings(name: str, settings: LauncherSettings) -> LaunchTarget:
    """
    Build a built-in target adjusted by launcher settings.

    Per-target script/interpreter win over the launcher-wide interpreter,
    which wins over the built-in defaults. The mode variable is always
    forced to the configured mode.

    Raises:
        ConfigError: If name is not a built-in target
    """
    base = BUILTIN_TARGETS.get(name)
    if base is None:
        raise ConfigError("unknown launch target", target=name)

    overrides = settings.targets.get(name)
    script = base.script
    interpreter = base.interpreter
    if settings.interpreter:
        interpreter = tuple(settings.interpreter)
    if overrides is not None:
        if overrides.script:
            script = overrides.script
        if overrides.interpreter:
            interpreter = tuple(overrides.interpreter)

    return replace(
        base,
        script=script,
        interpreter=interpreter,
        env={settings.mode_var: settings.mode},
    )
