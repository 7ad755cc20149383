"""
Process launcher for the dev server and the database seed script.

Runs a script under an interpreter as a child process with a forced runtime
mode, forwards SIGINT/SIGTERM to it, and mirrors its exit status.
"""

from .launcher import (
    FORWARDED_SIGNALS,
    SPAWN_FAILURE_EXIT_CODE,
    LaunchHandle,
    LaunchResult,
    ProcessLauncher,
    exit_code_from_returncode,
    merge_env,
    run_target,
)
from .state import LaunchState
from .targets import (
    BUILTIN_TARGETS,
    DEFAULT_MODE,
    DEFAULT_MODE_VAR,
    DEV_TARGET,
    SEED_TARGET,
    LaunchTarget,
    target_from_settings,
)

__all__ = [
    "BUILTIN_TARGETS",
    "DEFAULT_MODE",
    "DEFAULT_MODE_VAR",
    "DEV_TARGET",
    "FORWARDED_SIGNALS",
    "SEED_TARGET",
    "SPAWN_FAILURE_EXIT_CODE",
    "LaunchHandle",
    "LaunchResult",
    "LaunchState",
    "LaunchTarget",
    "ProcessLauncher",
    "exit_code_from_returncode",
    "merge_env",
    "run_target",
    "target_from_settings",
]
