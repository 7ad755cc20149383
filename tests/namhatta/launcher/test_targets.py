"""Tests for launch target definitions and config-driven adjustment."""

import sys

import pytest

from namhatta.config import LauncherSettings, TargetSettings
from namhatta.exceptions import ConfigError
from namhatta.launcher import (
    BUILTIN_TARGETS,
    DEV_TARGET,
    SEED_TARGET,
    LaunchTarget,
    target_from_settings,
)


@pytest.mark.unit
class TestLaunchTarget:
    """Test LaunchTarget construction."""

    def test_defaults(self):
        target = LaunchTarget(name="x", script="x.py")
        assert target.interpreter == (sys.executable,)
        assert dict(target.env) == {"NODE_ENV": "development"}

    def test_env_is_read_only(self):
        target = LaunchTarget(name="x", script="x.py", env={"A": "1"})
        with pytest.raises(TypeError):
            target.env["A"] = "2"  # type: ignore[index]

    def test_env_copied_from_caller(self):
        env = {"A": "1"}
        target = LaunchTarget(name="x", script="x.py", env=env)
        env["A"] = "changed"
        assert target.env["A"] == "1"

    def test_interpreter_list_becomes_tuple(self):
        target = LaunchTarget(name="x", script="x.py", interpreter=["npx", "tsx"])  # type: ignore[arg-type]
        assert target.interpreter == ("npx", "tsx")

    def test_empty_interpreter_rejected(self):
        with pytest.raises(ConfigError):
            LaunchTarget(name="x", script="x.py", interpreter=())

    def test_with_env_adds_overrides(self):
        target = DEV_TARGET.with_env(PORT="5000")
        assert target.env["PORT"] == "5000"
        assert target.env["NODE_ENV"] == "development"
        assert "PORT" not in DEV_TARGET.env


@pytest.mark.unit
class TestBuiltinTargets:
    """Test the dev and seed targets."""

    def test_registry(self):
        assert BUILTIN_TARGETS == {"dev": DEV_TARGET, "seed": SEED_TARGET}

    def test_dev_target(self):
        assert DEV_TARGET.script == "server/main.py"
        assert DEV_TARGET.env["NODE_ENV"] == "development"
        assert DEV_TARGET.success_message is None

    def test_seed_target(self):
        assert SEED_TARGET.script == "scripts/seed.py"
        assert SEED_TARGET.env["NODE_ENV"] == "development"
        assert SEED_TARGET.success_message == "seed script completed successfully"


@pytest.mark.unit
class TestTargetFromSettings:
    """Test adjusting built-in targets from launcher settings."""

    def test_default_settings_match_builtin(self):
        target = target_from_settings("dev", LauncherSettings())
        assert target.script == DEV_TARGET.script
        assert target.interpreter == DEV_TARGET.interpreter
        assert dict(target.env) == {"NODE_ENV": "development"}

    def test_mode_variable_and_value(self):
        settings = LauncherSettings(mode_var="APP_ENV", mode="staging")
        target = target_from_settings("seed", settings)
        assert dict(target.env) == {"APP_ENV": "staging"}

    def test_launcher_interpreter(self):
        settings = LauncherSettings(interpreter=["npx", "tsx"])
        assert target_from_settings("dev", settings).interpreter == ("npx", "tsx")

    def test_per_target_overrides_win(self):
        settings = LauncherSettings(
            interpreter=["node"],
            targets={"dev": TargetSettings(script="server/index.ts", interpreter=["npx", "tsx"])},
        )
        target = target_from_settings("dev", settings)
        assert target.script == "server/index.ts"
        assert target.interpreter == ("npx", "tsx")

        seed = target_from_settings("seed", settings)
        assert seed.script == SEED_TARGET.script
        assert seed.interpreter == ("node",)

    def test_messages_kept(self):
        target = target_from_settings("dev", LauncherSettings())
        assert target.banner == DEV_TARGET.banner
        assert target.failure_message == "failed to start server"

    def test_unknown_target(self):
        with pytest.raises(ConfigError):
            target_from_settings("build", LauncherSettings())
