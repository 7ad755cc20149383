"""Tests for configuration schema validation."""

import pytest

from namhatta.config import (
    LauncherSettings,
    LoggingSettings,
    NamhattaConfig,
    validate_config,
)
from namhatta.exceptions import ConfigError


@pytest.mark.unit
class TestValidateConfig:
    """Test validate_config()."""

    def test_empty_uses_defaults(self):
        config = validate_config({})
        assert isinstance(config, NamhattaConfig)
        assert config.logging.level == "info"
        assert config.launcher.mode_var == "NODE_ENV"
        assert config.launcher.mode == "development"
        assert config.launcher.interpreter is None
        assert config.api.timeout == 10.0

    def test_full_config(self):
        config = validate_config(
            {
                "logging": {"level": "debug", "colors": False, "micros": True},
                "launcher": {
                    "base_dir": "/srv/app",
                    "interpreter": ["npx", "tsx"],
                    "targets": {"dev": {"script": "server/index.ts"}},
                },
                "api": {"timeout": 2.5},
            }
        )
        assert config.logging.micros is True
        assert config.launcher.interpreter == ["npx", "tsx"]
        assert config.launcher.targets["dev"].script == "server/index.ts"
        assert config.api.timeout == 2.5

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError) as exc_info:
            validate_config({"logging": {"level": "loud"}})
        assert "logging.level" in str(exc_info.value)

    @pytest.mark.parametrize("level", ["trace", "DEBUG", "false", False, 20, "10"])
    def test_valid_log_levels(self, level):
        assert LoggingSettings(level=level).level == level

    def test_unknown_launcher_key(self):
        with pytest.raises(ConfigError):
            validate_config({"launcher": {"scripts": {}}})

    def test_unknown_target_key(self):
        with pytest.raises(ConfigError):
            validate_config({"launcher": {"targets": {"dev": {"command": "x"}}}})

    def test_empty_interpreter(self):
        with pytest.raises(ConfigError):
            validate_config({"launcher": {"interpreter": []}})

    def test_empty_mode_var(self):
        with pytest.raises(ConfigError):
            validate_config({"launcher": {"mode_var": ""}})

    def test_timeout_must_be_positive(self):
        with pytest.raises(ConfigError):
            validate_config({"api": {"timeout": 0}})

    def test_extra_sections_allowed(self):
        config = validate_config({"custom": {"a": 1}})
        assert config.launcher == LauncherSettings()
