"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the namhatta test suite.
"""

import logging
import os
import signal
from collections.abc import Generator
from io import StringIO
from pathlib import Path

import pytest

from namhatta.log import LogConfig, Logger, LoggerFactory

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (start real child processes)"
    )
    config.addinivalue_line("markers", "e2e: End-to-end tests (full command line)")
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line("markers", "slow: Tests that take >1 second to run")


def pytest_collection_modifyitems(config, items):
    """Add the 'unit' marker to tests without another category marker."""
    for item in items:
        if not any(
            mark.name in ["integration", "e2e"] for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def restore_signal_handlers() -> Generator[None, None, None]:
    """Put SIGINT/SIGTERM handlers back if a test left its own installed."""
    original = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGTERM)}
    yield
    for sig, handler in original.items():
        signal.signal(sig, handler)


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """Reset Python logging global state after each test."""
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/"):
            del logging.root.manager.loggerDict[name]
    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


@pytest.fixture
def log_stream() -> StringIO:
    """Stream the test logger writes to."""
    return StringIO()


@pytest.fixture
def lg(log_stream: StringIO) -> Logger:
    """Debug-level root logger without colors writing to log_stream."""
    return LoggerFactory.create_root(
        LogConfig.from_params("debug", colors=False), stream=log_stream
    )


@pytest.fixture
def write_script(tmp_path: Path):
    """
    Write a Python child script into tmp_path.

    Returns:
        Callable taking (relative_path, source) and returning the script path
    """

    def _write(relative_path: str, source: str) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source)
        return path

    return _write


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove variables read by the tooling from the environment."""
    for key in list(os.environ):
        if key.startswith("NAMHATTA_") or key in (
            "MODE",
            "API_BASE_URL",
            "DATABASE_URL",
            "NODE_ENV",
        ):
            monkeypatch.delenv(key, raising=False)

