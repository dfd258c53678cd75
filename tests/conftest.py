"""Shared pytest configuration and fixtures for all tests."""

import io
import json
import subprocess
import sys
from pathlib import Path

import pytest

from ccr.utils.logger import reset_logging


def pytest_configure(config):
    for marker in ("unit", "integration", "registry", "sniff", "service", "code", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid CCR configuration dict for testing."""
    return {
        "host": "127.0.0.1",
        "port": 3456,
        "api_key": "",
        "log": {"level": "DEBUG"},
        "startup": {"timeout_ms": 2000, "initial_delay_ms": 0},
        "code": {"command": ["claude"], "api_timeout_ms": 600000},
    }


def write_config(ccr_home: Path, config: dict) -> Path:
    """Write ``config`` as the CCR config file and return its path."""
    path = ccr_home / "config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def ccr_home(tmp_path: Path, monkeypatch) -> Path:
    """Isolate every test in its own CCR_HOME.

    Returns:
        Path to the CCR home directory
    """
    home = tmp_path / ".claude-code-router"
    home.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("CCR_HOME", str(home))
    reset_logging()
    yield home
    reset_logging()


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def dead_pid() -> int:
    """Pid of a process that has already exited."""
    proc = subprocess.Popen([sys.executable, "-c", "pass"])
    proc.wait()
    return proc.pid


@pytest.fixture
def sleeper():
    """A live child process that is killed after the test."""
    proc = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
    yield proc
    if proc.poll() is None:
        proc.kill()
    proc.wait()


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeStdin:
    """Stand-in for sys.stdin with a binary buffer."""

    def __init__(self, data: bytes = b"", tty: bool = False):
        self.buffer = io.BytesIO(data)
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty
