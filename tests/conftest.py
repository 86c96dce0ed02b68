"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "link", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


@pytest.fixture(autouse=True)
def passlink_home(tmp_path: Path, monkeypatch) -> Path:
    """Point PASSLINK_HOME at an empty per-test directory."""
    home = tmp_path / "passlink_home"
    home.mkdir()
    monkeypatch.setenv("PASSLINK_HOME", str(home))
    return home


@pytest.fixture
def write_config(passlink_home: Path):
    """Write a config.json into the test home and return its path."""

    def _write(data: dict | str) -> Path:
        path = passlink_home / "config.json"
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
