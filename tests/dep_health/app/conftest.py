"""Shared fixtures for app-level tests."""
import json
import pytest

from fake_container import PACKAGE_JSON, build_container

from dep_health.app.config import (
    AppConfig,
    AnalysisConfig,
    DirectoryConfig,
    LoggingConfig,
)


@pytest.fixture
def test_config(tmp_path):
    """Create test configuration with explicit values."""
    return AppConfig(
        directories=DirectoryConfig(home=tmp_path),
        analysis=AnalysisConfig(preview_limit=3),
        logging=LoggingConfig(console_output=False, json_file=True),
    )


@pytest.fixture
def container(test_config):
    c = build_container(test_config)
    c.init_resources()
    yield c
    c.shutdown_resources()


@pytest.fixture
def package_json_file(tmp_path):
    path = tmp_path / "package.json"
    path.write_text(json.dumps(PACKAGE_JSON), encoding="utf-8")
    return path


@pytest.fixture
def mocked_container(tmp_path, monkeypatch):
    """Patch Container in main and cli so entry points build fake-backed containers."""
    monkeypatch.setenv("DEP_HEALTH_DIRECTORIES__HOME", str(tmp_path))
    monkeypatch.setenv("DEP_HEALTH_LOGGING__CONSOLE_OUTPUT", "false")
    monkeypatch.setattr("dep_health.app.main.Container", build_container)
    monkeypatch.setattr("dep_health.app.cli.Container", build_container)
