"""Pytest configuration for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from config import get_config
from config.directories import DirectoryConfig
from squirrel import directory_manager
from squirrel.identifier import DEFAULT_RESOLVERS

SQUIRREL_ENV_VARS = (
    "SQUIRREL_APP_IDENTIFIER",
    "SQUIRREL_APP_NAME",
    "SQUIRREL_APPLICATION_SUPPORT_ROOT",
    "SQUIRREL_DOWNLOAD_DIR_NAME",
    "SQUIRREL_UNPACK_DIR_NAME",
    "SQUIRREL_SHIPIT_STATE_FILE_NAME",
    "SQUIRREL_SHIPIT_STDOUT_FILE_NAME",
    "SQUIRREL_SHIPIT_STDERR_FILE_NAME",
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Start every test with no configuration and no shared manager."""
    for name in SQUIRREL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.setitem(
        DirectoryConfig.model_config, "env_file", tmp_path / "project" / ".env"
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(directory_manager, "_current_manager", None)
    monkeypatch.setattr(directory_manager, "_identifier_resolvers", DEFAULT_RESOLVERS)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture(scope="function")
def support_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the per-user data root at a temporary directory."""
    root = tmp_path / "Application Support"
    monkeypatch.setenv("SQUIRREL_APPLICATION_SUPPORT_ROOT", str(root))
    get_config.cache_clear()
    return root


@pytest.fixture(scope="function")
def project_env_file(tmp_path: Path) -> Path:
    """Return the .env location the configuration reads during tests."""
    env_file = tmp_path / "project" / ".env"
    env_file.parent.mkdir(parents=True, exist_ok=True)
    return env_file
