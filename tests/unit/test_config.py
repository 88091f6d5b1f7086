"""Tests for configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from config import get_config
from config.directories import DirectoryConfig, get_project_root


def test_defaults():
    """Test the default on-disk layout."""
    directories = get_config().directories

    assert directories.app_identifier is None
    assert directories.application_support_root is None
    assert directories.download_dir_name == "download"
    assert directories.unpack_dir_name == "unpack"
    assert directories.shipit_state_file_name == "ShipItState.plist"
    assert directories.shipit_stdout_file_name == "ShipIt_stdout.log"
    assert directories.shipit_stderr_file_name == "ShipIt_stderr.log"


def test_get_config_is_cached():
    """Test that the configuration is loaded once."""
    assert get_config() is get_config()


def test_environment_overrides(tmp_path, monkeypatch):
    """Test reading settings from the environment."""
    monkeypatch.setenv("SQUIRREL_APPLICATION_SUPPORT_ROOT", str(tmp_path))
    monkeypatch.setenv("SQUIRREL_APP_IDENTIFIER", " com.example.App ")
    get_config.cache_clear()

    directories = get_config().directories
    assert directories.application_support_root == tmp_path
    assert directories.app_identifier == "com.example.App"


def test_dotenv_file_at_project_root(project_env_file, tmp_path, monkeypatch):
    """Test that the project .env is read whatever the working directory."""
    project_env_file.write_text("SQUIRREL_UNPACK_DIR_NAME=unpacked\nOTHER_SETTING=1\n")
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)

    assert DirectoryConfig().unpack_dir_name == "unpacked"


def test_dotenv_in_working_directory_is_ignored(tmp_path):
    """Test that a .env next to the process does not change the layout."""
    (tmp_path / ".env").write_text(
        "SQUIRREL_UNPACK_DIR_NAME=unpacked\n"
        f"SQUIRREL_APPLICATION_SUPPORT_ROOT={tmp_path / 'other'}\n"
    )

    config = DirectoryConfig()
    assert config.unpack_dir_name == "unpack"
    assert config.application_support_root is None


def test_env_file_location_is_fixed():
    """Test that the .env location is anchored to the project, not the cwd."""
    root = get_project_root()

    assert root.is_absolute()
    assert (root / "config" / "directories.py").is_file()


def test_relative_root_rejected():
    """Test that a root override relative to the cwd is refused."""
    with pytest.raises(ValidationError):
        DirectoryConfig(application_support_root=Path("relative/root"))


def test_root_override_expands_home(monkeypatch, tmp_path):
    """Test that a root under ~ becomes absolute."""
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path))

    config = DirectoryConfig(application_support_root=Path("~/data"))

    assert config.application_support_root == tmp_path / "data"


def test_blank_identifier_is_unset(monkeypatch):
    """Test that blank values do not count as an identifier."""
    monkeypatch.setenv("SQUIRREL_APP_IDENTIFIER", "   ")

    assert DirectoryConfig().app_identifier is None


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b", "a\x00b"])
def test_names_must_be_single_components(name):
    """Test that layout names cannot escape the root."""
    with pytest.raises(ValidationError):
        DirectoryConfig(download_dir_name=name)


def test_field_names_accepted():
    """Test construction by field name."""
    config = DirectoryConfig(application_support_root=Path("/tmp/root"))

    assert config.application_support_root == Path("/tmp/root")
