"""On-disk layout configuration for the updater and ShipIt."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).resolve().parent.parent


class DirectoryConfig(BaseSettings):
    """Identifier overrides and the names used under the application support root."""

    app_identifier: str | None = Field(None, alias="SQUIRREL_APP_IDENTIFIER")
    app_name: str | None = Field(None, alias="SQUIRREL_APP_NAME")
    application_support_root: Path | None = Field(
        None, alias="SQUIRREL_APPLICATION_SUPPORT_ROOT"
    )

    download_dir_name: str = Field("download", alias="SQUIRREL_DOWNLOAD_DIR_NAME")
    unpack_dir_name: str = Field("unpack", alias="SQUIRREL_UNPACK_DIR_NAME")
    shipit_state_file_name: str = Field(
        "ShipItState.plist", alias="SQUIRREL_SHIPIT_STATE_FILE_NAME"
    )
    shipit_stdout_file_name: str = Field(
        "ShipIt_stdout.log", alias="SQUIRREL_SHIPIT_STDOUT_FILE_NAME"
    )
    shipit_stderr_file_name: str = Field(
        "ShipIt_stderr.log", alias="SQUIRREL_SHIPIT_STDERR_FILE_NAME"
    )

    model_config = SettingsConfigDict(
        env_file=get_project_root() / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator(
        "download_dir_name",
        "unpack_dir_name",
        "shipit_state_file_name",
        "shipit_stdout_file_name",
        "shipit_stderr_file_name",
    )
    @classmethod
    def _single_component(cls, value: str) -> str:
        # Both processes join these onto the same root, so they must stay inside it.
        if value in {"", ".", ".."} or any(c in value for c in ("/", "\\", "\x00")):
            raise ValueError(f"must be a single path component, got {value!r}")
        return value

    @field_validator("application_support_root")
    @classmethod
    def _absolute_root(cls, value: Path | None) -> Path | None:
        # Every process must land on the same tree whatever its working directory.
        if value is None:
            return None
        value = value.expanduser()
        if not value.is_absolute() or "\x00" in str(value):
            raise ValueError(f"must be an absolute path, got {str(value)!r}")
        return value

    @field_validator("app_identifier", "app_name")
    @classmethod
    def _blank_as_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()
