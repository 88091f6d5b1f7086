"""
Per-user application data locations shared by the updater and ShipIt.
"""

import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from config import get_config
from squirrel.errors import DirectoryUnavailableError

logger = logging.getLogger(__name__)

APPLICATION_SUPPORT = "application support"


def user_data_root() -> Path:
    """Get the platform-specific per-user data directory, without any identifier."""
    override = get_config().directories.application_support_root
    if override is not None:
        return override

    if sys.platform == "darwin":  # macOS
        return Path.home() / "Library" / "Application Support"
    if sys.platform == "win32":
        # Use APPDATA environment variable or fallback
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    # Linux and others
    # Follow XDG Base Directory Specification
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def ensure_directory(path: Path, intent: str) -> Path:
    """
    Create ``path`` and any missing ancestors unless it is already a directory.

    Raises:
        DirectoryUnavailableError: if the directory cannot be created, including
            when something other than a directory already occupies ``path``.
    """
    if path.is_dir():
        return path

    try:
        path.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        # ValueError covers paths the OS cannot represent, e.g. embedded NUL
        error = DirectoryUnavailableError(intent, path, e)
        logger.debug("Directory unavailable: %s", error.to_dict())
        raise error from e

    logger.debug("Created %s directory at %s", intent, path)
    return path


def locate_application_support(app_identifier: str) -> Path:
    """Find or create the application support directory for ``app_identifier``."""
    try:
        root = user_data_root()
    except (RuntimeError, ValidationError) as e:
        # Path.home() raises when the home directory cannot be determined,
        # get_config() when the root override is invalid
        error = DirectoryUnavailableError(APPLICATION_SUPPORT, None, e)
        logger.debug("Directory unavailable: %s", error.to_dict())
        raise error from e

    return ensure_directory(root / app_identifier, APPLICATION_SUPPORT)


__all__ = [
    "APPLICATION_SUPPORT",
    "ensure_directory",
    "locate_application_support",
    "user_data_root",
]
