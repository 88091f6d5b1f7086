"""Provides the file locations that the updater and ShipIt use."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from config import get_config
from config.directories import DirectoryConfig
from squirrel.identifier import (
    DEFAULT_RESOLVERS,
    IdentifierResolver,
    resolve_identifier,
    validate_identifier,
)
from squirrel.locations import ensure_directory, locate_application_support

logger = logging.getLogger(__name__)

_current_manager: DirectoryManager | None = None
_current_manager_lock = threading.Lock()
_identifier_resolvers: tuple[IdentifierResolver, ...] = DEFAULT_RESOLVERS


def set_identifier_resolvers(resolvers: Iterable[IdentifierResolver]) -> None:
    """
    Replace the resolvers used to build the shared manager.

    Raises:
        RuntimeError: if the shared manager has already been created.
    """
    global _identifier_resolvers
    with _current_manager_lock:
        if _current_manager is not None:
            raise RuntimeError(
                "The shared directory manager has already been created for "
                f"{_current_manager.app_identifier!r}"
            )
        _identifier_resolvers = tuple(resolvers)


class DirectoryManager:
    """
    Finds or creates the on-disk locations for one application identifier.

    Every query re-checks the filesystem, so a directory removed by another
    process is recreated on the next call. The ``resolve_*`` methods do the work
    synchronously; the ``*_url`` coroutines run them in a worker thread so they
    compose with the rest of an asyncio update pipeline.
    """

    def __init__(self: DirectoryManager, app_identifier: str) -> None:
        """Initialize the manager for ``app_identifier``.

        Raises:
            InvalidIdentifierError: if ``app_identifier`` is empty or not a
                single path component.
        """
        self._app_identifier = validate_identifier(app_identifier)

    @classmethod
    def current_application_manager(cls) -> DirectoryManager:
        """Get the shared manager for the running application."""
        global _current_manager
        manager = _current_manager
        if manager is not None:
            return manager

        with _current_manager_lock:
            if _current_manager is None:
                _current_manager = cls(resolve_identifier(_identifier_resolvers))
                logger.debug(
                    "Created shared directory manager for %r",
                    _current_manager.app_identifier,
                )
            return _current_manager

    @classmethod
    def with_identifier(cls, app_identifier: str) -> DirectoryManager:
        """Create a manager scoped to ``app_identifier``, e.g. ShipIt's job label."""
        return cls(app_identifier)

    @property
    def app_identifier(self) -> str:
        return self._app_identifier

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryManager):
            return NotImplemented
        return self._app_identifier == other._app_identifier

    def __hash__(self) -> int:
        return hash(self._app_identifier)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._app_identifier!r})"

    @staticmethod
    def _layout() -> DirectoryConfig:
        return get_config().directories

    # Synchronous resolution

    def resolve_application_support(self) -> Path:
        """Find or create the application support directory."""
        return locate_application_support(self._app_identifier)

    def resolve_download_directory(self) -> Path:
        """Find or create the directory updates are downloaded into."""
        root = self.resolve_application_support()
        return ensure_directory(root / self._layout().download_dir_name, "download")

    def resolve_unpack_directory(self) -> Path:
        """Find or create the directory downloaded updates are unpacked into."""
        root = self.resolve_application_support()
        return ensure_directory(root / self._layout().unpack_dir_name, "unpack")

    def resolve_shipit_state(self) -> Path:
        """Determine where ShipIt's archived state should be saved. The file is not created."""
        root = self.resolve_application_support()
        return root / self._layout().shipit_state_file_name

    def resolve_shipit_stdout(self) -> Path:
        """Determine where ShipIt's standard output should be written."""
        root = self.resolve_application_support()
        return root / self._layout().shipit_stdout_file_name

    def resolve_shipit_stderr(self) -> Path:
        """Determine where ShipIt's standard error should be written."""
        root = self.resolve_application_support()
        return root / self._layout().shipit_stderr_file_name

    # Asynchronous queries

    async def application_support_url(self) -> Path:
        """Find or create the application support directory."""
        return await asyncio.to_thread(self.resolve_application_support)

    async def download_directory_url(self) -> Path:
        """Find or create the download directory, under the application support directory."""
        return await asyncio.to_thread(self.resolve_download_directory)

    async def unpack_directory_url(self) -> Path:
        """Find or create the unpack directory, under the application support directory."""
        return await asyncio.to_thread(self.resolve_unpack_directory)

    async def shipit_state_url(self) -> Path:
        """Determine where ShipIt's archived state should be saved."""
        return await asyncio.to_thread(self.resolve_shipit_state)

    async def shipit_stdout_url(self) -> Path:
        """Determine where ShipIt's standard output should be written."""
        return await asyncio.to_thread(self.resolve_shipit_stdout)

    async def shipit_stderr_url(self) -> Path:
        """Determine where ShipIt's standard error should be written."""
        return await asyncio.to_thread(self.resolve_shipit_stderr)
