"""Squirrel directories - file locations shared by the updater and ShipIt."""

from squirrel.directory_manager import DirectoryManager, set_identifier_resolvers
from squirrel.errors import (
    DirectoryUnavailableError,
    InvalidIdentifierError,
    SquirrelError,
)
from squirrel.identifier import resolve_identifier

__all__ = [
    "DirectoryManager",
    "DirectoryUnavailableError",
    "InvalidIdentifierError",
    "SquirrelError",
    "resolve_identifier",
    "set_identifier_resolvers",
]
