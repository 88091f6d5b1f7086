"""Exception classes for the updater's directory manager."""

from __future__ import annotations

from pathlib import Path


class SquirrelError(Exception):
    """Base exception for all directory manager errors."""


class InvalidIdentifierError(SquirrelError):
    """Raised when no usable application identifier can be determined."""

    def __init__(
        self: InvalidIdentifierError,
        identifier: str | None,
        reason: str = "identifier must be a non-empty string",
    ) -> None:
        """Initialize InvalidIdentifierError."""
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid application identifier {identifier!r}: {reason}")


class DirectoryUnavailableError(SquirrelError):
    """Raised when a directory cannot be located or created."""

    def __init__(
        self: DirectoryUnavailableError,
        intent: str,
        path: Path | None,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize DirectoryUnavailableError.

        Args:
            intent: What the directory is for, e.g. "download"
            path: The location that was attempted, or None if no root
                could be determined
            cause: The underlying OS error
        """
        self.intent = intent
        self.path = path
        self.cause = cause
        location = str(path) if path is not None else "an unresolved location"
        message = f"Could not locate or create {intent} directory at {location}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)

    def to_dict(self: DirectoryUnavailableError) -> dict:
        """Convert to dictionary for logging."""
        data = {
            "intent": self.intent,
            "path": str(self.path) if self.path is not None else None,
            "error": str(self.cause) if self.cause is not None else None,
            "error_type": type(self.cause).__name__ if self.cause is not None else None,
        }
        return {k: v for k, v in data.items() if v is not None}
