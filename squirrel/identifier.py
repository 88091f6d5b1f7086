"""
Application identifier resolution.

The shared directory manager is scoped to an identifier for the running
application. Resolvers are tried in order and the first non-blank answer wins:

1. ``SQUIRREL_APP_IDENTIFIER`` from the configuration
2. ``CFBundleIdentifier`` of the enclosing macOS app bundle, when frozen
3. the application name (``SQUIRREL_APP_NAME`` or the running program's name)
"""

from __future__ import annotations

import logging
import plistlib
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from xml.parsers.expat import ExpatError

from config import get_config
from squirrel.errors import InvalidIdentifierError

logger = logging.getLogger(__name__)

IdentifierResolver = Callable[[], str | None]


def validate_identifier(identifier: str | None) -> str:
    """Return ``identifier`` stripped of surrounding whitespace, or raise."""
    if not isinstance(identifier, str) or not identifier.strip():
        raise InvalidIdentifierError(identifier)

    identifier = identifier.strip()
    if identifier in {".", ".."} or any(c in identifier for c in ("/", "\\", "\x00")):
        raise InvalidIdentifierError(
            identifier, "identifier must be a single path component"
        )
    return identifier


def configured_identifier() -> str | None:
    """Get the identifier set through ``SQUIRREL_APP_IDENTIFIER``."""
    return get_config().directories.app_identifier


def _bundle_info_plist() -> Path | None:
    # Frozen apps run from <Name>.app/Contents/MacOS/<executable>
    if not getattr(sys, "frozen", False):
        return None
    contents = Path(sys.executable).resolve().parent.parent
    if contents.name != "Contents":
        return None
    return contents / "Info.plist"


def bundle_identifier() -> str | None:
    """Get the bundle identifier of the app bundle we are running from, if any."""
    info_plist = _bundle_info_plist()
    if info_plist is None or not info_plist.is_file():
        return None

    try:
        with info_plist.open("rb") as f:
            info = plistlib.load(f)
    except (OSError, ValueError, ExpatError) as e:
        logger.debug("Failed to read bundle info from %s: %s", info_plist, e)
        return None

    if not isinstance(info, dict):
        return None
    value = info.get("CFBundleIdentifier")
    return value if isinstance(value, str) else None


def application_name() -> str | None:
    """Get the fallback application name."""
    configured = get_config().directories.app_name
    if configured:
        return configured

    candidates = [sys.argv[0]] if sys.argv else []
    candidates.append(sys.executable)
    for candidate in candidates:
        if not candidate or candidate.startswith("-"):
            continue
        path = Path(candidate)
        name = path.stem
        if name == "__main__":
            # python -m package runs <package>/__main__.py
            name = path.parent.name
        if name:
            return name
    return None


DEFAULT_RESOLVERS: tuple[IdentifierResolver, ...] = (
    configured_identifier,
    bundle_identifier,
    application_name,
)


def resolve_identifier(
    resolvers: Iterable[IdentifierResolver] = DEFAULT_RESOLVERS,
) -> str:
    """
    Determine the identifier for the running application.

    Raises:
        InvalidIdentifierError: if no resolver produces a usable identifier.
    """
    for resolver in resolvers:
        candidate = resolver()
        if candidate and candidate.strip():
            identifier = validate_identifier(candidate)
            logger.debug(
                "Resolved application identifier %r via %s",
                identifier,
                getattr(resolver, "__name__", repr(resolver)),
            )
            return identifier

    raise InvalidIdentifierError(
        None, "no bundle identifier or application name is available"
    )
