"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  Codes
for install failures mirror the ``exit_code`` of the matching
:mod:`bowerpy.exceptions` class.
"""

from __future__ import annotations

from bowerpy.exceptions import (
    BowerpyError,
    ManifestMissingError,
    NetworkError,
    PackageNotFoundError,
    VersionNotFoundError,
)

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = BowerpyError.exit_code
"""A known BowerpyError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

VERSION_NOT_FOUND: int = VersionNotFoundError.exit_code
"""No release of the requested package matches the constraint."""

PACKAGE_NOT_FOUND: int = PackageNotFoundError.exit_code
"""The registry does not know the requested package."""

MANIFEST_MISSING: int = ManifestMissingError.exit_code
"""Bulk install was requested but there is no ``bower.json``."""

NETWORK_ERROR: int = NetworkError.exit_code
"""The registry or repository host could not be reached."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
