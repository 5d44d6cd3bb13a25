"""Custom exception hierarchy for bowerpy.

All exceptions that cross layer boundaries must inherit from
:class:`BowerpyError`.  Raw third-party exceptions (e.g. from requests)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Every class carries a :class:`FailureKind` and a process exit code so
that callers classify failures by variant instead of comparing numbers.

Hierarchy
---------
BowerpyError
├── InstallError
│   ├── VersionNotFoundError
│   ├── PackageNotFoundError
│   ├── ManifestMissingError
│   ├── NetworkError
│   └── ArchiveError
├── ConfigError
└── EnvironmentError
"""

from __future__ import annotations

import enum


class FailureKind(enum.Enum):
    """Named failure variants surfaced by the package installer."""

    VERSION_NOT_FOUND = "version_not_found"
    PACKAGE_NOT_FOUND = "package_not_found"
    MANIFEST_MISSING = "manifest_missing"
    NETWORK_ERROR = "network_error"
    OTHER = "other"


class BowerpyError(Exception):
    """Base exception for all bowerpy errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    kind: FailureKind = FailureKind.OTHER
    """Failure variant used by the reporter to pick its diagnostics."""

    exit_code: int = 1
    """Process exit status reported when this error ends the command."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    @property
    def message(self) -> str:
        return str(self)


# --- Installation ------------------------------------------------------------

class InstallError(BowerpyError):
    """Raised by a package installer when an installation step fails."""


class VersionNotFoundError(InstallError):
    """Raised when no release of a package satisfies the version constraint."""

    kind = FailureKind.VERSION_NOT_FOUND
    exit_code = 3


class PackageNotFoundError(InstallError):
    """Raised when the registry does not know the requested package."""

    kind = FailureKind.PACKAGE_NOT_FOUND
    exit_code = 4


class ManifestMissingError(InstallError):
    """Raised when ``bower.json`` is needed but absent."""

    kind = FailureKind.MANIFEST_MISSING
    exit_code = 5


class NetworkError(InstallError):
    """Raised when the registry or repository host cannot be reached."""

    kind = FailureKind.NETWORK_ERROR
    exit_code = 6


class ArchiveError(InstallError):
    """Raised when a downloaded package archive cannot be unpacked."""


# --- Environment / tooling -------------------------------------------------

class ConfigError(BowerpyError):
    """Raised when a configuration value from the environment is invalid."""


class EnvironmentError(BowerpyError):
    """Raised when a required runtime dependency is not available."""
