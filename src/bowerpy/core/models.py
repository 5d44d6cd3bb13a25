"""Domain models for bowerpy.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and live for a single command invocation.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from bowerpy.exceptions import FailureKind

WILDCARD: str = "*"
"""Version constraint meaning "any version"."""


# ---------------------------------------------------------------------------
# Package identity
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PackageIdentity:
    """A package name paired with the version constraint to satisfy."""

    name: str
    """Registry name of the package (e.g. ``jquery``)."""

    version_constraint: str = WILDCARD
    """Requested version or tag.  Never empty; ``"*"`` means any."""

    def __post_init__(self) -> None:
        if not self.version_constraint:
            raise ValueError("version_constraint must not be empty")

    def __str__(self) -> str:
        return f"{self.name}#{self.version_constraint}"


# ---------------------------------------------------------------------------
# Install request (bulk | single)
# ---------------------------------------------------------------------------

class InstallMode(enum.Enum):
    BULK = "bulk"
    SINGLE = "single"


@dataclass(frozen=True, slots=True)
class BulkInstall:
    """Install every dependency declared in the project manifest."""

    @property
    def mode(self) -> InstallMode:
        return InstallMode.BULK

    @property
    def target(self) -> None:
        return None

    @property
    def save_to_manifest(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class SingleInstall:
    """Install exactly one named package, optionally saving it."""

    target: PackageIdentity
    save_to_manifest: bool = False

    @property
    def mode(self) -> InstallMode:
        return InstallMode.SINGLE


InstallRequest = Union[BulkInstall, SingleInstall]


# ---------------------------------------------------------------------------
# Install outcome (success | failure)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Success:
    """The installer completed without raising."""


@dataclass(frozen=True, slots=True)
class Failure:
    """The installer raised a classified error."""

    kind: FailureKind
    code: int
    message: str


InstallOutcome = Union[Success, Failure]
