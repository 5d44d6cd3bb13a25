"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No network I/O.
* No imports from ``cli`` or ``infra``.
"""

from bowerpy.core.config import InstallConfig
from bowerpy.core.models import (
    BulkInstall,
    Failure,
    InstallMode,
    InstallOutcome,
    InstallRequest,
    PackageIdentity,
    SingleInstall,
    Success,
)
from bowerpy.core.orchestrator import InstallOrchestrator
from bowerpy.core.protocols import PackageInstaller
from bowerpy.core.specifier import build_request, parse_specifier

__all__: list[str] = [
    "BulkInstall",
    "Failure",
    "InstallConfig",
    "InstallMode",
    "InstallOrchestrator",
    "InstallOutcome",
    "InstallRequest",
    "PackageIdentity",
    "PackageInstaller",
    "SingleInstall",
    "Success",
    "build_request",
    "parse_specifier",
]
