"""Failure reporting for the ``install`` command.

Turns a :class:`~bowerpy.core.models.Failure` into user-facing lines and
the process exit status.  The only enrichment performed is listing the
available versions when the requested version does not exist.
"""

from __future__ import annotations

from bowerpy.cli.console import console
from bowerpy.core.models import Failure, PackageIdentity
from bowerpy.core.protocols import PackageInstaller
from bowerpy.exceptions import FailureKind


def report_failure(
    failure: Failure,
    target: PackageIdentity | None,
    installer: PackageInstaller,
) -> int:
    """Render *failure* and return its exit code verbatim.

    When the failure is :attr:`FailureKind.VERSION_NOT_FOUND` for a named
    package, the installer is asked for the package's versions.  Errors
    raised by that lookup are not caught here.
    """
    console.error(failure.message)

    match failure.kind, target:
        case FailureKind.VERSION_NOT_FOUND, PackageIdentity():
            versions = installer.get_package_info(target, "versions")
            console.print(
                f"Available versions: {', '.join(versions)}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

    return failure.code
