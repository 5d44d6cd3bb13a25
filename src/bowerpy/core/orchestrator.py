"""Core install orchestrator — dispatches one install request.

The orchestrator decides between bulk and single installation, drives
the injected :class:`~bowerpy.core.protocols.PackageInstaller`, and
turns the result into an :data:`~bowerpy.core.models.InstallOutcome`.

Guarantees
----------
* Exactly one installer call per :meth:`InstallOrchestrator.run`.
* No retries, no ``print()``, no filesystem access.
* Only :class:`~bowerpy.exceptions.BowerpyError` subclasses are captured;
  anything else propagates to the CLI error boundary.
"""

from __future__ import annotations

import logging

from bowerpy.core.models import (
    BulkInstall,
    Failure,
    InstallOutcome,
    InstallRequest,
    SingleInstall,
    Success,
)
from bowerpy.core.protocols import PackageInstaller
from bowerpy.exceptions import BowerpyError

logger = logging.getLogger(__name__)


class InstallOrchestrator:
    """Stateless dispatcher from :data:`InstallRequest` to installer call."""

    def run(self, request: InstallRequest, installer: PackageInstaller) -> InstallOutcome:
        """Execute *request* against *installer*.

        Returns
        -------
        Success
            When the installer returned normally.
        Failure
            When the installer raised a :class:`BowerpyError`; the error's
            kind, exit code and message are carried over unchanged.
        """
        logger.debug("Dispatching %r", request)
        try:
            if isinstance(request, BulkInstall):
                installer.install_dependencies()
            elif isinstance(request, SingleInstall):
                installer.install_package(request.target)
            else:
                raise TypeError(f"Unsupported install request: {request!r}")
        except BowerpyError as exc:
            logger.debug("Install failed (%s): %s", exc.kind.value, exc)
            return Failure(kind=exc.kind, code=exc.exit_code, message=str(exc))

        logger.debug("Install finished")
        return Success()
