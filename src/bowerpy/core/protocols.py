"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from bowerpy.core.models import PackageIdentity


class PackageInstaller(Protocol):
    """Contract for package installation backends.

    Any object that implements these three methods satisfies this
    protocol structurally (no explicit inheritance required).
    Implementations must map all backend-specific exceptions to
    :class:`~bowerpy.exceptions.BowerpyError` subclasses.
    """

    def install_dependencies(self) -> None:
        """Install every dependency declared in the project manifest.

        Dependencies of dependencies are installed as well.  The call is
        atomic from the caller's point of view: it returns normally or
        raises one error.

        Raises
        ------
        ManifestMissingError
            When the project has no manifest.
        InstallError
            When any declared dependency cannot be installed.
        """
        ...  # pragma: no cover

    def install_package(self, identity: PackageIdentity) -> None:
        """Install one package at a version satisfying its constraint.

        When the installer was configured with ``save_to_manifest``, the
        package is also recorded in the manifest as part of this call.

        Raises
        ------
        PackageNotFoundError
            When the registry does not know ``identity.name``.
        VersionNotFoundError
            When no release matches ``identity.version_constraint``.
        NetworkError
            When the registry or repository host cannot be reached.
        """
        ...  # pragma: no cover

    def get_package_info(
        self,
        identity: PackageIdentity,
        field: str = "versions",
    ) -> tuple[str, ...]:
        """Return package information for *field*.

        Only ``"versions"`` is supported: every known version of the
        package, newest first.
        """
        ...  # pragma: no cover
