"""Registry-backed implementation of :class:`~bowerpy.core.protocols.PackageInstaller`.

Resolves packages through the Bower registry, picks a GitHub tag that
satisfies the requested constraint, downloads (or reuses from the
cache) the tag's zipball and unpacks it into the install directory.

Only exact tags and the ``"*"`` wildcard are understood as
constraints; range matching is not supported.
"""

from __future__ import annotations

import json
import logging
from collections import deque
from collections.abc import Callable, Iterable
from pathlib import Path

from bowerpy.core.config import InstallConfig
from bowerpy.core.models import WILDCARD, PackageIdentity
from bowerpy.exceptions import InstallError, VersionNotFoundError
from bowerpy.infra.archive import extract_zip
from bowerpy.infra.manifest import JsonManifest, read_dependencies
from bowerpy.infra.registry_client import RegistryClient

logger = logging.getLogger(__name__)

STAMP_FILE: str = ".bower.json"
PACKAGE_MANIFEST: str = "bower.json"

InstalledCallback = Callable[[PackageIdentity, str], None]


def select_version(identity: PackageIdentity, tags: Iterable[str]) -> str:
    """Pick the tag satisfying ``identity.version_constraint``.

    ``"*"`` selects the first (newest) tag.  Any other constraint must
    name a tag exactly, with or without a leading ``v``.

    Raises
    ------
    VersionNotFoundError
        When no tag qualifies.
    """
    available = list(tags)
    constraint = identity.version_constraint
    if constraint == WILDCARD:
        if available:
            return available[0]
    else:
        wanted = constraint.removeprefix("v")
        for tag in available:
            if tag == constraint or tag.removeprefix("v") == wanted:
                return tag
    raise VersionNotFoundError(
        f"Version {constraint} not found for package {identity.name}",
    )


class BowerInstaller:
    """Concrete :class:`PackageInstaller` backed by the Bower registry.

    This class satisfies the :class:`~bowerpy.core.protocols.PackageInstaller`
    protocol structurally — no explicit inheritance required.

    Parameters
    ----------
    config:
        Frozen settings for this invocation.
    client:
        Registry client; built from *config* when omitted.
    manifest:
        Project manifest; ``config.manifest_path`` when omitted.
    on_installed:
        Optional callable invoked with the identity and the resolved tag
        after each package is unpacked.
    """

    def __init__(
        self,
        config: InstallConfig,
        *,
        client: RegistryClient | None = None,
        manifest: JsonManifest | None = None,
        on_installed: InstalledCallback | None = None,
    ) -> None:
        self._config = config
        self._client = client or RegistryClient(
            config.registry_url,
            github_token=config.github_token,
            timeout=config.timeout,
        )
        self._manifest = manifest or JsonManifest(config.manifest_path)
        self._on_installed = on_installed

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def install_dependencies(self) -> None:
        """Install the manifest's dependencies and theirs, each name once."""
        pending: deque[PackageIdentity] = deque(
            PackageIdentity(name, constraint or WILDCARD)
            for name, constraint in self._manifest.dependencies().items()
        )
        seen: set[str] = {identity.name for identity in pending}

        while pending:
            identity = pending.popleft()
            package_dir = self._install(identity)
            for child in self._package_dependencies(package_dir):
                if child.name not in seen:
                    seen.add(child.name)
                    pending.append(child)

    def install_package(self, identity: PackageIdentity) -> None:
        """Install *identity*; save it to the manifest when configured."""
        self._install(identity)
        if self._config.save_to_manifest:
            self._manifest.add_dependency(identity)

    def get_package_info(
        self,
        identity: PackageIdentity,
        field: str = "versions",
    ) -> tuple[str, ...]:
        """Return every tag of the package, newest first."""
        if field != "versions":
            raise InstallError(f"Unsupported package info field: {field}")
        return self._client.list_tags(self._client.lookup(identity.name))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _install(self, identity: PackageIdentity) -> Path:
        source = self._client.lookup(identity.name)
        tag = select_version(identity, self._client.list_tags(source))

        archive = self._config.cache_dir / identity.name / f"{tag}.zip"
        if archive.is_file():
            logger.debug("Using cached archive %s", archive)
        else:
            self._client.download_archive(source, tag, archive)

        package_dir = extract_zip(archive, self._config.install_dir / identity.name)
        self._write_stamp(package_dir, identity, tag, source)
        logger.info("Installed %s#%s into %s", identity.name, tag, package_dir)

        if self._on_installed is not None:
            self._on_installed(identity, tag)
        return package_dir

    @staticmethod
    def _write_stamp(package_dir: Path, identity: PackageIdentity, tag: str, source: str) -> None:
        stamp = {
            "name": identity.name,
            "version": tag.removeprefix("v"),
            "_release": tag,
            "_source": source,
            "_target": identity.version_constraint,
        }
        (package_dir / STAMP_FILE).write_text(
            json.dumps(stamp, indent=2) + "\n", encoding="utf-8",
        )

    @staticmethod
    def _package_dependencies(package_dir: Path) -> list[PackageIdentity]:
        path = package_dir / PACKAGE_MANIFEST
        if not path.is_file():
            return []
        return [
            PackageIdentity(name, constraint or WILDCARD)
            for name, constraint in read_dependencies(path).items()
        ]
