"""Reading and updating the ``dependencies`` of a ``bower.json`` file.

Only the ``dependencies`` mapping is interpreted; every other key is
preserved verbatim when the file is rewritten.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from bowerpy.core.models import PackageIdentity
from bowerpy.exceptions import InstallError, ManifestMissingError

logger = logging.getLogger(__name__)


class JsonManifest:
    """A JSON dependency manifest at *path*."""

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def dependencies(self) -> dict[str, str]:
        """Return the declared ``name -> constraint`` mapping.

        Raises
        ------
        ManifestMissingError
            When the manifest file does not exist.
        """
        if not self.exists():
            raise ManifestMissingError(
                f"No {self.path.name} file found in {self.path.parent.resolve()}",
                hint="Create one, or install a single package by name.",
            )
        return read_dependencies(self.path)

    def add_dependency(self, identity: PackageIdentity) -> bool:
        """Record *identity* under ``dependencies``.

        Returns ``False`` without writing when the manifest does not
        exist; the file is never created implicitly.
        """
        if not self.exists():
            logger.warning(
                "%s not found, %s was not saved", self.path, identity.name,
            )
            return False

        data = _load(self.path)
        deps = data.get("dependencies")
        if not isinstance(deps, dict):
            deps = {}
        deps[identity.name] = identity.version_constraint
        data["dependencies"] = deps
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.debug("Saved %s to %s", identity, self.path)
        return True


def read_dependencies(path: Path) -> dict[str, str]:
    """Return the ``dependencies`` mapping of any ``bower.json`` at *path*.

    A file without the key, or with a non-object value, has none.
    """
    deps = _load(path).get("dependencies")
    if not isinstance(deps, dict):
        return {}
    return {str(name): str(constraint or "*") for name, constraint in deps.items()}


def _load(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InstallError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InstallError(f"{path} must contain a JSON object")
    return data
