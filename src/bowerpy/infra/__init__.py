"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Bower registry, GitHub and
the local filesystem.  Every raw third-party exception must be caught
here and re-raised as a :class:`~bowerpy.exceptions.BowerpyError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from bowerpy.infra.archive import extract_zip
from bowerpy.infra.bower_installer import BowerInstaller, select_version
from bowerpy.infra.manifest import JsonManifest
from bowerpy.infra.registry_client import RegistryClient

__all__: list[str] = [
    "BowerInstaller",
    "JsonManifest",
    "RegistryClient",
    "extract_zip",
    "select_version",
]
