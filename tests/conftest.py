"""Shared pytest fixtures and configuration for the bowerpy test suite.

Guidelines
----------
* No internet access in any test.
* requests must be mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Filesystem work happens under ``tmp_path`` only.
"""

from __future__ import annotations

import json
import zipfile
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from bowerpy.core.protocols import PackageInstaller


@pytest.fixture
def installer() -> MagicMock:
    """A mock satisfying the :class:`PackageInstaller` protocol."""
    return MagicMock(spec=PackageInstaller)


@pytest.fixture
def make_zipball(tmp_path: Path) -> Callable[..., Path]:
    """Build a GitHub-style zipball with one top-level directory.

    ``files`` maps relative paths to text content.  A ``bower``
    mapping, when given, is written as the package's ``bower.json``.
    """

    def _build(
        name: str,
        files: dict[str, str] | None = None,
        *,
        bower: dict[str, object] | None = None,
        root: str = "owner-repo-abc123",
    ) -> Path:
        archive = tmp_path / "zips" / f"{name}.zip"
        archive.parent.mkdir(parents=True, exist_ok=True)
        contents = dict(files or {"index.js": f"// {name}\n"})
        if bower is not None:
            contents["bower.json"] = json.dumps(bower)
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr(f"{root}/", "")
            for rel, text in contents.items():
                zf.writestr(f"{root}/{rel}", text)
        return archive

    return _build
