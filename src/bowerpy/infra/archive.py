"""Infrastructure: unpacking downloaded package archives.

GitHub zipballs wrap every file in a single ``<owner>-<repo>-<sha>/``
directory.  That prefix is stripped so the package lands directly in
its install directory.

Rules
-----
* Entries that would resolve outside the destination are refused.
* Every entry is checked before anything is written.
* The package is unpacked into a staging directory next to the
  destination and only swapped in once complete, so a refused or
  corrupt archive leaves the previous install untouched.
"""

from __future__ import annotations

import shutil
import tempfile
import zipfile
from pathlib import Path

from bowerpy.exceptions import ArchiveError


def _common_root(names: list[str]) -> str:
    """Return ``"prefix/"`` when every entry shares one top directory."""
    tops = {name.split("/", 1)[0] for name in names if name}
    if len(tops) != 1:
        return ""
    top = tops.pop()
    if all(name == f"{top}/" or name.startswith(f"{top}/") for name in names):
        return f"{top}/"
    return ""


def extract_zip(archive: Path, dest: Path) -> Path:
    """Extract *archive* into *dest*, replacing any previous content.

    Raises
    ------
    ArchiveError
        When the archive is corrupt or contains unsafe paths.
    """
    dest.parent.mkdir(parents=True, exist_ok=True)
    staging = Path(tempfile.mkdtemp(prefix=f".{dest.name}-", dir=dest.parent))
    try:
        _extract_into(archive, staging)
        if dest.exists():
            shutil.rmtree(dest)
        staging.replace(dest)
    except BaseException:
        shutil.rmtree(staging, ignore_errors=True)
        raise

    return dest


def _extract_into(archive: Path, staging: Path) -> None:
    root = staging.resolve()
    try:
        with zipfile.ZipFile(archive) as zf:
            infos = zf.infolist()
            prefix = _common_root([info.filename for info in infos])

            entries: list[tuple[zipfile.ZipInfo, Path]] = []
            for info in infos:
                relative = info.filename[len(prefix):]
                if not relative:
                    continue
                target = (root / relative).resolve()
                if root != target and root not in target.parents:
                    raise ArchiveError(f"Unsafe path in archive {archive.name}: {info.filename}")
                entries.append((info, target))

            for info, target in entries:
                if info.is_dir():
                    target.mkdir(parents=True, exist_ok=True)
                    continue
                target.parent.mkdir(parents=True, exist_ok=True)
                with zf.open(info) as src, target.open("wb") as out:
                    shutil.copyfileobj(src, out)
    except zipfile.BadZipFile as exc:
        raise ArchiveError(f"Corrupt archive {archive}: {exc}") from exc
