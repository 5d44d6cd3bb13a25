"""Package specifier parsing — ``name[#versionConstraint]`` tokens.

Pure functions only.  No validation of the package name happens here;
malformed names are forwarded to the installer, which may reject them.
"""

from __future__ import annotations

from bowerpy.core.models import (
    WILDCARD,
    BulkInstall,
    InstallRequest,
    PackageIdentity,
    SingleInstall,
)

SEPARATOR: str = "#"


def parse_specifier(raw: str | None) -> PackageIdentity | None:
    """Turn a raw command-line token into a :class:`PackageIdentity`.

    ``None`` yields ``None`` (bulk mode).  The token is split on the
    first ``#``; a missing or empty constraint becomes ``"*"``.

    Examples
    --------
    >>> parse_specifier("jquery#2.1.4")
    PackageIdentity(name='jquery', version_constraint='2.1.4')
    >>> parse_specifier("jquery")
    PackageIdentity(name='jquery', version_constraint='*')
    """
    if raw is None:
        return None
    name, _, constraint = raw.partition(SEPARATOR)
    return PackageIdentity(name=name, version_constraint=constraint or WILDCARD)


def build_request(raw: str | None, *, save: bool = False) -> InstallRequest:
    """Build the :data:`InstallRequest` for one ``install`` invocation.

    The save flag only participates in single installs; it is dropped
    when no package was named.
    """
    target = parse_specifier(raw)
    if target is None:
        return BulkInstall()
    return SingleInstall(target=target, save_to_manifest=save)
