"""``bowerpy doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies bowerpy's requirements.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import os
import platform
import sys

from bowerpy.cli import exit_codes
from bowerpy.cli.console import console
from bowerpy.core.config import InstallConfig
from bowerpy.core.models import BulkInstall
from bowerpy.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _requests_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the requests row."""
    try:
        import requests
    except ImportError:
        return "requests", "NOT INSTALLED", "[red]FAIL[/red]"
    return "requests", getattr(requests, "__version__", "unknown"), "[green]OK[/green]"


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the rich row."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        import rich  # noqa: F401
    except ImportError:
        return "rich", "not installed", "[yellow]WARN[/yellow]"
    try:
        return "rich", version("rich"), "[green]OK[/green]"
    except PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _manifest_check(config: InstallConfig) -> tuple[str, str, str]:
    """Return (label, value, status) for the bower.json row."""
    if config.manifest_path.is_file():
        return "manifest", str(config.manifest_path), "[green]OK[/green]"
    return "manifest", f"{config.manifest_path} not found", "[yellow]WARN[/yellow]"


def _cache_dir_check(config: InstallConfig) -> tuple[str, str, str]:
    """Return (label, value, status) for the cache directory row."""
    path = config.cache_dir
    probe = path
    while not probe.exists() and probe != probe.parent:
        probe = probe.parent
    if os.access(probe, os.W_OK):
        return "cache", str(path), "[green]OK[/green]"
    return "cache", f"{path} not writable", "[red]FAIL[/red]"


def _bowerpy_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the bowerpy version row."""
    return "bowerpy", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nbowerpy doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    config = InstallConfig.for_request(BulkInstall())
    checks = [
        _bowerpy_version_check(),
        _python_version_check(),
        _requests_version_check(),
        _rich_check(),
        _manifest_check(config),
        _cache_dir_check(config),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        if has_failure:
            print("Some checks failed.", file=sys.stderr)
            return exit_codes.GENERAL_ERROR
        print("All checks passed.", file=sys.stderr)
        return exit_codes.SUCCESS

    table = Table(
        title="bowerpy doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
