"""CLI application entry point and command routing for bowerpy.

This module is the **sole error boundary** for the entire application.
It catches :class:`~bowerpy.exceptions.BowerpyError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from bowerpy.cli import exit_codes
from bowerpy.cli.console import console, enable_debug_logging
from bowerpy.core.models import PackageIdentity
from bowerpy.exceptions import BowerpyError
from bowerpy.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

_INSTALL_HELP = """\
Reads the bower.json file from the current directory and installs every
dependency declared in it.

If a package name is passed, only that package is installed:

  bowerpy install packageName[#version]

With -S/--save the installed package is added to bower.json (only if the
file already exists).
"""


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``bowerpy install [-S] [package[#version]]``
    * ``bowerpy doctor``   — environment diagnostics
    * ``bowerpy --version``
    """
    parser = argparse.ArgumentParser(
        prog="bowerpy",
        description="Installer for Bower-style front-end packages.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug logging to stderr.",
    )

    sub = parser.add_subparsers(dest="command")

    install = sub.add_parser(
        "install",
        help="Install the project dependencies or a single package.",
        description=_INSTALL_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    install.add_argument(
        "-S",
        "--save",
        action="store_true",
        help="Add the installed package to the bower.json file.",
    )
    install.add_argument(
        "package",
        nargs="?",
        default=None,
        help="Package to install, as name[#version].",
    )

    sub.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _announce_installed(identity: PackageIdentity, tag: str) -> None:
    console.print(
        f"bowerpy {identity.name}#{tag} install",
        markup=False,
        highlight=False,
    )


def _handle_install(package: str | None, save: bool) -> int:
    """Dispatch a bulk or single install.

    Flow:
    1. Build the install request and the frozen config for it.
    2. Instantiate the registry-backed installer.
    3. Run the orchestrator once.
    4. Report the failure, or print the trailing blank "done" line.
    """
    from bowerpy.cli.reporter import report_failure
    from bowerpy.core.config import InstallConfig
    from bowerpy.core.models import Failure
    from bowerpy.core.orchestrator import InstallOrchestrator
    from bowerpy.core.specifier import build_request
    from bowerpy.infra.bower_installer import BowerInstaller

    request = build_request(package, save=save)
    config = InstallConfig.for_request(request)
    installer = BowerInstaller(config, on_installed=_announce_installed)

    outcome = InstallOrchestrator().run(request, installer)
    if isinstance(outcome, Failure):
        return report_failure(outcome, request.target, installer)

    console.print()
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from bowerpy.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the bowerpy CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        enable_debug_logging()

    if args.command == "install":
        return _handle_install(args.package, args.save)

    if args.command == "doctor":
        return _handle_doctor()

    parser.print_help()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BowerpyError as exc:
        console.labelled("Error:", str(exc), style="bold red")
        if exc.hint:
            console.labelled("Hint:", exc.hint, style="yellow")
        sys.exit(exc.exit_code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.labelled("Unexpected error.", "Please report this issue.", style="bold red")
        console.labelled(f"  {type(exc).__name__}:", str(exc), style="dim")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
