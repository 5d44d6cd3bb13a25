"""Allow ``python -m bowerpy`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m bowerpy`` behaves identically to the ``bowerpy`` console
script.
"""

from __future__ import annotations

from bowerpy.cli.app import cli

if __name__ == "__main__":
    cli()
