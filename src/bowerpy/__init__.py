"""bowerpy — command-line installer for Bower-style front-end packages.

Resolves ``bower.json`` dependencies or a single ``name#version``
specifier against the Bower registry with a strict layered architecture.
"""

from bowerpy.version import __version__

__all__: list[str] = ["__version__"]
