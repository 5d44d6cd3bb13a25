"""Single source of truth for the bowerpy version string."""

__version__: str = "0.3.0"
