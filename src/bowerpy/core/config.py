"""Immutable runtime configuration handed to the package installer.

Settings come from ``BOWERPY_*`` environment variables (and
``GITHUB_TOKEN``) through pydantic-settings.  The configuration is built
once per invocation, before dispatch, and is never mutated afterwards.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bowerpy.core.models import InstallRequest
from bowerpy.exceptions import ConfigError

DEFAULT_REGISTRY_URL: str = "https://registry.bower.io"
DEFAULT_INSTALL_DIR: str = "bower_components"
DEFAULT_MANIFEST: str = "bower.json"
DEFAULT_TIMEOUT: float = 30.0


def default_cache_dir() -> Path:
    """``$HOME/.cache/bowerpy``."""
    return Path.home() / ".cache" / "bowerpy"


class InstallConfig(BaseSettings):
    """Settings shared by every installer component for one command.

    Environment variables
    ---------------------
    ``BOWERPY_CACHE_DIR``, ``BOWERPY_REGISTRY``, ``BOWERPY_INSTALL_DIR``,
    ``BOWERPY_MANIFEST``, ``BOWERPY_TIMEOUT`` and ``GITHUB_TOKEN``.
    Empty values are treated as unset.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOWERPY_",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    cache_dir: Path = Field(default_factory=default_cache_dir)
    """Directory holding downloaded package archives."""

    save_to_manifest: bool = False
    """Record a single installed package into the manifest."""

    registry_url: str = Field(
        default=DEFAULT_REGISTRY_URL, validation_alias="BOWERPY_REGISTRY",
    )
    install_dir: Path = Path(DEFAULT_INSTALL_DIR)
    manifest_path: Path = Field(
        default=Path(DEFAULT_MANIFEST), validation_alias="BOWERPY_MANIFEST",
    )
    github_token: str | None = Field(default=None, validation_alias="GITHUB_TOKEN")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    """Per-request HTTP timeout in seconds."""

    @field_validator("cache_dir")
    @classmethod
    def _expand_cache_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("registry_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def for_request(cls, request: InstallRequest) -> InstallConfig:
        """Load the configuration for *request* from the environment.

        ``save_to_manifest`` always comes from the request itself, so
        bulk installs never carry it.

        Raises
        ------
        ConfigError
            When an environment variable holds an invalid value.
        """
        try:
            return cls(save_to_manifest=request.save_to_manifest)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise ConfigError(
                f"Invalid configuration: {problems}",
                hint="Check the BOWERPY_* environment variables.",
            ) from exc
