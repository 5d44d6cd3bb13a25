"""HTTP client for the Bower registry and GitHub-hosted package sources.

This module is the **only** place in the codebase that imports
``requests``.  All requests exceptions are caught here and re-raised as
typed :class:`~bowerpy.exceptions.BowerpyError` subclasses — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from bowerpy.exceptions import EnvironmentError, NetworkError, PackageNotFoundError

logger = logging.getLogger(__name__)

GITHUB_API_URL: str = "https://api.github.com"

_GITHUB_REPO_RE = re.compile(
    r"github\.com[:/](?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$",
)

_CHUNK_SIZE: int = 64 * 1024


def _load_requests() -> Any:
    try:
        import requests
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "requests is not installed. Install with: pip install requests",
        ) from exc
    return requests


def github_repo(repo_url: str) -> tuple[str, str]:
    """Extract ``(owner, repo)`` from a GitHub clone or web URL.

    Raises
    ------
    PackageNotFoundError
        When *repo_url* does not point at GitHub.
    """
    match = _GITHUB_REPO_RE.search(repo_url.strip())
    if match is None:
        raise PackageNotFoundError(
            f"Unsupported package source: {repo_url}",
            hint="Only GitHub-hosted packages can be installed.",
        )
    return match.group("owner"), match.group("repo")


class RegistryClient:
    """Thin wrapper around a :class:`requests.Session`.

    Parameters
    ----------
    registry_url:
        Base URL of the Bower registry.
    github_token:
        Optional token sent to the GitHub API to lift rate limits.
    timeout:
        Per-request timeout in seconds.
    session:
        Pre-built session, mainly for tests.  A new one is created when
        omitted.
    """

    def __init__(
        self,
        registry_url: str,
        *,
        github_token: str | None = None,
        timeout: float = 30.0,
        session: Any | None = None,
    ) -> None:
        self._registry_url = registry_url.rstrip("/")
        self._timeout = timeout
        if session is None:
            session = _load_requests().Session()
        self._session: Any = session
        self._github_headers: dict[str, str] = {
            "Accept": "application/vnd.github+json",
        }
        if github_token:
            self._github_headers["Authorization"] = f"Bearer {github_token}"

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def lookup(self, name: str) -> str:
        """Resolve a registry package *name* to its source repository URL."""
        if not name:
            raise PackageNotFoundError("Package name must not be empty.")

        url = f"{self._registry_url}/packages/{name}"
        response = self._get(url)
        if response.status_code == 404:
            raise PackageNotFoundError(
                f"Package {name} not found",
                hint="Check the package name on the Bower registry.",
            )
        self._raise_for_status(response, url)

        payload = self._json(response, url)
        source = payload.get("url") if isinstance(payload, dict) else None
        if not isinstance(source, str) or not source:
            raise NetworkError(f"Registry returned no source URL for {name}")
        logger.debug("Resolved %s to %s", name, source)
        return source

    # ------------------------------------------------------------------
    # GitHub
    # ------------------------------------------------------------------

    def list_tags(self, repo_url: str) -> tuple[str, ...]:
        """Return every tag name of the GitHub repository, newest first."""
        owner, repo = github_repo(repo_url)
        url: str | None = f"{GITHUB_API_URL}/repos/{owner}/{repo}/tags?per_page=100"
        tags: list[str] = []
        while url:
            response = self._get(url, headers=self._github_headers)
            if response.status_code == 404:
                raise PackageNotFoundError(f"Repository {owner}/{repo} not found")
            self._raise_for_status(response, url)
            payload = self._json(response, url)
            if not isinstance(payload, list):
                raise NetworkError(f"Unexpected tag listing from {url}")
            tags.extend(
                str(entry["name"])
                for entry in payload
                if isinstance(entry, dict) and entry.get("name")
            )
            url = self._next_page(response)
        return tuple(tags)

    def download_archive(self, repo_url: str, tag: str, dest: Path) -> Path:
        """Stream the zipball of *tag* into *dest* and return *dest*."""
        owner, repo = github_repo(repo_url)
        url = f"{GITHUB_API_URL}/repos/{owner}/{repo}/zipball/{tag}"
        partial = dest.with_name(dest.name + ".part")
        requests = _load_requests()
        with self._get(url, headers=self._github_headers, stream=True) as response:
            self._raise_for_status(response, url)
            dest.parent.mkdir(parents=True, exist_ok=True)
            try:
                with partial.open("wb") as fh:
                    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                        if chunk:
                            fh.write(chunk)
            except requests.RequestException as exc:
                partial.unlink(missing_ok=True)
                raise NetworkError(f"Download of {owner}/{repo}#{tag} failed: {exc}") from exc
        partial.replace(dest)
        logger.debug("Downloaded %s to %s", url, dest)
        return dest

    # ------------------------------------------------------------------
    # Transport helpers
    # ------------------------------------------------------------------

    def _get(self, url: str, **kwargs: Any) -> Any:
        requests = _load_requests()
        logger.debug("GET %s", url)
        try:
            return self._session.get(url, timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            raise NetworkError(
                f"Cannot reach {url}: {exc}",
                hint="Check your network connection or proxy settings.",
            ) from exc

    @staticmethod
    def _raise_for_status(response: Any, url: str) -> None:
        if response.status_code >= 400:
            raise NetworkError(f"{url} answered HTTP {response.status_code}")

    @staticmethod
    def _next_page(response: Any) -> str | None:
        """Follow GitHub's ``Link: <...>; rel="next"`` pagination."""
        links = getattr(response, "links", None)
        if not isinstance(links, dict):
            return None
        nxt = links.get("next")
        if isinstance(nxt, dict) and isinstance(nxt.get("url"), str):
            return nxt["url"]
        return None

    @staticmethod
    def _json(response: Any, url: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON from {url}") from exc
