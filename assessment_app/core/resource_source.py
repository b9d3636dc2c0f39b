"""Sources for the tabular resources the assessment is configured from.

The configuration and question files are treated as opaque text. A source
either reads them from a local data directory or fetches them over HTTP from
the bundled resource server (or any static file host exposing the same
``/data/<name>`` layout).
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

import httpx

from assessment_app.constants.network_constants import (
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    RESOURCE_ROUTE_PREFIX,
)

logger = logging.getLogger(__name__)


class ResourceFetchError(Exception):
    """Raised when a resource cannot be fetched."""


class ResourceSource:
    """Interface for anything that can hand out resource text by name."""

    def read_text(self, name: str) -> str:
        raise NotImplementedError

    def describe(self) -> str:
        return type(self).__name__


class DirectoryResourceSource(ResourceSource):
    """Reads resources from files inside a directory."""

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def read_text(self, name: str) -> str:
        path = self._root / name
        try:
            # utf-8-sig drops the BOM spreadsheet exports like to prepend
            return path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as exc:
            raise ResourceFetchError(f"Resource '{name}' was not found.") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceFetchError(f"Failed to read resource '{name}': {exc}") from exc

    def describe(self) -> str:
        return str(self._root)


class HttpResourceSource(ResourceSource):
    """Fetches resources from ``{base_url}/data/{name}``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    def resource_url(self, name: str) -> str:
        return f"{self._base_url}{RESOURCE_ROUTE_PREFIX}/{quote(name)}"

    def read_text(self, name: str) -> str:
        url = self.resource_url(name)
        logger.debug("Fetching %s", url)
        try:
            if self._client is not None:
                response = self._client.get(url, timeout=self._timeout)
            else:
                response = httpx.get(url, timeout=self._timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ResourceFetchError(f"Failed to fetch '{name}': {exc}") from exc

        if not response.is_success:
            raise ResourceFetchError(
                f"Failed to fetch '{name}': {response.status_code} {response.reason_phrase}"
            )
        return response.text.lstrip("\ufeff")

    def describe(self) -> str:
        return self._base_url
