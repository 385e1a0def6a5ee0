"""API client for the remote user collection."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from usermgr_cli.services.config_service import get_config_service

logger = logging.getLogger(__name__)


class APIClient:
    """HTTP client bound to the collection's base URL.

    Each request is a single attempt: non-2xx responses raise
    ``httpx.HTTPStatusError`` and transport failures raise
    ``httpx.RequestError``. Nothing is retried.
    """

    def __init__(self, base_url: str | None = None):
        if base_url is None:
            base_url = get_config_service().config.api.endpoint
        self.base_url = base_url.rstrip("/")
        self._client: httpx.AsyncClient | None = None

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers=self._get_headers(),
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> APIClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()

    def url_for(self, path: str = "") -> str:
        """Join *path* onto the base URL (``""`` is the collection itself)."""
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str = "",
        *,
        json: Any = None,
    ) -> httpx.Response:
        """Make one HTTP request and raise on an error status."""
        client = await self._get_client()
        url = self.url_for(path)
        logger.debug("%s %s", method, url)
        response = await client.request(method=method, url=url, json=json)
        response.raise_for_status()
        return response

    async def get(self, path: str = "") -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path)

    async def post(self, path: str = "", *, json: Any = None) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, json=json)

    async def put(self, path: str = "", *, json: Any = None) -> httpx.Response:
        """Make a PUT request."""
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str = "") -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path)


def get_client(base_url: str | None = None) -> APIClient:
    """Get an API client instance."""
    return APIClient(base_url)
