"""HTTP client helper."""

from collections.abc import Callable
from typing import Any, Dict, Optional

import aiohttp

from ..core.exceptions import RemoteFetchError

# Builds the exception raised for an error response from (status, body).
ErrorFactory = Callable[[int, Any], Exception]


def default_error_factory(status: int, body: Any) -> Exception:
    return RemoteFetchError(f"HTTP {status}", status_code=status)


class HTTPClient:
    """Async HTTP client wrapper.

    Error responses (status >= 400) are turned into exceptions by
    ``error_factory`` so connectors can map store-specific error bodies.
    Connection-level aiohttp errors propagate unchanged.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        error_factory: ErrorFactory = default_error_factory,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._error_factory = error_factory
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET request."""
        async with self.session.get(self._url(url), params=params, headers=headers) as response:
            return await self._handle(response)

    async def post(
        self,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """POST request with a JSON body."""
        async with self.session.post(self._url(url), json=json, headers=headers) as response:
            return await self._handle(response)

    async def _handle(self, response: aiohttp.ClientResponse) -> Any:
        if response.status >= 400:
            try:
                body: Any = await response.json(content_type=None)
            except ValueError:
                body = await response.text()
            raise self._error_factory(response.status, body)
        return await response.json(content_type=None)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
