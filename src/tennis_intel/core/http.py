"""
Shared HTTP client infrastructure for upstream API integrations.

Provides BaseApiClient with lifecycle management and error handling.
Requests are made once: there is no retry, backoff or rate limiting at
this layer, and a failure propagates straight to the caller.

Usage:
    class MyClient(BaseApiClient):
        BASE_URL = "https://api.example.com"

        async def get_data(self) -> dict:
            return await self._get("/data")
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ExternalAPIError(Exception):
    """Base exception for external API errors."""

    def __init__(
        self,
        message: str,
        code: str = "EXTERNAL_API_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class UpstreamError(ExternalAPIError):
    """The data provider answered outside 2xx, or could not be reached."""

    def __init__(self, message: str, status_code: int = 502, url: str | None = None):
        super().__init__(message, code="UPSTREAM_ERROR", status_code=status_code)
        self.url = url


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------

class BaseApiClient:
    """
    Async HTTP client base.

    Subclasses set BASE_URL and add provider-specific methods.
    Use as an async context manager:

        async with MyClient() as client:
            data = await client._get("/endpoint")

    Or with lazy initialisation (for long-lived services):

        client = MyClient()
        data = await client._get("/endpoint")  # client auto-creates on first use
        await client.close()
    """

    BASE_URL: str = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._default_headers = headers or {}
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # -- Lifecycle -----------------------------------------------------------

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._default_headers,
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=self._follow_redirects,
            transport=self._transport,
        )

    async def __aenter__(self) -> "BaseApiClient":
        self._client = self._build_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        """Return the HTTP client, lazily creating it if needed."""
        if self._client is None or self._client.is_closed:
            self._client = self._build_client()
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    # -- HTTP methods --------------------------------------------------------

    async def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make a single GET request and parse the JSON body.

        Raises:
            UpstreamError: On a non-2xx status, a transport failure or a non-JSON body
        """
        try:
            response = await self.client.get(path, params=params)
        except httpx.RequestError as e:
            logger.warning(f"Request to {path} failed: {e}")
            raise UpstreamError(f"Request failed: {e}", url=path) from e

        if not response.is_success:
            logger.warning(f"Upstream returned HTTP {response.status_code} for {path}")
            raise UpstreamError(
                f"Upstream API error: {response.status_code}",
                status_code=response.status_code,
                url=str(response.request.url),
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"Upstream returned invalid JSON: {e}",
                status_code=502,
                url=str(response.request.url),
            ) from e
