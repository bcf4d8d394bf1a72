"""
HTTP Client for the Console.

Provides an async HTTP client for the API. The base URL is resolved once
at startup and passed in explicitly.
"""

from typing import Any

import httpx

from modules.core.exceptions import FetchFailure
from modules.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0
DASHBOARD_PATH = "dashboard"


class APIClient:
    """
    HTTP client for API communication.

    Features:
    - Explicit base URL, no ambient configuration
    - Structured logging of requests/responses
    - Transport errors and error statuses mapped to FetchFailure

    Usage:
        client = APIClient("http://localhost:1664/api/v1/")
        body = await client.get_dashboard()
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: API base URL, e.g. http://localhost:1664/api/v1/
            timeout: Request timeout in seconds. Defaults to 30.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: Path relative to the base URL (e.g., dashboard)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response with a success status

        Raises:
            FetchFailure: On transport error or non-2xx status
        """
        client = await self._get_client()

        log_with_source(logger, "api", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(logger, "api", "error", "API request failed", method=method, path=path, error=str(e))
            raise FetchFailure(f"Failed to reach {self.base_url}{path}: {e}") from e

        log_with_source(
            logger,
            "api",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if not response.is_success:
            raise FetchFailure(
                f"{method} {self.base_url}{path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def get_dashboard(self) -> bytes:
        """Fetch the raw dashboard collection."""
        response = await self.get(DASHBOARD_PATH)
        return response.content
