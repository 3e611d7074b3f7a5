"""Status fetcher - issues GET requests against the server status endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class StatusFetchError(RuntimeError):
    """Raised when the status endpoint cannot be reached or answers non-2xx."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StatusFetcher:
    """Fetches raw status payloads over HTTP."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with the endpoint URL.

        Args:
            endpoint: Absolute URL of the status endpoint
            timeout: Request timeout in seconds, None to rely on the transport
            transport: Optional httpx transport (tests inject MockTransport)
            client: Optional pre-built client; it is not closed by aclose()
        """
        self.endpoint = endpoint
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            transport=transport,
            timeout=timeout,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @staticmethod
    def _describe(exc: Exception) -> str:
        return str(exc) or exc.__class__.__name__

    async def fetch(self) -> Any:
        """Fetch the decoded status payload.

        A body that is not JSON is returned as text; deciding whether it is
        usable is left to the parser.

        Raises:
            StatusFetchError: On network errors, timeouts and non-2xx responses.
        """
        try:
            response = await self._client.get(self.endpoint)
        except httpx.HTTPError as exc:
            logger.debug("Status request to %s failed: %r", self.endpoint, exc)
            raise StatusFetchError(self._describe(exc)) from exc

        if not response.is_success:
            message = (
                f"Request failed with status code {response.status_code}"
            )
            raise StatusFetchError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError:
            logger.debug("Status endpoint returned non-JSON body")
            return response.text
