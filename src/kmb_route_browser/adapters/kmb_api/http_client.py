"""HTTP client for KMB open-data API requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from kmb_route_browser.adapters.api_request_logger import log_api_request, log_api_response
from kmb_route_browser.adapters.config.app_config import KMB_API_BASE_URL
from kmb_route_browser.adapters.kmb_api.constants import DEFAULT_HEADERS
from kmb_route_browser.domain.errors import NetworkFailure, ParseFailure
from kmb_route_browser.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class KmbHttpClient:
    """Fetches ``{"data": ...}`` envelopes from the KMB API."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = KMB_API_BASE_URL,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with a shared aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: API base URL ending with a slash.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._base_url = base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def url_for(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def get_data(self, path: str) -> Any:
        """GET an endpoint and return the ``data`` member of its envelope.

        Args:
            path: Endpoint path relative to the base URL.

        Returns:
            The unwrapped ``data`` value.

        Raises:
            NetworkFailure: On transport errors, timeouts and non-200 responses.
            ParseFailure: If the body is not JSON or has no ``data`` member.
        """
        url = self.url_for(path)
        log_api_request("GET", url, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    reason = await self._error_reason(response)
                    raise NetworkFailure(
                        ErrorDetails(status_code=response.status, url=url, reason=reason)
                    )
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkFailure(
                ErrorDetails(url=url, reason=f"{type(e).__name__}: {e}".rstrip(": "))
            ) from e
        except ValueError as e:
            raise ParseFailure(ErrorDetails(url=url, reason=f"Invalid JSON: {e}")) from e

        log_api_response(url, 200, payload)
        return self._unwrap_envelope(payload, url)

    @staticmethod
    def _unwrap_envelope(payload: Any, url: str) -> Any:
        if not isinstance(payload, dict) or "data" not in payload:
            raise ParseFailure(
                ErrorDetails(status_code=200, url=url, reason="Response has no 'data' member")
            )
        return payload["data"]

    @staticmethod
    async def _error_reason(response: "ClientResponse") -> str:
        """Build a short error description from a non-200 response."""
        error_text = await response.text()
        error_body = error_text[:200] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        return f"KMB API returned status {response.status}: {error_body} (Content-Type: {content_type})"
