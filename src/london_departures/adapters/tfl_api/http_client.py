"""HTTP client for TfL Unified API requests."""

import logging
from typing import Any
from urllib.parse import quote

import aiohttp

from london_departures.adapters.api_request_logger import log_api_request
from london_departures.adapters.tfl_api.constants import (
    DEFAULT_HEADERS,
    SERVICE_NAME,
    TFL_BASE_URL,
)
from london_departures.domain.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)


def quote_path_segment(value: str) -> str:
    """Quote a value for use as a single URL path segment."""
    return quote(value, safe="")


class TflHttpClient:
    """HTTP client for TfL API requests."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        app_id: str | None = None,
        app_key: str | None = None,
        base_url: str = TFL_BASE_URL,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with an aiohttp session and optional TfL credentials.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            app_id: TfL application id; omitted from requests when not set.
            app_key: TfL application key; omitted from requests when not set.
            base_url: TfL API base URL.
            timeout_seconds: Total timeout for a single request.
        """
        self._session = session
        self._app_id = app_id
        self._app_key = app_key
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _auth_params(self) -> dict[str, str]:
        """Build credential query parameters."""
        params: dict[str, str] = {}
        if self._app_id:
            params["app_id"] = self._app_id
        if self._app_key:
            params["app_key"] = self._app_key
        return params

    async def _log_error_response(self, response: aiohttp.ClientResponse, url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"TfL API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )

    async def get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET a TfL endpoint and return its decoded JSON body.

        Args:
            path: Path below the base URL, starting with "/" and already quoted.
            params: Query parameters (credentials are added automatically).

        Returns:
            Decoded JSON, or None if the body is not valid JSON.

        Raises:
            UpstreamUnavailableError: On a non-2xx response or transport failure.
        """
        if not self._session:
            raise RuntimeError("TfL API requires an aiohttp session")

        url = f"{self._base_url}{path}"
        query = {**(params or {}), **self._auth_params()}
        log_api_request("GET", url, params=query, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, params=query, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if not 200 <= response.status < 300:
                    await self._log_error_response(response, url)
                    raise UpstreamUnavailableError(
                        SERVICE_NAME, response.status, response.reason or ""
                    )
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    logger.warning(f"TfL API returned invalid JSON for {url}: {e}")
                    return None
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"Error requesting TfL API {url}: {e!r}")
            raise UpstreamUnavailableError(SERVICE_NAME, reason=str(e) or type(e).__name__) from e
