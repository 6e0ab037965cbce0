"""Darwin departure repository adapter using the OpenLDBWS SOAP API.

API Documentation: https://lite.realtime.nationalrail.co.uk/OpenLDBWS/
"""

import logging

import aiohttp

from london_departures.adapters.api_request_logger import log_api_request
from london_departures.adapters.darwin_api.constants import (
    DARWIN_URL,
    DEFAULT_HEADERS,
    SERVICE_NAME,
)
from london_departures.adapters.darwin_api.response_parser import DarwinResponseParser
from london_departures.adapters.darwin_api.soap_envelope import build_departure_board_request
from london_departures.domain.errors import MissingCredentialError, UpstreamUnavailableError
from london_departures.domain.models.rail_service import RailDepartureBoard
from london_departures.domain.ports.rail_departure_repository import RailDepartureRepository

logger = logging.getLogger(__name__)


class DarwinDepartureRepository(RailDepartureRepository):
    """Adapter for Darwin departure boards."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        token: str | None = None,
        url: str = DARWIN_URL,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with an aiohttp session and a Darwin access token.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            token: Darwin access token ("username:password"); None if not configured.
            url: SOAP endpoint URL.
            timeout_seconds: Total timeout for a single request.
        """
        self._session = session
        self._token = token
        self._url = url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def get_departure_board(self, crs: str, num_rows: int = 10) -> RailDepartureBoard:
        """Get the departure board for a rail station.

        Args:
            crs: Three-letter CRS code (case-insensitive).
            num_rows: Maximum number of services to request.

        Returns:
            Parsed departure board.

        Raises:
            MissingCredentialError: If no access token is configured (raised before any I/O).
            UpstreamUnavailableError: On a non-2xx response or transport failure.
        """
        if not self._token:
            raise MissingCredentialError(SERVICE_NAME, "set DARWIN_USERNAME and DARWIN_PASSWORD")
        if not self._session:
            raise RuntimeError("Darwin API requires an aiohttp session")

        crs_code = crs.strip().upper()
        envelope = build_departure_board_request(self._token, crs_code, num_rows)
        log_api_request("POST", self._url, headers=DEFAULT_HEADERS, payload=envelope)

        try:
            async with self._session.post(
                self._url,
                data=envelope.encode("utf-8"),
                headers=DEFAULT_HEADERS,
                timeout=self._timeout,
            ) as response:
                if not 200 <= response.status < 300:
                    response_text = await response.text()
                    logger.warning(
                        f"Darwin returned status {response.status} for {crs_code}: "
                        f"{response_text[:200]}"
                    )
                    raise UpstreamUnavailableError(
                        SERVICE_NAME, response.status, response.reason or ""
                    )
                xml_text = await response.text()
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"Error fetching Darwin board for {crs_code}: {e!r}")
            raise UpstreamUnavailableError(SERVICE_NAME, reason=str(e) or type(e).__name__) from e

        return DarwinResponseParser.parse(xml_text, crs_code)
