"""TfL arrivals repository adapter."""

import logging

from london_departures.adapters.tfl_api.arrival_parser import TflArrivalParser
from london_departures.adapters.tfl_api.constants import ALL_STOPS_ID, UNKNOWN_STATION_NAME
from london_departures.adapters.tfl_api.http_client import TflHttpClient, quote_path_segment
from london_departures.domain.models.light_rail_arrival import LightRailArrivalBoard
from london_departures.domain.ports.light_rail_departure_repository import (
    LightRailDepartureRepository,
)

logger = logging.getLogger(__name__)


class TflDepartureRepository(LightRailDepartureRepository):
    """Adapter for TfL arrival predictions."""

    def __init__(self, http_client: TflHttpClient) -> None:
        """Initialize with a TfL HTTP client.

        Args:
            http_client: Client used for arrivals requests.
        """
        self._http_client = http_client

    async def get_arrivals(self, stop_id: str, mode: str = "dlr") -> LightRailArrivalBoard:
        """Get arrivals at a stop.

        Args:
            stop_id: NaPTAN identifier of the stop.
            mode: Transport mode to filter arrivals by.

        Returns:
            Arrivals ordered by expected arrival time.
        """
        data = await self._http_client.get_json(
            f"/StopPoint/{quote_path_segment(stop_id)}/Arrivals", {"mode": mode}
        )
        arrivals = TflArrivalParser.parse_arrivals(data)
        if not arrivals:
            logger.debug(f"No {mode} arrivals returned for stop {stop_id}")

        station_name = arrivals[0].station_name if arrivals else ""
        return LightRailArrivalBoard(
            station_name=station_name or UNKNOWN_STATION_NAME,
            stop_id=stop_id,
            arrivals=arrivals,
        )

    async def get_mode_arrivals(self, mode: str = "dlr") -> LightRailArrivalBoard:
        """Get arrivals at every stop served by a mode.

        Args:
            mode: Transport mode, e.g. "dlr".

        Returns:
            Arrivals ordered by expected arrival time, under a synthetic "All ... Stations" board.
        """
        data = await self._http_client.get_json(f"/Mode/{quote_path_segment(mode)}/Arrivals")
        return LightRailArrivalBoard(
            station_name=f"All {mode.upper()} Stations",
            stop_id=ALL_STOPS_ID,
            arrivals=TflArrivalParser.parse_arrivals(data),
        )
