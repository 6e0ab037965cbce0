"""Normalization of upstream departure records into the unified display shape."""

import logging
from zoneinfo import ZoneInfo

from london_departures.domain.models.departure import Departure
from london_departures.domain.models.light_rail_arrival import (
    LightRailArrival,
    LightRailArrivalBoard,
)
from london_departures.domain.models.rail_service import RailDepartureBoard, RailService
from london_departures.domain.models.station_board import StationBoard
from london_departures.domain.models.station_config import RAIL_MODE
from london_departures.domain.timestamps import parse_iso_timestamp

logger = logging.getLogger(__name__)

DUE_THRESHOLD_SECONDS = 60
UNKNOWN_DESTINATION = "Unknown"
UNKNOWN_TIME = "--:--"


class DepartureNormalizer:
    """Maps Darwin services and TfL arrivals onto Departure records."""

    def __init__(self, timezone: str = "Europe/London") -> None:
        """Initialize the normalizer.

        Args:
            timezone: IANA timezone used to display light-rail arrival times.
        """
        self._timezone = ZoneInfo(timezone)

    @staticmethod
    def status_bucket(seconds: int) -> str:
        """Bucket a time-to-station into "Due" or whole minutes ("N min")."""
        if seconds < DUE_THRESHOLD_SECONDS:
            return "Due"
        return f"{seconds // 60} min"

    def format_local_time(self, timestamp: str) -> str:
        """Format an ISO timestamp as local HH:MM, or "--:--" if unparseable."""
        parsed = parse_iso_timestamp(timestamp)
        if parsed is None:
            logger.debug(f"Unparseable arrival timestamp: {timestamp!r}")
            return UNKNOWN_TIME
        return parsed.astimezone(self._timezone).strftime("%H:%M")

    def from_light_rail(self, arrival: LightRailArrival, mode: str) -> Departure:
        """Normalize a TfL arrival; empty platforms fall back to the mode code."""
        return Departure(
            time=self.format_local_time(arrival.expected_arrival),
            destination=arrival.destination_name,
            platform=arrival.platform_name or mode.upper(),
            status=self.status_bucket(arrival.time_to_station),
            line=arrival.line_name or None,
        )

    @staticmethod
    def from_rail(service: RailService) -> Departure:
        """Normalize a Darwin service; times and status are upstream text, verbatim."""
        destination = (
            service.destinations[0].location_name if service.destinations else UNKNOWN_DESTINATION
        )
        return Departure(
            time=service.std,
            destination=destination or UNKNOWN_DESTINATION,
            platform=service.platform,
            status=service.etd,
            line=service.operator or None,
        )

    def normalize_light_rail_board(
        self, board: LightRailArrivalBoard, mode: str, rows: int
    ) -> StationBoard:
        """Normalize an arrivals board, keeping arrival order and the first ``rows`` entries."""
        return StationBoard(
            station_name=board.station_name,
            mode=mode,
            departures=[
                self.from_light_rail(arrival, mode) for arrival in board.arrivals[: max(rows, 0)]
            ],
        )

    def normalize_rail_board(self, board: RailDepartureBoard, rows: int) -> StationBoard:
        """Normalize a Darwin board, keeping service order and the first ``rows`` entries."""
        return StationBoard(
            station_name=board.location_name,
            mode=RAIL_MODE,
            departures=[self.from_rail(service) for service in board.services[: max(rows, 0)]],
        )
