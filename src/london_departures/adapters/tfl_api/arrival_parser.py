"""Parser for TfL arrival predictions."""

import logging
from datetime import UTC, datetime
from typing import Any

from london_departures.domain.models.light_rail_arrival import LightRailArrival
from london_departures.domain.timestamps import parse_iso_timestamp

logger = logging.getLogger(__name__)

# Unparseable arrival times sort after every real one
_LATEST = datetime.max.replace(tzinfo=UTC)


class TflArrivalParser:
    """Parses TfL /Arrivals responses into LightRailArrival objects."""

    @staticmethod
    def parse_arrivals(data: Any) -> list[LightRailArrival]:
        """Parse an arrivals response, ordered by expected arrival.

        Args:
            data: Decoded JSON; anything other than a list yields no arrivals.

        Returns:
            List of arrivals sorted ascending by expected arrival time.
        """
        if not isinstance(data, list):
            if data is not None:
                logger.warning(f"Unexpected TfL arrivals payload type: {type(data).__name__}")
            return []

        arrivals = []
        for item in data:
            arrival = TflArrivalParser._parse_arrival(item)
            if arrival:
                arrivals.append(arrival)

        arrivals.sort(key=TflArrivalParser.sort_key)
        return arrivals

    @staticmethod
    def sort_key(arrival: LightRailArrival) -> datetime:
        return parse_iso_timestamp(arrival.expected_arrival) or _LATEST

    @staticmethod
    def _parse_arrival(item: Any) -> LightRailArrival | None:
        """Parse a single arrival record, skipping anything that is not an object."""
        if not isinstance(item, dict):
            return None

        return LightRailArrival(
            line_name=TflArrivalParser._text(item.get("lineName")),
            destination_name=TflArrivalParser._text(
                item.get("destinationName") or item.get("towards")
            ),
            expected_arrival=TflArrivalParser._text(item.get("expectedArrival")),
            time_to_station=TflArrivalParser._parse_seconds(item.get("timeToStation")),
            platform_name=TflArrivalParser._text(item.get("platformName")),
            direction=TflArrivalParser._text(item.get("direction")),
            station_name=TflArrivalParser._text(item.get("stationName")),
        )

    @staticmethod
    def _text(value: Any) -> str:
        return str(value).strip() if value is not None else ""

    @staticmethod
    def _parse_seconds(value: Any) -> int:
        """Coerce timeToStation to whole seconds, defaulting to 0."""
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 0
