"""Domain models for London departure boards."""

from london_departures.domain.models.departure import Departure
from london_departures.domain.models.error_details import ErrorDetails
from london_departures.domain.models.light_rail_arrival import (
    LightRailArrival,
    LightRailArrivalBoard,
)
from london_departures.domain.models.rail_service import (
    RailDepartureBoard,
    RailDestination,
    RailService,
)
from london_departures.domain.models.station_board import StationBoard
from london_departures.domain.models.station_config import RAIL_MODE, StationConfig
from london_departures.domain.models.stop_point import Coordinates, StopPoint

__all__ = [
    "RAIL_MODE",
    "Coordinates",
    "Departure",
    "ErrorDetails",
    "LightRailArrival",
    "LightRailArrivalBoard",
    "RailDepartureBoard",
    "RailDestination",
    "RailService",
    "StationBoard",
    "StationConfig",
    "StopPoint",
]
