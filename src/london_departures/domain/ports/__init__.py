"""Ports (interfaces) for the ports-and-adapters architecture."""

from london_departures.domain.ports.departure_board_service import DepartureBoardService
from london_departures.domain.ports.light_rail_departure_repository import (
    LightRailDepartureRepository,
)
from london_departures.domain.ports.rail_departure_repository import RailDepartureRepository
from london_departures.domain.ports.station_directory import StationDirectory

__all__ = [
    "DepartureBoardService",
    "LightRailDepartureRepository",
    "RailDepartureRepository",
    "StationDirectory",
]
