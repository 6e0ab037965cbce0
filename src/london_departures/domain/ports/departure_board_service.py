"""Departure board service port."""

from typing import Protocol

from london_departures.domain.models.station_board import StationBoard
from london_departures.domain.models.stop_point import StopPoint


class DepartureBoardService(Protocol):
    """Port for fetching normalized boards regardless of the upstream."""

    async def get_departures(
        self, station: str, mode: str, rows: int | None = None
    ) -> StationBoard:
        """Get the board for one station identifier and mode."""
        ...

    async def get_mode_departures(self, mode: str, rows: int | None = None) -> StationBoard:
        """Get arrivals across every stop served by a light-rail mode."""
        ...

    async def search_stations(self, query: str, mode: str) -> list[StopPoint]:
        """Search stations serving a mode."""
        ...
