"""Rail departure repository port."""

from typing import Protocol

from london_departures.domain.models.rail_service import RailDepartureBoard


class RailDepartureRepository(Protocol):
    """Port for retrieving rail departure boards by CRS code."""

    async def get_departure_board(self, crs: str, num_rows: int = 10) -> RailDepartureBoard:
        """Get the departure board for a rail station."""
        ...
