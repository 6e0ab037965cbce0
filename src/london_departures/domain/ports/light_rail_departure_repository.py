"""Light-rail departure repository port."""

from typing import Protocol

from london_departures.domain.models.light_rail_arrival import LightRailArrivalBoard


class LightRailDepartureRepository(Protocol):
    """Port for retrieving predicted arrivals at light-rail stops."""

    async def get_arrivals(self, stop_id: str, mode: str = "dlr") -> LightRailArrivalBoard:
        """Get arrivals at one stop, ordered by expected arrival."""
        ...

    async def get_mode_arrivals(self, mode: str = "dlr") -> LightRailArrivalBoard:
        """Get arrivals across every stop served by a mode."""
        ...
