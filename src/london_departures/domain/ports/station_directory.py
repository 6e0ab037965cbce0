"""Station directory port."""

from typing import Protocol

from london_departures.domain.models.stop_point import StopPoint


class StationDirectory(Protocol):
    """Port for resolving station names to mode-specific stop identifiers."""

    async def search_stations(self, query: str, mode: str) -> list[StopPoint]:
        """Search stops by name, keeping only those serving the given mode."""
        ...
