"""Protocol for resolving configured stations to stop identifiers."""

from typing import Protocol

from london_departures.domain.models.station_config import StationConfig


class StationResolverProtocol(Protocol):
    """Protocol for filling in missing light-rail stop identifiers."""

    def unresolved_modes(self, config: StationConfig) -> list[str]:
        """Light-rail modes of a station that still lack a stop identifier."""
        ...

    async def resolve_all(self, configs: list[StationConfig]) -> list[StationConfig]:
        """Resolve all stations, preserving order."""
        ...
