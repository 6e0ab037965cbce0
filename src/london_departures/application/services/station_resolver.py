"""Resolution of configured station names to mode-specific stop identifiers."""

import asyncio
import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from london_departures.domain.models.station_config import RAIL_MODE, StationConfig

if TYPE_CHECKING:
    from london_departures.domain.ports import StationDirectory

logger = logging.getLogger(__name__)


class StationResolver:
    """Fills in TfL stop identifiers for configured stations."""

    def __init__(self, station_directory: "StationDirectory") -> None:
        """Initialize with the station directory used for lookups."""
        self._station_directory = station_directory

    @staticmethod
    def unresolved_modes(config: StationConfig) -> list[str]:
        """Light-rail modes of a station that still lack a stop identifier."""
        return [mode for mode in config.light_rail_modes if mode not in config.stop_ids]

    async def resolve(self, config: StationConfig) -> StationConfig:
        """Look up every unresolved light-rail mode, taking the first search result.

        Lookup failures leave the mode unresolved; the station is returned
        either way. Rail modes are never looked up (the CRS is configured).
        """
        if RAIL_MODE in config.modes and not config.crs:
            logger.debug(f"Station '{config.name}' has no CRS code; its rail board is skipped")

        missing = self.unresolved_modes(config)
        if not missing:
            return config

        stop_ids = dict(config.stop_ids)
        for mode in missing:
            stop_id = await self._lookup(config.name, mode)
            if stop_id:
                stop_ids[mode] = stop_id

        return replace(config, stop_ids=stop_ids)

    async def resolve_all(self, configs: list[StationConfig]) -> list[StationConfig]:
        """Resolve all stations concurrently, preserving configuration order."""
        return list(await asyncio.gather(*(self.resolve(config) for config in configs)))

    async def _lookup(self, name: str, mode: str) -> str | None:
        try:
            results = await self._station_directory.search_stations(name, mode)
        except Exception as e:
            logger.error(f"Error fetching ID for {name} ({mode}): {e}")
            return None

        if not results or not results[0].id:
            logger.warning(f"Could not find ID for station: {name} ({mode})")
            return None

        logger.info(f"Resolved {name} ({mode}) to {results[0].id} ({results[0].name})")
        return results[0].id
