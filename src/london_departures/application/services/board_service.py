"""Board service: the query surface used by the poller and the CLI."""

import logging
from typing import TYPE_CHECKING

from london_departures.domain.models.station_board import StationBoard
from london_departures.domain.models.station_config import RAIL_MODE
from london_departures.domain.models.stop_point import StopPoint

if TYPE_CHECKING:
    from london_departures.application.services.departure_normalizer import (
        DepartureNormalizer,
    )
    from london_departures.domain.ports import (
        LightRailDepartureRepository,
        RailDepartureRepository,
        StationDirectory,
    )

logger = logging.getLogger(__name__)


class BoardService:
    """Fetches a board from the right upstream for a mode and normalizes it."""

    def __init__(
        self,
        rail_repository: "RailDepartureRepository",
        light_rail_repository: "LightRailDepartureRepository",
        station_directory: "StationDirectory",
        normalizer: "DepartureNormalizer",
        board_rows: int = 8,
        rail_fetch_rows: int = 10,
    ) -> None:
        """Initialize with repositories and display limits.

        Args:
            rail_repository: Darwin-backed rail repository.
            light_rail_repository: TfL-backed arrivals repository.
            station_directory: Directory used for station searches.
            normalizer: Normalizer producing the unified departure shape.
            board_rows: Default number of departures per board.
            rail_fetch_rows: Default number of services requested from Darwin.
        """
        self._rail_repository = rail_repository
        self._light_rail_repository = light_rail_repository
        self._station_directory = station_directory
        self._normalizer = normalizer
        self._board_rows = board_rows
        self._rail_fetch_rows = rail_fetch_rows

    async def get_departures(
        self, station: str, mode: str, rows: int | None = None
    ) -> StationBoard:
        """Get the board for one station and mode.

        Args:
            station: CRS code for rail, TfL stop identifier for any other mode.
            mode: Transport mode ("rail", "dlr", ...).
            rows: Number of departures to return; defaults to the configured board size.

        Returns:
            Normalized board named after the upstream station name.

        Raises:
            MissingCredentialError: For rail when Darwin credentials are not configured.
            UpstreamUnavailableError: When the upstream call fails.
        """
        if mode == RAIL_MODE:
            num_rows = rows or self._rail_fetch_rows
            rail_board = await self._rail_repository.get_departure_board(station, num_rows)
            return self._normalizer.normalize_rail_board(rail_board, rows or self._board_rows)

        arrivals_board = await self._light_rail_repository.get_arrivals(station, mode)
        return self._normalizer.normalize_light_rail_board(
            arrivals_board, mode, rows or self._board_rows
        )

    async def get_mode_departures(self, mode: str, rows: int | None = None) -> StationBoard:
        """Get upcoming arrivals across every stop served by a light-rail mode."""
        arrivals_board = await self._light_rail_repository.get_mode_arrivals(mode)
        return self._normalizer.normalize_light_rail_board(
            arrivals_board, mode, rows or self._board_rows
        )

    async def search_stations(self, query: str, mode: str) -> list[StopPoint]:
        """Search stations serving a mode; the first result is the best match."""
        if mode == RAIL_MODE:
            logger.warning("Rail stations are configured by CRS code; no directory search exists")
            return []
        return await self._station_directory.search_stations(query, mode)
