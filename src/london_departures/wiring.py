"""Construction of the board service from configuration."""

import aiohttp

from london_departures.adapters.config import AppConfig
from london_departures.adapters.darwin_api import DarwinDepartureRepository
from london_departures.adapters.tfl_api import (
    TflDepartureRepository,
    TflHttpClient,
    TflStationDirectory,
)
from london_departures.application.services import BoardService, DepartureNormalizer


def create_board_service(config: AppConfig, session: aiohttp.ClientSession) -> BoardService:
    """Build a board service backed by Darwin and TfL sharing one HTTP session."""
    rail_repository = DarwinDepartureRepository(
        session=session,
        token=config.darwin_token,
        url=config.darwin_url,
        timeout_seconds=config.request_timeout_seconds,
    )
    tfl_client = TflHttpClient(
        session=session,
        app_id=config.tfl_app_id,
        app_key=config.tfl_app_key,
        base_url=config.tfl_base_url,
        timeout_seconds=config.request_timeout_seconds,
    )
    return BoardService(
        rail_repository=rail_repository,
        light_rail_repository=TflDepartureRepository(tfl_client),
        station_directory=TflStationDirectory(tfl_client),
        normalizer=DepartureNormalizer(config.timezone),
        board_rows=config.board_rows,
        rail_fetch_rows=config.rail_fetch_rows,
    )
