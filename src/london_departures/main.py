"""Main entry point for the London departures dashboard."""

import asyncio
import logging
import sys

import aiohttp

from london_departures.adapters.config import AppConfig, StationConfigurationLoader
from london_departures.adapters.display import (
    BoardFormatter,
    BoardPoller,
    BoardPollerConfiguration,
    BoardPollerServices,
    BoardsState,
    StateUpdater,
    TerminalDisplay,
    TextBoardRenderer,
)
from london_departures.application.services import StationResolver
from london_departures.domain.models import RAIL_MODE
from london_departures.wiring import create_board_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    try:
        station_configs = StationConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid station configuration: {e}")
        sys.exit(1)

    if not station_configs:
        logger.error("No stations configured.")
        logger.error("Please configure [[stations]] in your config.toml file.")
        logger.error("Or copy config.example.toml to config.toml and customize it.")
        sys.exit(1)

    logger.info(f"Loaded {len(station_configs)} station(s):")
    for station_config in station_configs:
        logger.info(f"  - {station_config.name}: {', '.join(station_config.modes)}")

    uses_rail = any(RAIL_MODE in c.modes for c in station_configs)
    if uses_rail and config.darwin_token is None:
        logger.warning(
            "Rail stations are configured but DARWIN_USERNAME/DARWIN_PASSWORD are not set; "
            "rail boards will be skipped"
        )

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        board_service = create_board_service(config, session)

        boards_state = BoardsState()
        renderer = TextBoardRenderer(BoardFormatter(config.timezone))
        display = TerminalDisplay(boards_state, renderer)
        poller = BoardPoller(
            BoardPollerServices(
                board_service=board_service,
                station_resolver=StationResolver(board_service),
                state_updater=StateUpdater(boards_state),
                display=display,
            ),
            BoardPollerConfiguration(
                station_configs=station_configs,
                refresh_interval_seconds=config.refresh_interval_seconds,
            ),
        )

        await poller.start()
        try:
            await asyncio.Event().wait()
        finally:
            logger.info("Shutting down...")
            await poller.stop()


def run() -> None:
    """Synchronous entry point for the dashboard command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
