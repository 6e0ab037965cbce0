"""Board poller: fetches every configured station and mode on a fixed interval."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from london_departures.domain.contracts.board_poller import BoardPollerProtocol
from london_departures.domain.errors import MissingCredentialError, UpstreamUnavailableError
from london_departures.domain.models.error_details import ErrorDetails

if TYPE_CHECKING:
    from london_departures.domain.contracts.display_publisher import DisplayPublisherProtocol
    from london_departures.domain.contracts.state_updater import StateUpdaterProtocol
    from london_departures.domain.contracts.station_resolver import StationResolverProtocol
    from london_departures.domain.models.station_board import StationBoard
    from london_departures.domain.models.station_config import StationConfig
    from london_departures.domain.ports import DepartureBoardService

logger = logging.getLogger(__name__)

NO_STATIONS_ERROR = "No stations configured"
CYCLE_FAILED_ERROR = "Failed to fetch departure information"


def _extract_error_details(error: Exception) -> ErrorDetails:
    """Describe a failed upstream call for logging."""
    if isinstance(error, MissingCredentialError):
        return ErrorDetails(service=error.service, reason="Missing credentials")
    if not isinstance(error, UpstreamUnavailableError):
        return ErrorDetails(reason=f"Unexpected error ({type(error).__name__})")

    status_code = error.status_code
    if status_code == 401 or status_code == 403:
        reason = "Credentials rejected"
    elif status_code == 429:
        reason = "Rate limit exceeded"
    elif status_code == 502:
        reason = "Bad gateway (server error)"
    elif status_code == 503:
        reason = "Service unavailable"
    elif status_code == 504:
        reason = "Gateway timeout"
    elif status_code is not None:
        reason = f"HTTP {status_code}"
    else:
        reason = "Upstream unreachable"

    return ErrorDetails(service=error.service, status_code=status_code, reason=reason)


@dataclass(frozen=True)
class BoardPollerServices:
    """Collaborators of the board poller."""

    board_service: DepartureBoardService
    station_resolver: StationResolverProtocol
    state_updater: StateUpdaterProtocol
    display: DisplayPublisherProtocol | None = None


@dataclass(frozen=True)
class BoardPollerConfiguration:
    """Stations to poll and how often."""

    station_configs: list[StationConfig]
    refresh_interval_seconds: int = 30


class BoardPoller(BoardPollerProtocol):
    """Polls upstreams for every station and mode and updates board state.

    A new cycle starts every refresh interval whether or not the previous one
    has finished. Each cycle is numbered; the state updater ignores boards
    from a cycle older than the last one applied.
    """

    def __init__(
        self,
        services: BoardPollerServices,
        configuration: BoardPollerConfiguration,
    ) -> None:
        """Initialize the board poller.

        Args:
            services: Board service, resolver, state updater and optional display.
            configuration: Stations to poll and the refresh interval.
        """
        self.board_service = services.board_service
        self.station_resolver = services.station_resolver
        self.state_updater = services.state_updater
        self.display = services.display
        self.station_configs = configuration.station_configs
        self.refresh_interval_seconds = configuration.refresh_interval_seconds
        self.resolved_configs: list[StationConfig] | None = None
        self._generation = 0
        self._poll_task: asyncio.Task | None = None
        self._countdown_task: asyncio.Task | None = None
        self._cycle_tasks: set[asyncio.Task] = set()

    async def start(self) -> None:
        """Start polling and the countdown."""
        if self._poll_task is not None and not self._poll_task.done():
            logger.warning("Board poller already running")
            return

        self._poll_task = asyncio.create_task(self._poll_loop())
        self._countdown_task = asyncio.create_task(self._countdown_loop())
        logger.info(
            f"Started board poller for {len(self.station_configs)} station(s), "
            f"every {self.refresh_interval_seconds}s"
        )

    async def stop(self) -> None:
        """Stop polling, cancelling any cycle still in flight."""
        tasks = [
            task
            for task in (self._poll_task, self._countdown_task, *self._cycle_tasks)
            if task is not None and not task.done()
        ]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.info("Stopped board poller")

    async def _poll_loop(self) -> None:
        """Start a cycle immediately, then one per refresh interval."""
        try:
            while True:
                self._spawn_cycle()
                await asyncio.sleep(self.refresh_interval_seconds)
        except asyncio.CancelledError:
            logger.info("Board poller cancelled")
            raise

    def _spawn_cycle(self) -> None:
        task = asyncio.create_task(self.run_cycle())
        self._cycle_tasks.add(task)
        task.add_done_callback(self._cycle_tasks.discard)

    async def _countdown_loop(self) -> None:
        """Decrement the visible countdown once per second."""
        while True:
            await asyncio.sleep(1)
            self.state_updater.tick_countdown()
            await self._publish()

    async def run_cycle(self) -> list[StationBoard] | None:
        """Run one refresh cycle.

        Returns:
            The boards produced, or None if the cycle did not complete.
        """
        self._generation += 1
        generation = self._generation

        if not self.station_configs:
            logger.error(NO_STATIONS_ERROR)
            self.state_updater.update_error(NO_STATIONS_ERROR)
            await self._publish()
            return None

        try:
            configs = await self._get_station_configs()
            pairs = [(config, mode) for config in configs for mode in config.modes]
            results = await asyncio.gather(*(self._fetch_board(c, m) for c, m in pairs))
        except Exception as e:
            logger.error(f"Board cycle {generation} failed: {e}", exc_info=True)
            # A newer cycle owns the error line once it has started
            if generation == self._generation:
                self.state_updater.update_error(CYCLE_FAILED_ERROR)
                await self._publish()
            return None

        boards = [board for board in results if board is not None]
        logger.debug(f"Cycle {generation}: {len(boards)} of {len(pairs)} boards fetched")

        if self.state_updater.update_boards(boards, generation):
            self.state_updater.update_error(None)
            self.state_updater.update_last_update_time(datetime.now(UTC))
            self.state_updater.reset_countdown(self.refresh_interval_seconds)
            await self._publish()
        return boards

    async def _get_station_configs(self) -> list[StationConfig]:
        """Resolve station identifiers on first use, retrying only unresolved modes later."""
        if self.resolved_configs is None:
            self.resolved_configs = await self.station_resolver.resolve_all(self.station_configs)
        elif any(self.station_resolver.unresolved_modes(c) for c in self.resolved_configs):
            self.resolved_configs = await self.station_resolver.resolve_all(self.resolved_configs)
        return self.resolved_configs

    async def _fetch_board(self, config: StationConfig, mode: str) -> StationBoard | None:
        """Fetch one station and mode; any failure yields None."""
        station_id = config.stop_id_for(mode)
        if not station_id:
            logger.debug(f"No identifier for {config.name} ({mode}), skipping")
            return None

        try:
            board = await self.board_service.get_departures(station_id, mode)
        except Exception as e:
            error_details = _extract_error_details(e)
            logger.error(
                f"Failed to fetch {mode} departures for {config.name}: "
                f"{error_details.reason} (service: {error_details.service}, "
                f"status: {error_details.status_code}, error: {e})"
            )
            if error_details.status_code == 429:
                logger.warning(
                    f"Rate limit (429) detected for {config.name} - "
                    "consider a longer refresh interval"
                )
            return None

        return replace(board, station_name=self.board_name(config, mode))

    @staticmethod
    def board_name(config: StationConfig, mode: str) -> str:
        """Configured station name, suffixed with the mode when a station has several."""
        if config.is_multi_mode:
            return f"{config.name} ({mode.upper()})"
        return config.name

    async def _publish(self) -> None:
        if self.display is not None:
            await self.display.publish_update()
