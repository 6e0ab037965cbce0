"""Updater for boards state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from london_departures.adapters.display.state.boards_state import (
    BoardsState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from london_departures.domain.contracts.state_updater import StateUpdaterProtocol

if TYPE_CHECKING:
    from datetime import datetime

    from london_departures.domain.models.station_board import StationBoard

logger = logging.getLogger(__name__)


class StateUpdater(StateUpdaterProtocol):
    """Updates boards state."""

    def __init__(self, boards_state: BoardsState) -> None:
        """Initialize the state updater.

        Args:
            boards_state: The BoardsState instance to update.
        """
        self.boards_state = boards_state

    def update_boards(self, boards: list[StationBoard], generation: int) -> bool:
        """Replace the boards unless a newer cycle has already written its own.

        Args:
            boards: Boards produced by the cycle.
            generation: Sequence number of the cycle.

        Returns:
            True if the boards were applied.
        """
        if generation < self.boards_state.generation:
            logger.info(
                f"Discarding boards from cycle {generation}; "
                f"cycle {self.boards_state.generation} already applied"
            )
            return False
        self.boards_state.boards = boards
        self.boards_state.generation = generation
        logger.debug(f"Updated boards: {len(boards)} boards (cycle {generation})")
        return True

    def update_error(self, error: str | None) -> None:
        """Set or clear the user-visible error.

        Args:
            error: Error message, or None to clear.
        """
        self.boards_state.error = error
        if error:
            logger.debug(f"Updated error: {error}")

    def update_last_update_time(self, time: datetime) -> None:
        """Update the last update timestamp in the state.

        Args:
            time: The timestamp of the last update.
        """
        self.boards_state.last_update = time
        logger.debug(f"Updated last update time: {time}")

    def reset_countdown(self, seconds: int) -> None:
        """Reset the refresh countdown.

        Args:
            seconds: Length of the refresh period.
        """
        self.boards_state.seconds_until_refresh = seconds

    def tick_countdown(self) -> int:
        """Decrement the countdown by one second; it stays at zero until reset."""
        if self.boards_state.seconds_until_refresh > 0:
            self.boards_state.seconds_until_refresh -= 1
        return self.boards_state.seconds_until_refresh
