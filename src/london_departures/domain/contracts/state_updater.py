"""Protocol for updating board state."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from london_departures.domain.models.station_board import StationBoard


class StateUpdaterProtocol(Protocol):
    """Protocol for updating board state."""

    def update_boards(self, boards: list["StationBoard"], generation: int) -> bool:
        """Replace the rendered boards with the result of a cycle.

        Args:
            boards: Boards produced by the cycle, in configuration order.
            generation: Sequence number of the cycle that produced them.

        Returns:
            False if a newer cycle has already written its boards.
        """
        ...

    def update_error(self, error: str | None) -> None:
        """Set or clear the user-visible error.

        Args:
            error: Error message, or None to clear.
        """
        ...

    def update_last_update_time(self, time: "datetime") -> None:
        """Update the last update timestamp in the state.

        Args:
            time: The timestamp of the last update.
        """
        ...

    def reset_countdown(self, seconds: int) -> None:
        """Reset the refresh countdown to a full period.

        Args:
            seconds: Length of the refresh period.
        """
        ...

    def tick_countdown(self) -> int:
        """Decrement the refresh countdown by one second, stopping at zero.

        Returns:
            The remaining seconds.
        """
        ...
