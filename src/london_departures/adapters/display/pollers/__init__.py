"""Pollers for the board display."""

from london_departures.adapters.display.pollers.board_poller import (
    BoardPoller,
    BoardPollerConfiguration,
    BoardPollerServices,
)

__all__ = [
    "BoardPoller",
    "BoardPollerConfiguration",
    "BoardPollerServices",
]
