"""State management for the board display."""

from london_departures.adapters.display.state.boards_state import BoardsState

__all__ = ["BoardsState"]
