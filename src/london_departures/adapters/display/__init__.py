"""Display adapter: polling, state and terminal rendering of boards."""

from london_departures.adapters.display.formatters import BoardFormatter
from london_departures.adapters.display.pollers import (
    BoardPoller,
    BoardPollerConfiguration,
    BoardPollerServices,
)
from london_departures.adapters.display.renderers import TextBoardRenderer
from london_departures.adapters.display.state import BoardsState
from london_departures.adapters.display.terminal_display import TerminalDisplay
from london_departures.adapters.display.updaters import StateUpdater

__all__ = [
    "BoardFormatter",
    "BoardPoller",
    "BoardPollerConfiguration",
    "BoardPollerServices",
    "BoardsState",
    "StateUpdater",
    "TerminalDisplay",
    "TextBoardRenderer",
]
