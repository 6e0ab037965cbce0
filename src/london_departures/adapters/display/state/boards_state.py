"""Boards state dataclass."""

from dataclasses import dataclass, field
from datetime import datetime

from london_departures.domain.models.station_board import StationBoard


@dataclass
class BoardsState:
    """State shared between the poller and the display."""

    boards: list[StationBoard] = field(default_factory=list)
    last_update: datetime | None = None
    error: str | None = None  # User-visible error, e.g. "No stations configured"
    seconds_until_refresh: int = 0
    # Generation of the poll cycle whose boards are shown. Cycles may overlap;
    # results from a cycle older than this one are discarded.
    generation: int = 0
