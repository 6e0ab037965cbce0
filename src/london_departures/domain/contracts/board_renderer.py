"""Protocol for rendering boards."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from london_departures.domain.models.station_board import StationBoard


class BoardRendererProtocol(Protocol):
    """Protocol for turning boards into display output."""

    def render(
        self,
        boards: list["StationBoard"],
        error: str | None = None,
        seconds_until_refresh: int | None = None,
        last_update: "datetime | None" = None,
    ) -> str:
        """Render boards, an optional error line and the refresh countdown.

        Returns:
            Rendered text.
        """
        ...
