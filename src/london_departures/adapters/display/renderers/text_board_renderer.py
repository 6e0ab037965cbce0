"""Fixed-width text rendering of departure boards."""

from datetime import datetime

from london_departures.adapters.display.formatters.board_formatter import BoardFormatter
from london_departures.domain.contracts.board_renderer import BoardRendererProtocol
from london_departures.domain.models.station_board import StationBoard

# (header, width) per column
COLUMNS = (("TIME", 7), ("DESTINATION", 30), ("PLATFORM", 10), ("TIME REMAINING", 16))
NO_DEPARTURES = "No departures available"


def _fit(value: str, width: int) -> str:
    """Truncate or pad a cell to its column width."""
    return value[:width].ljust(width)


class TextBoardRenderer(BoardRendererProtocol):
    """Renders boards as plain text for a terminal."""

    def __init__(self, formatter: BoardFormatter | None = None) -> None:
        """Initialize the renderer.

        Args:
            formatter: Field formatter; a default one is used if omitted.
        """
        self.formatter = formatter or BoardFormatter()
        self.width = sum(width for _, width in COLUMNS) + len(COLUMNS) - 1

    def render(
        self,
        boards: list[StationBoard],
        error: str | None = None,
        seconds_until_refresh: int | None = None,
        last_update: datetime | None = None,
    ) -> str:
        """Render all boards, an optional error line and the footer."""
        lines: list[str] = []
        if error:
            lines.extend([f"! {error}", ""])

        for board in boards:
            lines.extend(self.render_board(board))
            lines.append("")

        # The footer is only meaningful once something has been shown
        if boards:
            footer = [f"Updated {self.formatter.format_update_time(last_update)}"]
            if seconds_until_refresh is not None:
                footer.insert(0, self.formatter.format_countdown(seconds_until_refresh))
            lines.append(" | ".join(footer))

        return "\n".join(lines).rstrip() + "\n"

    def render_board(self, board: StationBoard) -> list[str]:
        """Render a single board as a list of lines."""
        rule = "=" * self.width
        lines = [
            rule,
            self.formatter.format_header(board.station_name).center(self.width).rstrip(),
            rule,
            self._row([header for header, _ in COLUMNS]),
            "-" * self.width,
        ]

        if not board.departures:
            lines.append(NO_DEPARTURES.center(self.width).rstrip())

        for departure in board.departures:
            lines.append(
                self._row(
                    [
                        departure.time,
                        departure.destination,
                        self.formatter.format_platform(departure.platform, board.mode),
                        departure.status,
                    ]
                )
            )

        lines.append(rule)
        return lines

    @staticmethod
    def _row(values: list[str]) -> str:
        return " ".join(
            _fit(value, width) for value, (_, width) in zip(values, COLUMNS, strict=True)
        ).rstrip()
