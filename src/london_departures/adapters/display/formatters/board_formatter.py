"""Display formatting for boards."""

from datetime import datetime
from zoneinfo import ZoneInfo

PLATFORM_PREFIX = "Platform"


class BoardFormatter:
    """Formats board fields for display."""

    def __init__(self, timezone: str = "Europe/London") -> None:
        """Initialize the formatter.

        Args:
            timezone: IANA timezone used for the last-update time.
        """
        self._timezone = ZoneInfo(timezone)

    @staticmethod
    def mode_label(mode: str) -> str:
        """Short label for a mode ("DLR", "RAIL")."""
        return mode.upper()

    def format_platform(self, platform: str | None, mode: str) -> str:
        """Strip a leading "Platform" prefix; missing platforms show the mode label."""
        label = (platform or "").strip()
        if label.startswith(PLATFORM_PREFIX):
            label = label[len(PLATFORM_PREFIX) :].strip()
        return label or self.mode_label(mode)

    @staticmethod
    def format_header(station_name: str) -> str:
        return f"{station_name.upper()} - DEPARTURES"

    def format_update_time(self, update_time: datetime | None) -> str:
        """Format last update time."""
        if not update_time:
            return "Never"
        if update_time.tzinfo is not None:
            update_time = update_time.astimezone(self._timezone)
        return update_time.strftime("%H:%M:%S")

    @staticmethod
    def format_countdown(seconds: int) -> str:
        return f"Next update in {max(seconds, 0)}s"
