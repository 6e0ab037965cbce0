"""Light-rail (TfL) arrival domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LightRailArrival:
    """A predicted arrival as reported by the TfL arrivals endpoint."""

    line_name: str
    destination_name: str
    expected_arrival: str  # ISO-8601 timestamp, kept as received
    time_to_station: int  # Seconds; may be zero or negative
    platform_name: str
    direction: str
    station_name: str = ""


@dataclass(frozen=True)
class LightRailArrivalBoard:
    """Arrivals at one TfL stop, ordered by expected arrival."""

    station_name: str
    stop_id: str
    arrivals: list[LightRailArrival] = field(default_factory=list)
