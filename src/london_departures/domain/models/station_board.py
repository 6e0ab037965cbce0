"""Station board domain model."""

from dataclasses import dataclass, field

from london_departures.domain.models.departure import Departure


@dataclass(frozen=True)
class StationBoard:
    """Departures for one station and mode, in upstream order."""

    station_name: str
    mode: str
    departures: list[Departure] = field(default_factory=list)
