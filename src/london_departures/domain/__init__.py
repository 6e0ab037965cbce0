"""Domain layer - core models, errors and ports."""

from london_departures.domain.errors import (
    DepartureBoardError,
    MissingCredentialError,
    UpstreamUnavailableError,
)
from london_departures.domain.models import (
    Departure,
    StationBoard,
    StationConfig,
    StopPoint,
)
from london_departures.domain.ports import (
    DepartureBoardService,
    LightRailDepartureRepository,
    RailDepartureRepository,
    StationDirectory,
)

__all__ = [
    "Departure",
    "DepartureBoardError",
    "DepartureBoardService",
    "LightRailDepartureRepository",
    "MissingCredentialError",
    "RailDepartureRepository",
    "StationBoard",
    "StationConfig",
    "StationDirectory",
    "StopPoint",
    "UpstreamUnavailableError",
]
