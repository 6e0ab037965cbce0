"""Adapters layer - external system integrations."""

from london_departures.adapters.config import AppConfig
from london_departures.adapters.darwin_api import DarwinDepartureRepository
from london_departures.adapters.tfl_api import (
    TflDepartureRepository,
    TflHttpClient,
    TflStationDirectory,
)

__all__ = [
    "AppConfig",
    "DarwinDepartureRepository",
    "TflDepartureRepository",
    "TflHttpClient",
    "TflStationDirectory",
]
