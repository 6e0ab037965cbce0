"""TfL Unified API adapters."""

from london_departures.adapters.tfl_api.http_client import TflHttpClient
from london_departures.adapters.tfl_api.station_directory import TflStationDirectory
from london_departures.adapters.tfl_api.tfl_departure_repository import TflDepartureRepository

__all__ = ["TflDepartureRepository", "TflHttpClient", "TflStationDirectory"]
