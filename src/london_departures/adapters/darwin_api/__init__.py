"""Darwin (National Rail) API adapters."""

from london_departures.adapters.darwin_api.darwin_departure_repository import (
    DarwinDepartureRepository,
)
from london_departures.adapters.darwin_api.response_parser import DarwinResponseParser

__all__ = ["DarwinDepartureRepository", "DarwinResponseParser"]
