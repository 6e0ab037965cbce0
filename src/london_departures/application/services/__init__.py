"""Application services (use cases) for departure boards."""

from london_departures.application.services.board_service import BoardService
from london_departures.application.services.departure_normalizer import DepartureNormalizer
from london_departures.application.services.station_resolver import StationResolver

__all__ = ["BoardService", "DepartureNormalizer", "StationResolver"]
