"""Protocols shared between the poller and the display adapters."""

from london_departures.domain.contracts.board_poller import BoardPollerProtocol
from london_departures.domain.contracts.board_renderer import BoardRendererProtocol
from london_departures.domain.contracts.display_publisher import DisplayPublisherProtocol
from london_departures.domain.contracts.state_updater import StateUpdaterProtocol
from london_departures.domain.contracts.station_resolver import StationResolverProtocol

__all__ = [
    "BoardPollerProtocol",
    "BoardRendererProtocol",
    "DisplayPublisherProtocol",
    "StateUpdaterProtocol",
    "StationResolverProtocol",
]
