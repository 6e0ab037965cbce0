"""Configuration adapters."""

from london_departures.adapters.config.app_config import AppConfig
from london_departures.adapters.config.station_configuration_loader import (
    StationConfigurationLoader,
)

__all__ = ["AppConfig", "StationConfigurationLoader"]
