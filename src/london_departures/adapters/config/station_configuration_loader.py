"""Station configuration loader."""

import logging

from london_departures.adapters.config.app_config import AppConfig
from london_departures.domain.models.station_config import RAIL_MODE, StationConfig

logger = logging.getLogger(__name__)


class StationConfigurationLoader:
    """Loads station configurations from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[StationConfig]:
        """Load station configurations from app config."""
        return StationConfigurationLoader.from_dicts(config.get_stations_config())

    @staticmethod
    def from_dicts(stations_data: list[dict]) -> list[StationConfig]:
        """Build station configurations from raw dicts, skipping invalid entries."""
        station_configs: list[StationConfig] = []

        for station_data in stations_data:
            name = station_data.get("name")
            if not isinstance(name, str) or not name.strip():
                logger.warning(f"Skipping station without a name: {station_data}")
                continue
            name = name.strip()

            # Accept a single "mode" as well as a "modes" list
            modes = station_data.get("modes", station_data.get("mode"))
            if isinstance(modes, str):
                modes = [modes]
            if not isinstance(modes, list):
                modes = []
            normalized_modes: list[str] = []
            for mode in modes:
                if isinstance(mode, str) and mode.strip():
                    mode_name = mode.strip().lower()
                    if mode_name not in normalized_modes:
                        normalized_modes.append(mode_name)
            if not normalized_modes:
                logger.warning(f"Skipping station '{name}' with no modes configured")
                continue

            crs = station_data.get("crs")
            if isinstance(crs, str) and crs.strip():
                crs = crs.strip().upper()
            else:
                crs = None
            if RAIL_MODE in normalized_modes and crs is None:
                logger.warning(f"Station '{name}' has rail mode but no CRS code; rail is skipped")

            # Pre-resolved stop ids may be given to skip the directory lookup
            stop_ids: dict[str, str] = {}
            raw_stop_ids = station_data.get("stop_ids", {})
            if isinstance(raw_stop_ids, dict):
                for mode, stop_id in raw_stop_ids.items():
                    if isinstance(stop_id, str) and stop_id.strip():
                        stop_ids[str(mode).lower()] = stop_id.strip()
            stop_id = station_data.get("stop_id")
            if isinstance(stop_id, str) and stop_id.strip():
                for mode in normalized_modes:
                    if mode != RAIL_MODE:
                        stop_ids.setdefault(mode, stop_id.strip())

            station_configs.append(
                StationConfig(
                    name=name,
                    modes=tuple(normalized_modes),
                    crs=crs,
                    stop_ids=stop_ids,
                )
            )

        return station_configs
