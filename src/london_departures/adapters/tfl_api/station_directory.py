"""TfL station directory adapter: name search with hub-to-child resolution."""

import asyncio
import logging
from dataclasses import replace
from typing import Any

from london_departures.adapters.tfl_api.http_client import TflHttpClient, quote_path_segment
from london_departures.domain.models.stop_point import Coordinates, StopPoint
from london_departures.domain.ports.station_directory import StationDirectory

logger = logging.getLogger(__name__)


def _modes(stop: dict[str, Any]) -> tuple[str, ...]:
    """Return the modes a stop record serves."""
    modes = stop.get("modes")
    if not isinstance(modes, list):
        return ()
    return tuple(str(mode) for mode in modes)


def _stop_id(stop: dict[str, Any]) -> str:
    """Prefer the NaPTAN identifier, falling back to the generic id."""
    return str(stop.get("naptanId") or stop.get("id") or "")


def _coordinate(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _to_stop_point(stop: dict[str, Any]) -> StopPoint:
    """Build a StopPoint from a search match or child record."""
    return StopPoint(
        id=_stop_id(stop),
        name=str(stop.get("commonName") or stop.get("name") or ""),
        modes=_modes(stop),
        coordinates=Coordinates(lat=_coordinate(stop.get("lat")), lon=_coordinate(stop.get("lon"))),
    )


class TflStationDirectory(StationDirectory):
    """Adapter for the TfL StopPoint search and detail endpoints."""

    def __init__(self, http_client: TflHttpClient) -> None:
        """Initialize with a TfL HTTP client.

        Args:
            http_client: Client used for search and detail requests.
        """
        self._http_client = http_client

    async def search_stations(self, query: str, mode: str) -> list[StopPoint]:
        """Search stops by name for a mode.

        Candidates not serving ``mode`` are dropped. Hub candidates (serving
        more than one mode) are replaced by the identifier of their first child
        stop serving ``mode``; if the detail lookup fails or no child matches,
        the hub's own identifier is kept.

        Args:
            query: Free-text station name.
            mode: Transport mode, e.g. "dlr".

        Returns:
            Matching stops in upstream order.

        Raises:
            UpstreamUnavailableError: If the search request itself fails.
        """
        data = await self._http_client.get_json(
            f"/StopPoint/Search/{quote_path_segment(query)}", {"modes": mode}
        )
        matches = data.get("matches", []) if isinstance(data, dict) else []
        if not isinstance(matches, list):
            matches = []

        stops = [(match, _to_stop_point(match)) for match in matches if isinstance(match, dict)]
        candidates = [(match, stop) for match, stop in stops if stop.serves(mode)]
        logger.debug(
            f"TfL search '{query}' ({mode}): {len(matches)} matches, {len(candidates)} serve {mode}"
        )

        return list(
            await asyncio.gather(
                *(self._resolve_hub(match, stop, mode) for match, stop in candidates)
            )
        )

    async def _resolve_hub(self, match: dict[str, Any], stop: StopPoint, mode: str) -> StopPoint:
        """Replace a hub's identifier with its child stop serving ``mode``, if any."""
        if not stop.is_hub:
            return stop

        child_id = await self._find_child_stop_id(str(match.get("id") or stop.id), mode)
        if child_id:
            return replace(stop, id=child_id)
        return stop

    async def _find_child_stop_id(self, hub_id: str, mode: str) -> str | None:
        """Return the first child of a hub serving ``mode``, or None."""
        try:
            detail = await self._http_client.get_json(f"/StopPoint/{quote_path_segment(hub_id)}")
        except Exception as e:
            logger.warning(f"Failed to fetch details for hub {hub_id}, keeping hub id: {e}")
            return None

        children = detail.get("children", []) if isinstance(detail, dict) else []
        if not isinstance(children, list):
            children = []

        for child in children:
            if isinstance(child, dict) and _to_stop_point(child).serves(mode):
                child_id = _stop_id(child)
                if child_id:
                    logger.debug(f"Resolved hub {hub_id} to {mode} child {child_id}")
                    return child_id

        logger.info(f"No {mode} child found for hub {hub_id}, keeping hub id")
        return None
