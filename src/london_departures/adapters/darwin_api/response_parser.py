"""Parser for Darwin GetDepartureBoard SOAP responses."""

import logging
import xml.etree.ElementTree as ET

from london_departures.adapters.darwin_api.constants import (
    UNKNOWN_CRS,
    UNKNOWN_LOCATION_NAME,
)
from london_departures.adapters.darwin_api.xml_fields import (
    element_text,
    extract_value,
    find_all,
    find_children,
    find_first,
    find_first_outside,
    local_name,
    parse_fragment,
)
from london_departures.domain.models.rail_service import (
    RailDepartureBoard,
    RailDestination,
    RailService,
)

logger = logging.getLogger(__name__)

# Station identity fields appear again inside each service (origin, destination)
_SERVICE_SCOPED = ("service", "trainServices", "busServices", "ferryServices")


class DarwinResponseParser:
    """Parses Darwin SOAP XML into a RailDepartureBoard.

    Never raises on bad input: unparseable documents give an empty board and
    missing fields fall back to defaults.
    """

    @staticmethod
    def parse(xml_text: str, requested_crs: str = "") -> RailDepartureBoard:
        """Parse a GetDepartureBoard response body.

        Args:
            xml_text: Full SOAP response body.
            requested_crs: CRS code the board was requested for (used for logging).

        Returns:
            Parsed board with services in document order.
        """
        root = parse_fragment(xml_text)
        if root is None:
            logger.warning(f"Unparseable Darwin response for {requested_crs or 'unknown CRS'}")
            return RailDepartureBoard(
                location_name=UNKNOWN_LOCATION_NAME, crs=UNKNOWN_CRS, services=[]
            )

        location_name, crs = DarwinResponseParser._parse_station_identity(root)
        services = [
            DarwinResponseParser._parse_service(service) for service in find_all(root, "service")
        ]
        logger.debug(f"Parsed {len(services)} Darwin services for {crs} ({location_name})")

        return RailDepartureBoard(location_name=location_name, crs=crs, services=services)

    @staticmethod
    def _parse_station_identity(root: ET.Element) -> tuple[str, str]:
        """Extract station name and CRS from the board, ignoring service-level locations."""
        scope = root
        for element in root.iter():
            if local_name(element.tag).endswith("BoardResult"):
                scope = element
                break

        location = find_first_outside(scope, "locationName", _SERVICE_SCOPED)
        crs = find_first_outside(scope, "crs", _SERVICE_SCOPED)
        location_name = element_text(location) if location is not None else ""
        crs_code = element_text(crs) if crs is not None else ""
        return location_name or UNKNOWN_LOCATION_NAME, crs_code or UNKNOWN_CRS

    @staticmethod
    def _parse_service(service: ET.Element) -> RailService:
        """Parse a single service element."""
        return RailService(
            std=extract_value(service, "std") or "",
            etd=extract_value(service, "etd") or "",
            platform=extract_value(service, "platform"),
            operator=extract_value(service, "operator") or "",
            operator_code=extract_value(service, "operatorCode") or "",
            destinations=DarwinResponseParser._parse_destinations(service),
        )

    @staticmethod
    def _parse_destinations(service: ET.Element) -> list[RailDestination]:
        """Parse destination records, one per location inside each destination block."""
        destinations: list[RailDestination] = []
        for destination in find_all(service, "destination"):
            # Current schemas nest <location> entries (several when a train divides);
            # older ones put the fields directly on <destination>
            locations = find_children(destination, "location") or [destination]
            for location in locations:
                name = find_first(location, "locationName")
                crs = find_first(location, "crs")
                destinations.append(
                    RailDestination(
                        location_name=element_text(name) if name is not None else "",
                        crs=element_text(crs) if crs is not None else "",
                    )
                )
        return destinations
