"""Rail (Darwin) departure board domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RailDestination:
    """A destination of a rail service."""

    location_name: str
    crs: str


@dataclass(frozen=True)
class RailService:
    """A scheduled rail departure as reported by Darwin."""

    std: str  # Scheduled time of departure, upstream local format ("10:15")
    etd: str  # Estimated time/status text ("On time", "Delayed", "10:18", ...)
    platform: str | None
    operator: str
    operator_code: str
    destinations: list[RailDestination] = field(default_factory=list)  # First is primary


@dataclass(frozen=True)
class RailDepartureBoard:
    """A parsed Darwin departure board."""

    location_name: str
    crs: str
    services: list[RailService] = field(default_factory=list)
