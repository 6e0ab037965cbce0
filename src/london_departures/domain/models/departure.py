"""Departure domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Departure:
    """A departure in the unified display shape shared by all upstreams."""

    time: str  # Local time of day, e.g. "14:05"
    destination: str
    platform: str | None  # Raw upstream platform label; display cleanup happens at render time
    status: str  # Upstream status text or a derived "Due" / "N min" bucket
    line: str | None = None
