"""Stop point domain model (TfL directory entry)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """Geographic coordinate of a stop."""

    lat: float
    lon: float


@dataclass(frozen=True)
class StopPoint:
    """A stop returned by the station directory.

    For hub stops the identifier has already been replaced by the child stop
    serving the searched mode where one exists.
    """

    id: str
    name: str
    modes: tuple[str, ...]
    coordinates: Coordinates

    @property
    def is_hub(self) -> bool:
        return len(self.modes) > 1

    def serves(self, mode: str) -> bool:
        return mode in self.modes
