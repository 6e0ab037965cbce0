"""Station configuration domain model."""

from dataclasses import dataclass, field

RAIL_MODE = "rail"


@dataclass(frozen=True)
class StationConfig:
    """A configured physical station and the transport modes to poll it for."""

    name: str  # Display label
    modes: tuple[str, ...]  # e.g. ("rail", "dlr"); never empty
    crs: str | None = None  # Rail CRS code, supplied by configuration
    stop_ids: dict[str, str] = field(
        default_factory=dict
    )  # mode -> resolved TfL stop identifier (filled in by the station resolver)

    @property
    def is_multi_mode(self) -> bool:
        return len(self.modes) > 1

    @property
    def light_rail_modes(self) -> list[str]:
        return [mode for mode in self.modes if mode != RAIL_MODE]

    def stop_id_for(self, mode: str) -> str | None:
        """Return the identifier to query for a mode (CRS for rail, stop id otherwise)."""
        if mode == RAIL_MODE:
            return self.crs
        return self.stop_ids.get(mode)
