"""State updaters for the board display."""

from london_departures.adapters.display.updaters.state_updater import StateUpdater

__all__ = ["StateUpdater"]
