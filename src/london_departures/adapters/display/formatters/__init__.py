"""Formatters for the board display."""

from london_departures.adapters.display.formatters.board_formatter import BoardFormatter

__all__ = ["BoardFormatter"]
