"""Renderers for the board display."""

from london_departures.adapters.display.renderers.text_board_renderer import TextBoardRenderer

__all__ = ["TextBoardRenderer"]
