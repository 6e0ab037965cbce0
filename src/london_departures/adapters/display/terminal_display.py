"""Terminal display publishing the rendered boards to a text stream."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from london_departures.domain.contracts.display_publisher import DisplayPublisherProtocol

if TYPE_CHECKING:
    from london_departures.adapters.display.state.boards_state import BoardsState
    from london_departures.domain.contracts.board_renderer import BoardRendererProtocol

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class TerminalDisplay(DisplayPublisherProtocol):
    """Writes the current boards to a terminal."""

    def __init__(
        self,
        boards_state: BoardsState,
        renderer: BoardRendererProtocol,
        stream: TextIO | None = None,
        clear_screen: bool | None = None,
    ) -> None:
        """Initialize the display.

        Args:
            boards_state: State to render.
            renderer: Renderer producing the text.
            stream: Output stream, stdout by default.
            clear_screen: Clear the screen before each update; defaults to
                whether the stream is a TTY.
        """
        self.boards_state = boards_state
        self.renderer = renderer
        self.stream = stream or sys.stdout
        if clear_screen is None:
            clear_screen = self.stream.isatty()
        self.clear_screen = clear_screen

    async def publish_update(self) -> None:
        """Render the current state and write it to the stream."""
        text = self.renderer.render(
            self.boards_state.boards,
            error=self.boards_state.error,
            seconds_until_refresh=self.boards_state.seconds_until_refresh,
            last_update=self.boards_state.last_update,
        )
        try:
            if self.clear_screen:
                self.stream.write(CLEAR_SCREEN)
            self.stream.write(text)
            self.stream.flush()
        except OSError as e:
            logger.error(f"Failed to write boards to terminal: {e}", exc_info=True)
