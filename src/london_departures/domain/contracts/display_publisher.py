"""Protocol for publishing board updates to a display."""

from typing import Protocol


class DisplayPublisherProtocol(Protocol):
    """Protocol for pushing the current board state to a display."""

    async def publish_update(self) -> None:
        """Render the current state and push it to the display."""
        ...
