"""Protocol for board polling."""

from typing import Protocol


class BoardPollerProtocol(Protocol):
    """Protocol for polling upstreams and updating board state."""

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller."""
        ...
