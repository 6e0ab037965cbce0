"""Domain errors raised by upstream adapters."""


class DepartureBoardError(Exception):
    """Base class for departure board errors."""


class MissingCredentialError(DepartureBoardError):
    """Raised before any network I/O when an upstream's credentials are not configured."""

    def __init__(self, service: str, detail: str = "") -> None:
        self.service = service
        message = f"{service}: missing credentials"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UpstreamUnavailableError(DepartureBoardError):
    """Raised when an upstream returns a non-2xx response or cannot be reached.

    ``status_code`` is None for transport failures (connection errors, timeouts).
    """

    def __init__(self, service: str, status_code: int | None = None, reason: str = "") -> None:
        self.service = service
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"{service} returned status {status_code}"
        else:
            message = f"{service} unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
