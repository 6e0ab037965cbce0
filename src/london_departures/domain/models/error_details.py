"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a failed upstream call, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    service: str = "unknown"
    status_code: int | None = None
    reason: str
