"""ISO-8601 timestamp parsing shared by parsers and normalizers."""

import re
from datetime import UTC, datetime

# TfL occasionally sends 7-digit fractional seconds, which datetime rejects
_LONG_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def parse_iso_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp into an aware datetime, or None if unparseable.

    Naive timestamps are taken to be UTC.
    """
    if not value or not isinstance(value, str):
        return None

    text = _LONG_FRACTION_RE.sub(r"\1", value.strip()).replace("Z", "+00:00")
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed
