"""Tests for domain models and errors."""

import pytest

from london_departures.domain.errors import MissingCredentialError, UpstreamUnavailableError
from london_departures.domain.models import Coordinates, StationConfig, StopPoint
from london_departures.domain.timestamps import parse_iso_timestamp


def test_station_config_is_frozen() -> None:
    """Given a station config, when modifying it, then FrozenInstanceError is raised."""
    config = StationConfig(name="Bank", modes=("dlr",))

    with pytest.raises(AttributeError):
        config.name = "Monument"  # type: ignore[misc]


def test_station_config_identifiers_per_mode() -> None:
    """Given rail and dlr modes, when asking for identifiers, then CRS and stop id are returned."""
    config = StationConfig(
        name="Stratford", modes=("rail", "dlr"), crs="SRA", stop_ids={"dlr": "940GZZDLSTD"}
    )

    assert config.stop_id_for("rail") == "SRA"
    assert config.stop_id_for("dlr") == "940GZZDLSTD"
    assert config.is_multi_mode is True
    assert config.light_rail_modes == ["dlr"]


def test_stop_point_hub_and_modes() -> None:
    """Given a stop with several modes, when inspecting, then it is a hub serving each mode."""
    stop = StopPoint(id="HUB", name="Stratford", modes=("dlr", "tube"), coordinates=Coordinates(0, 0))

    assert stop.is_hub is True
    assert stop.serves("tube") is True
    assert stop.serves("rail") is False


def test_upstream_unavailable_error_message() -> None:
    """Given status and reason, when formatting the error, then both are in the message."""
    assert str(UpstreamUnavailableError("TfL", 503, "Service Unavailable")) == (
        "TfL returned status 503: Service Unavailable"
    )
    assert str(UpstreamUnavailableError("Darwin", reason="timeout")) == "Darwin unavailable: timeout"


def test_missing_credential_error_message() -> None:
    """Given a detail, when formatting the error, then it is appended."""
    error = MissingCredentialError("Darwin", "set DARWIN_USERNAME")

    assert str(error) == "Darwin: missing credentials (set DARWIN_USERNAME)"
    assert error.service == "Darwin"


@pytest.mark.parametrize(
    ("value", "expected_minute"),
    [
        ("2024-05-01T08:01:00Z", 1),
        ("2024-05-01T08:02:00.1234567Z", 2),
        ("2024-05-01T08:03:00", 3),
        ("2024-05-01T09:04:00+01:00", 4),
    ],
)
def test_parse_iso_timestamp(value: str, expected_minute: int) -> None:
    """Given TfL-style timestamps, when parsing, then an aware datetime is returned."""
    parsed = parse_iso_timestamp(value)

    assert parsed is not None
    assert parsed.tzinfo is not None
    assert parsed.minute == expected_minute


def test_parse_iso_timestamp_rejects_garbage() -> None:
    """Given garbage, when parsing, then None is returned."""
    assert parse_iso_timestamp("soon") is None
    assert parse_iso_timestamp(None) is None
