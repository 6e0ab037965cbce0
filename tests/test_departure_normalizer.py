"""Tests for the departure normalizer."""

import pytest

from london_departures.application.services import DepartureNormalizer
from london_departures.domain.models import (
    LightRailArrival,
    LightRailArrivalBoard,
    RailDepartureBoard,
    RailDestination,
    RailService,
)


def _arrival(seconds: int = 120, platform: str = "Platform 2", line: str = "DLR") -> LightRailArrival:
    return LightRailArrival(
        line_name=line,
        destination_name="Lewisham",
        expected_arrival="2024-07-01T08:02:00Z",
        time_to_station=seconds,
        platform_name=platform,
        direction="outbound",
        station_name="Canary Wharf DLR Station",
    )


def _service(std: str, destinations: list[RailDestination] | None = None) -> RailService:
    return RailService(
        std=std,
        etd="On time",
        platform=None,
        operator="c2c",
        operator_code="CC",
        destinations=destinations or [],
    )


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "Due"), (59, "Due"), (60, "1 min"), (61, "1 min"), (3599, "59 min"), (3600, "60 min")],
)
def test_status_bucket(seconds: int, expected: str) -> None:
    """Given a time-to-station, when bucketing, then Due below a minute and whole minutes otherwise."""
    assert DepartureNormalizer.status_bucket(seconds) == expected


def test_when_light_rail_arrival_then_time_is_local_and_status_bucketed() -> None:
    """Given a summer UTC arrival, when normalizing, then time is London local and status is bucketed."""
    departure = DepartureNormalizer("Europe/London").from_light_rail(_arrival(125), "dlr")

    assert departure.time == "09:02"
    assert departure.destination == "Lewisham"
    assert departure.platform == "Platform 2"
    assert departure.status == "2 min"
    assert departure.line == "DLR"


def test_when_light_rail_platform_empty_then_mode_code_is_used() -> None:
    """Given an arrival without platform, when normalizing, then the upper-cased mode is the platform."""
    departure = DepartureNormalizer().from_light_rail(_arrival(platform=""), "dlr")

    assert departure.platform == "DLR"


def test_when_expected_arrival_unparseable_then_time_is_placeholder() -> None:
    """Given an unparseable timestamp, when formatting, then a placeholder is returned."""
    assert DepartureNormalizer().format_local_time("soon") == "--:--"


def test_when_rail_service_has_no_destination_then_destination_is_unknown() -> None:
    """Given a service with zero destinations, when normalizing, then the destination is Unknown."""
    departure = DepartureNormalizer.from_rail(_service("08:05"))

    assert departure.destination == "Unknown"
    assert departure.time == "08:05"
    assert departure.status == "On time"
    assert departure.platform is None
    assert departure.line == "c2c"


def test_when_rail_service_divides_then_first_destination_is_used() -> None:
    """Given several destinations, when normalizing, then the first one is shown."""
    departure = DepartureNormalizer.from_rail(
        _service(
            "08:20",
            [
                RailDestination(location_name="Southend Central", crs="SOC"),
                RailDestination(location_name="Shoeburyness", crs="SRY"),
            ],
        )
    )

    assert departure.destination == "Southend Central"


def test_when_normalizing_rail_board_then_rows_limit_and_order_are_kept() -> None:
    """Given more services than rows, when normalizing, then the first rows are kept in order."""
    board = RailDepartureBoard(
        location_name="Stratford (London)",
        crs="SRA",
        services=[_service(f"08:0{i}") for i in range(5)],
    )

    result = DepartureNormalizer().normalize_rail_board(board, rows=3)

    assert result.station_name == "Stratford (London)"
    assert result.mode == "rail"
    assert [d.time for d in result.departures] == ["08:00", "08:01", "08:02"]


def test_when_normalizing_light_rail_board_then_upstream_station_name_is_kept() -> None:
    """Given an arrivals board, when normalizing, then the upstream station name and mode are kept."""
    board = LightRailArrivalBoard(
        station_name="Canary Wharf DLR Station", stop_id="940GZZDLCAN", arrivals=[_arrival()]
    )

    result = DepartureNormalizer().normalize_light_rail_board(board, "dlr", rows=8)

    assert result.station_name == "Canary Wharf DLR Station"
    assert result.mode == "dlr"
    assert len(result.departures) == 1
