"""Tests for the board service and station resolver."""

from unittest.mock import AsyncMock

import pytest

from london_departures.application.services import (
    BoardService,
    DepartureNormalizer,
    StationResolver,
)
from london_departures.domain.errors import UpstreamUnavailableError
from london_departures.domain.models import (
    Coordinates,
    LightRailArrival,
    LightRailArrivalBoard,
    RailDepartureBoard,
    RailDestination,
    RailService,
    StationConfig,
    StopPoint,
)


class MockRailRepository:
    """Mock rail repository for testing."""

    def __init__(self, board: RailDepartureBoard | None = None, error: Exception | None = None) -> None:
        """Initialize with a board to return or an error to raise."""
        self.board = board
        self.error = error
        self.calls: list[tuple[str, int]] = []

    async def get_departure_board(self, crs: str, num_rows: int = 10) -> RailDepartureBoard:
        """Return the configured board."""
        self.calls.append((crs, num_rows))
        if self.error:
            raise self.error
        assert self.board is not None
        return self.board


class MockLightRailRepository:
    """Mock light-rail repository for testing."""

    def __init__(
        self,
        boards: dict[str, LightRailArrivalBoard] | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        """Initialize with boards and errors keyed by stop id."""
        self.boards = boards or {}
        self.errors = errors or {}

    async def get_arrivals(self, stop_id: str, mode: str = "dlr") -> LightRailArrivalBoard:  # noqa: ARG002
        """Return the board for a stop or raise its error."""
        if stop_id in self.errors:
            raise self.errors[stop_id]
        return self.boards.get(
            stop_id, LightRailArrivalBoard(station_name="Unknown Station", stop_id=stop_id)
        )

    async def get_mode_arrivals(self, mode: str = "dlr") -> LightRailArrivalBoard:
        """Return every configured arrival under one board."""
        arrivals = [a for board in self.boards.values() for a in board.arrivals]
        return LightRailArrivalBoard(
            station_name=f"All {mode.upper()} Stations", stop_id="ALL", arrivals=arrivals
        )


def make_stop_point(stop_id: str, name: str = "Canary Wharf") -> StopPoint:
    """Create a stop point serving the DLR."""
    return StopPoint(id=stop_id, name=name, modes=("dlr",), coordinates=Coordinates(51.5, -0.02))


def make_arrival_board(stop_id: str, station_name: str, count: int = 2) -> LightRailArrivalBoard:
    """Create an arrivals board with ``count`` arrivals a minute apart."""
    return LightRailArrivalBoard(
        station_name=station_name,
        stop_id=stop_id,
        arrivals=[
            LightRailArrival(
                line_name="DLR",
                destination_name="Bank",
                expected_arrival=f"2024-01-15T08:0{i}:00Z",
                time_to_station=60 * i,
                platform_name="",
                direction="inbound",
                station_name=station_name,
            )
            for i in range(count)
        ],
    )


def make_rail_board(count: int = 12) -> RailDepartureBoard:
    """Create a rail board with ``count`` services."""
    return RailDepartureBoard(
        location_name="Stratford (London)",
        crs="SRA",
        services=[
            RailService(
                std=f"08:{i:02d}",
                etd="On time",
                platform=str(i),
                operator="Greater Anglia",
                operator_code="LE",
                destinations=[RailDestination(location_name="Norwich", crs="NRW")],
            )
            for i in range(count)
        ],
    )


def make_board_service(
    rail: MockRailRepository | None = None,
    light_rail: MockLightRailRepository | None = None,
    directory: AsyncMock | None = None,
) -> BoardService:
    """Create a board service over mock repositories."""
    return BoardService(
        rail_repository=rail or MockRailRepository(make_rail_board()),
        light_rail_repository=light_rail or MockLightRailRepository(),
        station_directory=directory or AsyncMock(),
        normalizer=DepartureNormalizer(),
        board_rows=8,
        rail_fetch_rows=10,
    )


class TestBoardService:
    """Tests for BoardService."""

    @pytest.mark.asyncio
    async def test_when_rail_mode_then_fetches_fetch_rows_and_truncates_to_board_rows(self) -> None:
        """Given the rail mode, when getting departures, then 10 are requested and 8 shown."""
        rail = MockRailRepository(make_rail_board(10))
        service = make_board_service(rail=rail)

        board = await service.get_departures("SRA", "rail")

        assert rail.calls == [("SRA", 10)]
        assert board.station_name == "Stratford (London)"
        assert board.mode == "rail"
        assert len(board.departures) == 8

    @pytest.mark.asyncio
    async def test_when_rows_given_then_they_override_defaults(self) -> None:
        """Given an explicit row count, when getting rail departures, then it is used for both limits."""
        rail = MockRailRepository(make_rail_board(10))
        service = make_board_service(rail=rail)

        board = await service.get_departures("SRA", "rail", rows=3)

        assert rail.calls == [("SRA", 3)]
        assert len(board.departures) == 3

    @pytest.mark.asyncio
    async def test_when_light_rail_mode_then_arrivals_are_normalized(self) -> None:
        """Given the dlr mode, when getting departures, then TfL arrivals are normalized."""
        light_rail = MockLightRailRepository(
            {"940GZZDLCAN": make_arrival_board("940GZZDLCAN", "Canary Wharf DLR Station")}
        )
        service = make_board_service(light_rail=light_rail)

        board = await service.get_departures("940GZZDLCAN", "dlr")

        assert board.mode == "dlr"
        assert [d.status for d in board.departures] == ["Due", "1 min"]
        assert all(d.platform == "DLR" for d in board.departures)

    @pytest.mark.asyncio
    async def test_when_upstream_fails_then_error_propagates(self) -> None:
        """Given a failing rail upstream, when getting departures, then the error is raised."""
        rail = MockRailRepository(error=UpstreamUnavailableError("Darwin", 503))
        service = make_board_service(rail=rail)

        with pytest.raises(UpstreamUnavailableError):
            await service.get_departures("SRA", "rail")

    @pytest.mark.asyncio
    async def test_when_getting_mode_departures_then_all_stations_board_is_returned(self) -> None:
        """Given arrivals at several stops, when getting mode departures, then one board covers all."""
        light_rail = MockLightRailRepository(
            {
                "A": make_arrival_board("A", "Bank DLR Station", 1),
                "B": make_arrival_board("B", "Lewisham DLR Station", 1),
            }
        )
        service = make_board_service(light_rail=light_rail)

        board = await service.get_mode_departures("dlr")

        assert board.station_name == "All DLR Stations"
        assert len(board.departures) == 2

    @pytest.mark.asyncio
    async def test_when_searching_rail_then_directory_is_not_called(self) -> None:
        """Given the rail mode, when searching, then no directory lookup happens."""
        directory = AsyncMock()
        service = make_board_service(directory=directory)

        assert await service.search_stations("Stratford", "rail") == []
        directory.search_stations.assert_not_called()

    @pytest.mark.asyncio
    async def test_when_searching_light_rail_then_directory_results_are_returned(self) -> None:
        """Given a light-rail mode, when searching, then directory results are returned."""
        directory = AsyncMock()
        directory.search_stations.return_value = [make_stop_point("940GZZDLCAN")]
        service = make_board_service(directory=directory)

        results = await service.search_stations("Canary Wharf", "dlr")

        assert [r.id for r in results] == ["940GZZDLCAN"]
        directory.search_stations.assert_awaited_once_with("Canary Wharf", "dlr")


class TestStationResolver:
    """Tests for StationResolver."""

    @pytest.mark.asyncio
    async def test_when_light_rail_mode_unresolved_then_first_result_is_used(self) -> None:
        """Given an unresolved dlr mode, when resolving, then the first search result id is stored."""
        directory = AsyncMock()
        directory.search_stations.return_value = [
            make_stop_point("C1"),
            make_stop_point("C2"),
        ]
        config = StationConfig(name="Stratford", modes=("rail", "dlr"), crs="SRA")

        resolved = await StationResolver(directory).resolve(config)

        assert resolved.stop_ids == {"dlr": "C1"}
        assert resolved.crs == "SRA"
        directory.search_stations.assert_awaited_once_with("Stratford", "dlr")

    @pytest.mark.asyncio
    async def test_when_already_resolved_then_no_lookup(self) -> None:
        """Given a configured stop id, when resolving, then the directory is not called."""
        directory = AsyncMock()
        config = StationConfig(name="Bank", modes=("dlr",), stop_ids={"dlr": "940GZZDLBNK"})

        resolved = await StationResolver(directory).resolve(config)

        assert resolved is config
        directory.search_stations.assert_not_called()

    @pytest.mark.asyncio
    async def test_when_lookup_fails_then_station_stays_unresolved(self) -> None:
        """Given a failing directory, when resolving, then the mode is left unresolved without raising."""
        directory = AsyncMock()
        directory.search_stations.side_effect = UpstreamUnavailableError("TfL", 500)
        config = StationConfig(name="Canary Wharf", modes=("dlr",))

        resolved = await StationResolver(directory).resolve(config)

        assert resolved.stop_ids == {}
        assert StationResolver.unresolved_modes(resolved) == ["dlr"]

    @pytest.mark.asyncio
    async def test_when_resolving_all_then_order_is_preserved(self) -> None:
        """Given several stations, when resolving all, then configuration order is kept."""
        directory = AsyncMock()
        directory.search_stations.side_effect = lambda name, mode: [make_stop_point(f"{name}-{mode}")]
        configs = [
            StationConfig(name="Bank", modes=("dlr",)),
            StationConfig(name="Lewisham", modes=("dlr",)),
        ]

        resolved = await StationResolver(directory).resolve_all(configs)

        assert [c.stop_id_for("dlr") for c in resolved] == ["Bank-dlr", "Lewisham-dlr"]
