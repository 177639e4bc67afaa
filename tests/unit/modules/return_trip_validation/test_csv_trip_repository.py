from datetime import datetime, timedelta, timezone

import pandas as pd
import pytest

from app.modules.return_trip_validation.exceptions import TripNotFoundError
from app.modules.return_trip_validation.repositories import (
    CSVTripRepository,
    StaticDestinationResolver,
    TripMapper,
)
from tests.utils.trip_factory import (
    BASE_DATE,
    TRIP_COLUMNS,
    make_return_trip,
    make_trip,
    trips_to_dataframe,
)


@pytest.fixture
def trips():
    outbound = make_trip(trip_id="out-1", distance=300, fuel_quantity=40, destinations=["d1", "d2"])
    return_trip = make_return_trip(outbound, trip_id="ret-1", fuel_quantity=None)
    other = make_trip(trip_id="other-1", vehicle_id="vehicle-9", start=BASE_DATE + timedelta(hours=6))
    return [outbound, return_trip, other]


@pytest.fixture
def trips_file(tmp_path, trips):
    path = tmp_path / "trips.csv"
    trips_to_dataframe(trips).to_csv(path, index=False)
    return path


class TestTripMapper:
    def test_row_to_trip(self):
        row = pd.Series(
            {
                "id": "abc",
                "vehicle_id": "v1",
                "vehicle_registration": "MH12AB1234",
                "trip_serial_number": "T-1",
                "trip_start_date": "2024-07-01T08:00:00+05:30",
                "trip_end_date": "2024-07-01 10:00:00",
                "start_km": "100",
                "end_km": 150,
                "is_return_trip": "True",
                "destinations": "d1; d2;",
                "fuel_quantity": float("nan"),
                "calculated_kmpl": "",
            }
        )

        trip = TripMapper.row_to_trip(row)

        assert trip.trip_start_date == datetime(2024, 7, 1, 2, 30, tzinfo=timezone.utc)
        assert trip.trip_end_date == datetime(2024, 7, 1, 10, 0, tzinfo=timezone.utc)
        assert trip.distance_km == 50
        assert trip.is_return_trip is True
        assert trip.destinations == ["d1", "d2"]
        assert trip.fuel_quantity is None
        assert trip.calculated_kmpl is None

    def test_blank_registration_and_serial(self, tmp_path, trips):
        path = tmp_path / "blank.csv"
        df = trips_to_dataframe(trips[:1])
        df["vehicle_registration"] = None
        df["trip_serial_number"] = None
        df.to_csv(path, index=False)

        trip = TripMapper.dataframe_to_trips(pd.read_csv(path, dtype={"id": str}))[0]

        assert trip.vehicle_registration == ""
        assert trip.trip_serial_number == ""

    def test_dataframe_round_trip_keeps_columns(self, trips):
        df = trips_to_dataframe(trips)

        assert list(df.columns) == TRIP_COLUMNS
        assert df.loc[0, "destinations"] == "d1;d2"
        assert TripMapper.dataframe_to_trips(df)[0] == trips[0]


class TestCSVTripRepository:
    @pytest.mark.asyncio
    async def test_get_trip_by_id(self, trips_file, trips):
        repository = CSVTripRepository(trips_file)

        trip = await repository.get_trip_by_id("out-1")

        assert trip == trips[0]

    @pytest.mark.asyncio
    async def test_unknown_trip(self, trips_file):
        with pytest.raises(TripNotFoundError):
            await CSVTripRepository(trips_file).get_trip_by_id("missing")

    @pytest.mark.asyncio
    async def test_window_search(self, trips_file, trips):
        repository = CSVTripRepository(trips_file)
        outbound = trips[0]

        found = await repository.find_trips_by_vehicle_in_window(
            outbound.vehicle_id,
            outbound.trip_end_date + timedelta(hours=1),
            outbound.trip_end_date + timedelta(hours=48),
            outbound.id,
        )

        assert [trip.id for trip in found] == ["ret-1"]

    @pytest.mark.asyncio
    async def test_window_accepts_naive_bounds(self, trips_file, trips):
        repository = CSVTripRepository(trips_file)
        start = trips[1].trip_start_date.replace(tzinfo=None)

        found = await repository.find_trips_by_vehicle_in_window(
            trips[1].vehicle_id, start, start, "out-1"
        )

        assert [trip.id for trip in found] == ["ret-1"]

    @pytest.mark.asyncio
    async def test_list_recent_trips(self, trips_file):
        repository = CSVTripRepository(trips_file)

        assert await repository.list_recent_trips(BASE_DATE, 10) == ["ret-1", "other-1", "out-1"]
        assert await repository.list_recent_trips(BASE_DATE, 1) == ["ret-1"]
        assert await repository.list_recent_trips(BASE_DATE + timedelta(hours=5), 10) == [
            "ret-1",
            "other-1",
        ]

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        repository = CSVTripRepository(tmp_path / "nope.csv")

        assert await repository.test_connection() is False
        with pytest.raises(FileNotFoundError):
            await repository.get_trip_by_id("out-1")

    @pytest.mark.asyncio
    async def test_missing_columns(self, tmp_path):
        path = tmp_path / "broken.csv"
        pd.DataFrame({"id": ["1"], "vehicle_id": ["v"]}).to_csv(path, index=False)

        with pytest.raises(KeyError, match="trip_start_date"):
            await CSVTripRepository(path).get_trip_by_id("1")


class TestStaticDestinationResolver:
    @pytest.mark.asyncio
    async def test_keeps_requested_order(self):
        resolver = StaticDestinationResolver({"d1": "Pune Depot", "d2": "Mumbai Port"})

        assert await resolver.resolve_names(["d2", "unknown", "d1"]) == ["Mumbai Port", "Pune Depot"]

    @pytest.mark.asyncio
    async def test_from_csv(self, tmp_path):
        path = tmp_path / "destinations.csv"
        pd.DataFrame({"id": ["d1", "d2"], "name": ["Pune Depot", "Mumbai Port"]}).to_csv(path, index=False)

        resolver = StaticDestinationResolver.from_csv(path)

        assert await resolver.resolve_names(["d1"]) == ["Pune Depot"]
