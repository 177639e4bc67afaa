"""CSV implementation of the trip repository"""

from datetime import datetime
from pathlib import Path

import pandas as pd

from app.modules.return_trip_validation.domain.trip import Trip
from app.modules.return_trip_validation.exceptions import TripNotFoundError
from app.modules.return_trip_validation.repositories.trip_repository import (
    DestinationResolver,
    TripMapper,
    TripRepository,
)
from app.modules.return_trip_validation.utils import DateTimeService, get_logger

logger = get_logger()


class CSVTripRepository(TripRepository):
    """Repository implementation for exported trip logs"""

    REQUIRED_COLUMNS = [
        "id",
        "vehicle_id",
        "trip_start_date",
        "trip_end_date",
        "start_km",
        "end_km",
    ]

    def __init__(self, trips_file: str | Path):
        self.trips_file = Path(trips_file)
        self._trips: list[Trip] | None = None
        logger.info(f"CSV trip repository initialized: {self.trips_file}")

    @property
    def trips(self) -> list[Trip]:
        """Lazily loaded trip log"""
        if self._trips is None:
            self._trips = self._load()
        return self._trips

    async def get_trip_by_id(self, trip_id: str) -> Trip:
        for trip in self.trips:
            if trip.id == trip_id:
                return trip
        raise TripNotFoundError(trip_id)

    async def find_trips_by_vehicle_in_window(
        self,
        vehicle_id: str,
        start: datetime,
        end: datetime,
        exclude_id: str,
    ) -> list[Trip]:
        window_start = DateTimeService.to_utc(start)
        window_end = DateTimeService.to_utc(end)
        matches = [
            trip
            for trip in self.trips
            if trip.vehicle_id == vehicle_id
            and trip.id != exclude_id
            and window_start <= DateTimeService.to_utc(trip.trip_start_date) <= window_end
        ]
        return sorted(matches, key=lambda trip: trip.trip_start_date)

    async def list_recent_trips(self, since: datetime, limit: int) -> list[str]:
        since_utc = DateTimeService.to_utc(since)
        recent = [
            trip for trip in self.trips if DateTimeService.to_utc(trip.trip_start_date) >= since_utc
        ]
        recent.sort(key=lambda trip: trip.trip_start_date, reverse=True)
        return [trip.id for trip in recent[:limit]]

    async def test_connection(self) -> bool:
        """Test if the CSV file exists"""
        return self.trips_file.exists() and self.trips_file.is_file()

    def _load(self) -> list[Trip]:
        if not self.trips_file.exists():
            raise FileNotFoundError(f"CSV file not found: {self.trips_file}")

        logger.info(f"Loading trips from {self.trips_file}")
        df = pd.read_csv(self.trips_file, dtype={"id": str, "vehicle_id": str})
        self._validate_columns(df)
        trips = TripMapper.dataframe_to_trips(df)
        logger.info(f"Loaded {len(trips)} trips")
        return trips

    @classmethod
    def _validate_columns(cls, df: pd.DataFrame) -> None:
        missing_columns = [col for col in cls.REQUIRED_COLUMNS if col not in df.columns]
        if missing_columns:
            raise KeyError(f"Missing required columns: {', '.join(missing_columns)}")


class StaticDestinationResolver(DestinationResolver):
    """Resolves destination names from an in-memory mapping"""

    def __init__(self, names: dict[str, str] | None = None):
        self.names = dict(names or {})

    @classmethod
    def from_csv(cls, destinations_file: str | Path) -> "StaticDestinationResolver":
        """Build the mapping from a CSV file with `id` and `name` columns"""
        df = pd.read_csv(destinations_file, dtype={"id": str, "name": str})
        return cls(dict(zip(df["id"], df["name"])))

    async def resolve_names(self, destination_ids: list[str]) -> list[str]:
        return [self.names[item] for item in destination_ids if item in self.names]
