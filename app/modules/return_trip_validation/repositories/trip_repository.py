"""Repository pattern for trip log data access"""

from abc import ABC, abstractmethod
from datetime import datetime

import pandas as pd

from app.modules.return_trip_validation.domain.trip import Trip


class TripRepository(ABC):
    """Abstract repository for trip log data"""

    @abstractmethod
    async def get_trip_by_id(self, trip_id: str) -> Trip:
        """Fetch a single trip, raising TripNotFoundError if it doesn't exist"""
        pass

    @abstractmethod
    async def find_trips_by_vehicle_in_window(
        self,
        vehicle_id: str,
        start: datetime,
        end: datetime,
        exclude_id: str,
    ) -> list[Trip]:
        """Trips of a vehicle starting within [start, end], oldest first"""
        pass

    @abstractmethod
    async def list_recent_trips(self, since: datetime, limit: int) -> list[str]:
        """Ids of trips started at or after `since`, most recent first"""
        pass

    async def test_connection(self) -> bool:
        """Test if data source is accessible"""
        return True


class DestinationResolver(ABC):
    """Resolves destination ids into display names"""

    @abstractmethod
    async def resolve_names(self, destination_ids: list[str]) -> list[str]:
        """Names for the given ids, in the order of `destination_ids`"""
        pass


class TripMapper:
    """Maps between DataFrame rows and Trip entities"""

    @staticmethod
    def dataframe_to_trips(df: pd.DataFrame) -> list[Trip]:
        """Convert DataFrame to Trip entities"""
        trips = []
        for _, row in df.iterrows():
            trips.append(TripMapper.row_to_trip(row))
        return trips

    @staticmethod
    def row_to_trip(row: pd.Series) -> Trip:
        """Convert a single DataFrame row to a Trip"""
        return Trip(
            id=str(row["id"]),
            vehicle_id=str(row["vehicle_id"]),
            vehicle_registration=TripMapper._optional_str(row.get("vehicle_registration")),
            trip_serial_number=TripMapper._optional_str(row.get("trip_serial_number")),
            trip_start_date=pd.to_datetime(row["trip_start_date"], utc=True).to_pydatetime(),
            trip_end_date=pd.to_datetime(row["trip_end_date"], utc=True).to_pydatetime(),
            start_km=float(row["start_km"]),
            end_km=float(row["end_km"]),
            is_return_trip=TripMapper._to_bool(row.get("is_return_trip", False)),
            destinations=TripMapper._split_destinations(row.get("destinations")),
            fuel_quantity=TripMapper._optional_float(row.get("fuel_quantity")),
            calculated_kmpl=TripMapper._optional_float(row.get("calculated_kmpl")),
        )

    @staticmethod
    def _optional_str(value) -> str:
        """Blank cells come back from pandas as NaN"""
        if value is None or pd.isna(value):
            return ""
        return str(value).strip()

    @staticmethod
    def _optional_float(value) -> float | None:
        if value is None or pd.isna(value) or value == "":
            return None
        return float(value)

    @staticmethod
    def _to_bool(value) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes", "t")
        if value is None or pd.isna(value):
            return False
        return bool(value)

    @staticmethod
    def _split_destinations(value) -> list[str]:
        """Destinations are stored as a `;`-separated list of ids"""
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        if value is None or pd.isna(value) or value == "":
            return []
        return [item.strip() for item in str(value).split(";") if item.strip()]
