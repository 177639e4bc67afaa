"""
Shared builders and in-memory collaborators for return trip validation tests.
"""
from datetime import datetime, timedelta, timezone
from itertools import count

import pandas as pd

from app.modules.return_trip_validation.audit import AuditLogger
from app.modules.return_trip_validation.domain import Trip
from app.modules.return_trip_validation.exceptions import TripNotFoundError
from app.modules.return_trip_validation.repositories import (
    DestinationResolver,
    TripRepository,
)

BASE_DATE = datetime(2024, 7, 1, 8, 0, tzinfo=timezone.utc)

_ids = count(1)


def make_trip(
    start_km: float = 1000.0,
    distance: float = 100.0,
    start: datetime = BASE_DATE,
    duration_hours: float = 2.0,
    vehicle_id: str = "vehicle-1",
    destinations=("dest-a",),
    trip_id: str | None = None,
    **kwargs,
) -> Trip:
    """Build a Trip from a start point, a distance and a duration"""
    number = next(_ids)
    return Trip(
        id=trip_id or f"trip-{number}",
        vehicle_id=vehicle_id,
        vehicle_registration=kwargs.pop("vehicle_registration", "MH12AB1234"),
        trip_serial_number=kwargs.pop("trip_serial_number", f"T-{number:04d}"),
        trip_start_date=start,
        trip_end_date=start + timedelta(hours=duration_hours),
        start_km=start_km,
        end_km=start_km + distance,
        destinations=list(destinations),
        **kwargs,
    )


def make_return_trip(outbound: Trip, gap_hours: float = 10.0, distance: float | None = None, **kwargs) -> Trip:
    """Build a trip starting `gap_hours` after `outbound` ends, on the same vehicle"""
    kwargs.setdefault("destinations", outbound.destinations)
    return make_trip(
        start_km=outbound.end_km,
        distance=outbound.distance_km if distance is None else distance,
        start=outbound.trip_end_date + timedelta(hours=gap_hours),
        vehicle_id=outbound.vehicle_id,
        **kwargs,
    )


TRIP_COLUMNS = [
    "id",
    "vehicle_id",
    "vehicle_registration",
    "trip_serial_number",
    "trip_start_date",
    "trip_end_date",
    "start_km",
    "end_km",
    "is_return_trip",
    "destinations",
    "fuel_quantity",
    "calculated_kmpl",
]


def trips_to_dataframe(trips) -> pd.DataFrame:
    """Trip log export layout, destinations joined with `;`"""
    rows = []
    for trip in trips:
        row = {column: getattr(trip, column) for column in TRIP_COLUMNS}
        row["destinations"] = ";".join(trip.destinations)
        rows.append(row)
    return pd.DataFrame(rows, columns=TRIP_COLUMNS)


class InMemoryTripRepository(TripRepository):
    """Trip repository over a plain list"""

    def __init__(self, trips=None):
        self.trips = {trip.id: trip for trip in trips or []}
        self.window_queries = []

    def add(self, *trips: Trip):
        for trip in trips:
            self.trips[trip.id] = trip

    async def get_trip_by_id(self, trip_id: str) -> Trip:
        if trip_id not in self.trips:
            raise TripNotFoundError(trip_id)
        return self.trips[trip_id]

    async def find_trips_by_vehicle_in_window(self, vehicle_id, start, end, exclude_id):
        self.window_queries.append((vehicle_id, start, end, exclude_id))
        found = [
            trip
            for trip in self.trips.values()
            if trip.vehicle_id == vehicle_id
            and trip.id != exclude_id
            and start <= trip.trip_start_date <= end
        ]
        return sorted(found, key=lambda trip: trip.trip_start_date)

    async def list_recent_trips(self, since, limit):
        recent = [trip for trip in self.trips.values() if trip.trip_start_date >= since]
        recent.sort(key=lambda trip: trip.trip_start_date, reverse=True)
        return [trip.id for trip in recent[:limit]]


class DictDestinationResolver(DestinationResolver):
    def __init__(self, names=None, fail: bool = False):
        self.names = names or {}
        self.fail = fail
        self.calls = 0

    async def resolve_names(self, destination_ids):
        self.calls += 1
        if self.fail:
            raise ConnectionError("destinations table unavailable")
        return [self.names[item] for item in destination_ids if item in self.names]


class RecordingAuditLogger(AuditLogger):
    def __init__(self, fail: bool = False):
        self.records = []
        self.fail = fail

    async def log_return_trip_validation(self, trip_id, analysis, issues):
        if self.fail:
            raise RuntimeError("audit trail unavailable")
        self.records.append((trip_id, analysis, issues))
        return f"audit-{len(self.records)}"
