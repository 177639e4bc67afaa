"""Tortoise ORM implementation of the trip repository"""

from datetime import datetime

from tortoise.exceptions import BaseORMException, DoesNotExist

from app.models import Destination, Trip as TripModel
from app.modules.return_trip_validation.domain.trip import Trip
from app.modules.return_trip_validation.exceptions import (
    TripNotFoundError,
    TripRepositoryError,
)
from app.modules.return_trip_validation.repositories.trip_repository import (
    DestinationResolver,
    TripRepository,
)
from app.modules.return_trip_validation.utils import get_logger

logger = get_logger()


class TortoiseTripRepository(TripRepository):
    """Repository implementation backed by the application database"""

    async def get_trip_by_id(self, trip_id: str) -> Trip:
        try:
            trip = await TripModel.get(id=trip_id).prefetch_related("vehicle")
        except DoesNotExist:
            raise TripNotFoundError(trip_id)
        except (BaseORMException, ValueError) as exc:
            raise TripRepositoryError(f"Failed to fetch trip {trip_id}: {exc}") from exc
        return self._to_domain(trip)

    async def find_trips_by_vehicle_in_window(
        self,
        vehicle_id: str,
        start: datetime,
        end: datetime,
        exclude_id: str,
    ) -> list[Trip]:
        logger.debug(
            f"Searching trips of vehicle {vehicle_id} starting between {start} and {end}"
        )
        try:
            trips = (
                await TripModel.filter(
                    vehicle_id=vehicle_id,
                    trip_start_date__gte=start,
                    trip_start_date__lte=end,
                )
                .exclude(id=exclude_id)
                .order_by("trip_start_date")
                .prefetch_related("vehicle")
            )
        except BaseORMException as exc:
            raise TripRepositoryError(f"Failed to search trips: {exc}") from exc
        return [self._to_domain(trip) for trip in trips]

    async def list_recent_trips(self, since: datetime, limit: int) -> list[str]:
        try:
            trip_ids = (
                await TripModel.filter(trip_start_date__gte=since)
                .order_by("-trip_start_date")
                .limit(limit)
                .values_list("id", flat=True)
            )
        except BaseORMException as exc:
            raise TripRepositoryError(f"Failed to list recent trips: {exc}") from exc
        return [str(trip_id) for trip_id in trip_ids]

    async def test_connection(self) -> bool:
        try:
            await TripModel.all().limit(1).values_list("id", flat=True)
            return True
        except Exception:
            logger.exception("Trip database connection test failed")
            return False

    @staticmethod
    def _to_domain(trip: TripModel) -> Trip:
        return Trip(
            id=str(trip.id),
            vehicle_id=str(trip.vehicle_id),
            vehicle_registration=trip.vehicle.registration_number,
            trip_serial_number=trip.trip_serial_number,
            trip_start_date=trip.trip_start_date,
            trip_end_date=trip.trip_end_date,
            start_km=trip.start_km,
            end_km=trip.end_km,
            is_return_trip=trip.is_return_trip,
            destinations=[str(destination) for destination in trip.destinations or []],
            fuel_quantity=trip.fuel_quantity,
            calculated_kmpl=trip.calculated_kmpl,
        )


class TortoiseDestinationResolver(DestinationResolver):
    """Resolves destination names from the destinations table"""

    async def resolve_names(self, destination_ids: list[str]) -> list[str]:
        if not destination_ids:
            return []
        rows = await Destination.filter(id__in=destination_ids).values("id", "name")
        names = {str(row["id"]): row["name"] for row in rows}
        return [names[item] for item in destination_ids if item in names]
