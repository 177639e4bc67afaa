"""Repository pattern for data access"""

from app.modules.return_trip_validation.repositories.trip_repository import (
    DestinationResolver,
    TripMapper,
    TripRepository,
)
from app.modules.return_trip_validation.repositories.tortoise_trip_repository import (
    TortoiseDestinationResolver,
    TortoiseTripRepository,
)
from app.modules.return_trip_validation.repositories.csv_trip_repository import (
    CSVTripRepository,
    StaticDestinationResolver,
)

__all__ = [
    "TripRepository",
    "DestinationResolver",
    "TripMapper",
    "TortoiseTripRepository",
    "TortoiseDestinationResolver",
    "CSVTripRepository",
    "StaticDestinationResolver",
]
