from dataclasses import dataclass, field

from app.modules.return_trip_validation.audit import (
    AuditLogger,
    NullAuditLogger,
    TortoiseAuditLogger,
)
from app.modules.return_trip_validation.repositories import (
    CSVTripRepository,
    DestinationResolver,
    StaticDestinationResolver,
    TortoiseDestinationResolver,
    TortoiseTripRepository,
    TripRepository,
)


@dataclass
class Container:
    trip_repository: TripRepository
    destination_resolver: DestinationResolver
    audit_logger: AuditLogger = field(default_factory=NullAuditLogger)


def get_container():
    """Get container backed by the application database"""
    return Container(
        trip_repository=TortoiseTripRepository(),
        destination_resolver=TortoiseDestinationResolver(),
        audit_logger=TortoiseAuditLogger(),
    )


def get_csv_container(trips_file: str, destinations_file: str | None = None):
    """Get container reading an exported trip log, without audit trail"""
    resolver = (
        StaticDestinationResolver.from_csv(destinations_file)
        if destinations_file
        else StaticDestinationResolver()
    )
    return Container(
        trip_repository=CSVTripRepository(trips_file),
        destination_resolver=resolver,
    )
