import os

import pytest

# Set environment variables for testing before any app imports
os.environ.update({
    "ENVIRONMENT": "test",
    "TIMEZONE": "America/Sao_Paulo",
    "LOG_LEVEL": "DEBUG",
})

from app.modules.return_trip_validation import Container, ReturnTripValidationService  # noqa: E402
from tests.utils.trip_factory import (  # noqa: E402
    DictDestinationResolver,
    InMemoryTripRepository,
    RecordingAuditLogger,
)


@pytest.fixture
def repository():
    return InMemoryTripRepository()


@pytest.fixture
def resolver():
    return DictDestinationResolver(
        {"dest-a": "Pune Depot", "dest-b": "Mumbai Port", "dest-c": "Nashik Yard"}
    )


@pytest.fixture
def audit_logger():
    return RecordingAuditLogger()


@pytest.fixture
def service(repository, resolver, audit_logger):
    container = Container(
        trip_repository=repository,
        destination_resolver=resolver,
        audit_logger=audit_logger,
    )
    return ReturnTripValidationService(container=container)
