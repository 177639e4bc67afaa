"""
Return Trip Validation - Trip log consistency checks
====================================================

Detects whether outbound trips have a matching return trip, cross-checks
distance, fuel efficiency and timing between the legs (or within a trip
flagged as a round trip), and aggregates the findings fleet-wide.

Usage:
    from app.modules.return_trip_validation import ReturnTripValidationService

    service = ReturnTripValidationService()
    analysis = await service.validate_return_trip(trip_id)
    report = await service.get_system_wide_return_trip_issues()
"""

__version__ = "1.0.0"

from app.modules.return_trip_validation.application.services import (
    ReturnTripValidationService,
    get_return_trip_validation_service,
)
from app.modules.return_trip_validation.container import (
    Container,
    get_container,
    get_csv_container,
)
from app.modules.return_trip_validation.domain import (
    ReturnTripAnalysis,
    ReturnTripIssue,
    ReturnTripMetrics,
    SystemWideReturnTripReport,
    Trip,
)
from app.modules.return_trip_validation.config import (
    AggregationConfig,
    ReturnTripThresholds,
)

__all__ = [
    "ReturnTripValidationService",
    "get_return_trip_validation_service",
    "Container",
    "get_container",
    "get_csv_container",
    "ReturnTripAnalysis",
    "ReturnTripIssue",
    "ReturnTripMetrics",
    "SystemWideReturnTripReport",
    "Trip",
    "AggregationConfig",
    "ReturnTripThresholds",
    "__version__",
]
