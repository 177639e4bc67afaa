"""Application services"""

from app.modules.return_trip_validation.application.services import (
    ReturnTripValidationService,
    get_return_trip_validation_service,
)

__all__ = ["ReturnTripValidationService", "get_return_trip_validation_service"]
