# -*- coding: utf-8 -*-
from app import config
from app.modules.return_trip_validation import (
    ReturnTripValidationService,
    get_return_trip_validation_service,
)


def get_validation_service() -> ReturnTripValidationService:
    return get_return_trip_validation_service(
        window_days=config.RETURN_TRIP_ANALYSIS_WINDOW_DAYS,
        trip_limit=config.RETURN_TRIP_ANALYSIS_TRIP_LIMIT,
        max_concurrency=config.RETURN_TRIP_ANALYSIS_MAX_CONCURRENCY,
        timezone=config.TIMEZONE,
    )
