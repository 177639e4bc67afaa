# -*- coding: utf-8 -*-
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger

from app.decorators import router_get
from app.dependencies import get_validation_service
from app.modules.return_trip_validation import (
    ReturnTripAnalysis,
    ReturnTripValidationService,
    SystemWideReturnTripReport,
)

router = APIRouter(
    prefix="/return-trips",
    tags=["Return trips"],
    responses={
        429: {"error": "Rate limit exceeded"},
    },
)


@router_get(
    router=router,
    path="/issues",
    response_model=SystemWideReturnTripReport,
    responses={503: {"description": "Trip log unavailable"}},
)
async def get_system_wide_issues(
    service: Annotated[ReturnTripValidationService, Depends(get_validation_service)],
    request: Request,
):
    """
    Validates the most recent trips of the fleet and returns issue counts by type
    and severity, together with every per-trip analysis.
    """
    try:
        return await service.get_system_wide_return_trip_issues()
    except Exception as exc:
        logger.error(f"System-wide return trip validation failed: {exc}")
        raise HTTPException(status_code=503, detail="Failed to list recent trips")


@router_get(
    router=router,
    path="/{trip_id}/validation",
    response_model=ReturnTripAnalysis,
    responses={404: {"description": "Trip not found"}},
)
async def validate_trip(
    trip_id: str,
    service: Annotated[ReturnTripValidationService, Depends(get_validation_service)],
    request: Request,
):
    """
    Validates return trip consistency for a single trip.
    """
    analysis = await service.validate_return_trip(trip_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail="Trip not found")
    return analysis
