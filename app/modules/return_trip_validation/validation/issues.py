# -*- coding: utf-8 -*-
"""
issues.py - Issue construction shared by the consistency checks
"""
from typing import Optional

from app.enums import IssueSeverityEnum, ReturnTripIssueTypeEnum
from ..domain import UNKNOWN_ROUTE, IssueDetails, ReturnTripIssue, Trip


def build_issue(
    issue_type: ReturnTripIssueTypeEnum,
    trip: Trip,
    severity: IssueSeverityEnum,
    description: str,
    recommendations: list[str],
    details: Optional[IssueDetails] = None,
    related_trip: Optional[Trip] = None,
    route_description: str = UNKNOWN_ROUTE,
) -> ReturnTripIssue:
    """Issue anchored on `trip`, optionally referencing the other leg of a pair"""
    return ReturnTripIssue(
        type=issue_type,
        trip_id=trip.id,
        trip_serial_number=trip.trip_serial_number,
        related_trip_id=related_trip.id if related_trip else None,
        related_trip_serial=related_trip.trip_serial_number if related_trip else None,
        vehicle_registration=trip.vehicle_registration,
        route_description=route_description,
        severity=severity,
        description=description,
        details=details or IssueDetails(),
        recommendations=list(recommendations),
    )


def severity_above(value: float, high_threshold: float) -> IssueSeverityEnum:
    """`high` past the threshold, `medium` otherwise"""
    return IssueSeverityEnum.HIGH if value > high_threshold else IssueSeverityEnum.MEDIUM
