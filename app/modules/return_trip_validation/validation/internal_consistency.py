# -*- coding: utf-8 -*-
"""
internal_consistency.py - Round trip record validation
------------------------------------------------------
Single responsibility: Validate a single trip that covers both legs
"""
from typing import List

from app.enums import IssueSeverityEnum, ReturnTripIssueTypeEnum
from ..config import ReturnTripThresholds
from ..domain import UNKNOWN_ROUTE, IssueDetails, ReturnTripIssue, Trip
from .issues import build_issue, severity_above
from .metrics import MetricsCalculator


class RoundTripConsistencyChecker:
    """Checks trips self-flagged as round trips"""

    MIN_ROUND_TRIP_DISTANCE = ReturnTripThresholds.MIN_RETURN_DISTANCE * 2
    FUEL_TOLERANCE_PERCENT = ReturnTripThresholds.FUEL_TOLERANCE_PERCENT
    FUEL_HIGH_SEVERITY_PERCENT = ReturnTripThresholds.ROUND_TRIP_FUEL_HIGH_SEVERITY_PERCENT

    @classmethod
    def check(cls, trip: Trip, route_description: str = UNKNOWN_ROUTE) -> List[ReturnTripIssue]:
        """Run every round-trip check and collect the issues found"""
        issues = []

        distance_issue = cls._check_distance_floor(trip, route_description)
        if distance_issue:
            issues.append(distance_issue)

        fuel_issue = cls._check_fuel_efficiency(trip, route_description)
        if fuel_issue:
            issues.append(fuel_issue)

        return issues

    @classmethod
    def _check_distance_floor(cls, trip: Trip, route_description: str):
        total_distance = trip.distance_km
        if total_distance >= cls.MIN_ROUND_TRIP_DISTANCE:
            return None

        return build_issue(
            ReturnTripIssueTypeEnum.DISTANCE_MISMATCH,
            trip,
            severity=IssueSeverityEnum.HIGH,
            description="Return trip distance too short for round journey",
            details=IssueDetails(
                actual_value=total_distance,
                expected_value=cls.MIN_ROUND_TRIP_DISTANCE,
                difference=total_distance - cls.MIN_ROUND_TRIP_DISTANCE,
            ),
            recommendations=[
                "Verify odometer readings",
                "Check if this should be marked as one-way trip",
                "Review destination accuracy",
            ],
            route_description=route_description,
        )

    @classmethod
    def _check_fuel_efficiency(cls, trip: Trip, route_description: str):
        """Stored km/l must agree with distance over fuel"""
        if not trip.has_fuel or not trip.calculated_kmpl:
            return None

        expected_kmpl = MetricsCalculator.fuel_efficiency(trip)
        variance = MetricsCalculator.variance_percent(trip.calculated_kmpl, expected_kmpl)
        if variance is None or variance <= cls.FUEL_TOLERANCE_PERCENT:
            return None

        return build_issue(
            ReturnTripIssueTypeEnum.FUEL_INCONSISTENCY,
            trip,
            severity=severity_above(variance, cls.FUEL_HIGH_SEVERITY_PERCENT),
            description="Fuel efficiency calculation inconsistent with return trip expectations",
            details=IssueDetails(
                expected_value=expected_kmpl,
                actual_value=trip.calculated_kmpl,
                difference=expected_kmpl - trip.calculated_kmpl,
                tolerance=cls.FUEL_TOLERANCE_PERCENT,
            ),
            recommendations=[
                "Verify fuel quantity entries",
                "Check for fuel refills during journey",
                "Review mileage calculation",
            ],
            route_description=route_description,
        )
