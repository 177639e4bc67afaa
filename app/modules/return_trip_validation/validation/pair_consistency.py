# -*- coding: utf-8 -*-
"""
pair_consistency.py - Outbound/return pair validation
-----------------------------------------------------
Single responsibility: Cross-check distance, fuel efficiency and timing of a pair
"""
from typing import List, Optional

from app.enums import ReturnTripIssueTypeEnum
from ..config import ReturnTripThresholds
from ..domain import UNKNOWN_ROUTE, IssueDetails, ReturnTripIssue, Trip
from .issues import build_issue, severity_above
from .metrics import MetricsCalculator


class TripPairConsistencyChecker:
    """Validates an outbound trip against one candidate return trip.

    The three checks are independent: a pair can raise any combination of
    distance, fuel and time gap issues.
    """

    DISTANCE_TOLERANCE_PERCENT = ReturnTripThresholds.DISTANCE_TOLERANCE_PERCENT
    DISTANCE_HIGH_SEVERITY_PERCENT = ReturnTripThresholds.DISTANCE_HIGH_SEVERITY_PERCENT
    FUEL_TOLERANCE_PERCENT = ReturnTripThresholds.FUEL_TOLERANCE_PERCENT
    FUEL_HIGH_SEVERITY_PERCENT = ReturnTripThresholds.PAIR_FUEL_HIGH_SEVERITY_PERCENT
    MAX_TIME_GAP_HOURS = ReturnTripThresholds.MAX_TIME_GAP_HOURS
    TIME_GAP_HIGH_SEVERITY_HOURS = ReturnTripThresholds.TIME_GAP_HIGH_SEVERITY_HOURS

    @classmethod
    def check(
        cls, outbound: Trip, return_trip: Trip, route_description: str = UNKNOWN_ROUTE
    ) -> List[ReturnTripIssue]:
        checks = (
            cls._check_distance,
            cls._check_fuel_efficiency,
            cls._check_time_gap,
        )
        issues = []
        for run_check in checks:
            issue = run_check(outbound, return_trip, route_description)
            if issue:
                issues.append(issue)
        return issues

    @classmethod
    def _check_distance(
        cls, outbound: Trip, return_trip: Trip, route_description: str
    ) -> Optional[ReturnTripIssue]:
        # A 0 km outbound against a non-zero return is an unbounded mismatch
        variance = MetricsCalculator.deviation_percent(
            outbound.distance_km, return_trip.distance_km
        )
        if variance <= cls.DISTANCE_TOLERANCE_PERCENT:
            return None

        return build_issue(
            ReturnTripIssueTypeEnum.DISTANCE_MISMATCH,
            outbound,
            related_trip=return_trip,
            severity=severity_above(variance, cls.DISTANCE_HIGH_SEVERITY_PERCENT),
            description="Significant distance variance between outbound and return trips",
            details=IssueDetails(
                expected_value=outbound.distance_km,
                actual_value=return_trip.distance_km,
                difference=abs(outbound.distance_km - return_trip.distance_km),
                tolerance=cls.DISTANCE_TOLERANCE_PERCENT,
            ),
            recommendations=[
                "Verify odometer readings for both trips",
                "Check for route variations or detours",
                "Review destination accuracy",
            ],
            route_description=route_description,
        )

    @classmethod
    def _check_fuel_efficiency(
        cls, outbound: Trip, return_trip: Trip, route_description: str
    ) -> Optional[ReturnTripIssue]:
        outbound_efficiency = MetricsCalculator.fuel_efficiency(outbound)
        return_efficiency = MetricsCalculator.fuel_efficiency(return_trip)
        # Skipped unless both legs report fuel
        if outbound_efficiency is None or return_efficiency is None:
            return None

        variance = MetricsCalculator.deviation_percent(outbound_efficiency, return_efficiency)
        if variance <= cls.FUEL_TOLERANCE_PERCENT:
            return None

        return build_issue(
            ReturnTripIssueTypeEnum.FUEL_INCONSISTENCY,
            outbound,
            related_trip=return_trip,
            severity=severity_above(variance, cls.FUEL_HIGH_SEVERITY_PERCENT),
            description="Fuel efficiency varies significantly between outbound and return trips",
            details=IssueDetails(
                expected_value=outbound_efficiency,
                actual_value=return_efficiency,
                difference=abs(outbound_efficiency - return_efficiency),
                tolerance=cls.FUEL_TOLERANCE_PERCENT,
            ),
            recommendations=[
                "Check for additional fuel purchases",
                "Verify fuel quantity entries",
                "Consider traffic or route differences",
            ],
            route_description=route_description,
        )

    @classmethod
    def _check_time_gap(
        cls, outbound: Trip, return_trip: Trip, route_description: str
    ) -> Optional[ReturnTripIssue]:
        gap_hours = MetricsCalculator.time_gap_hours(outbound, return_trip)
        if gap_hours <= cls.MAX_TIME_GAP_HOURS:
            return None

        return build_issue(
            ReturnTripIssueTypeEnum.TIME_GAP,
            outbound,
            related_trip=return_trip,
            severity=severity_above(gap_hours, cls.TIME_GAP_HIGH_SEVERITY_HOURS),
            description="Excessive time gap between outbound and return trips",
            details=IssueDetails(
                time_gap_hours=gap_hours,
                max_allowed_gap_hours=cls.MAX_TIME_GAP_HOURS,
            ),
            recommendations=[
                "Verify trip dates and times",
                "Check for intermediate trips or activities",
                "Consider if this was multiple separate journeys",
            ],
            route_description=route_description,
        )
