# -*- coding: utf-8 -*-
"""
missing_return.py - Missing return leg heuristic
"""
from app.enums import IssueSeverityEnum, ReturnTripIssueTypeEnum
from ..config import ReturnTripThresholds
from ..domain import UNKNOWN_ROUTE, ReturnTripIssue, Trip
from .issues import build_issue


class MissingReturnHeuristic:
    """Flags long outbound trips that have no return leg on record"""

    MIN_DISTANCE_KM = ReturnTripThresholds.MIN_DISTANCE_FOR_RETURN
    MIN_DURATION_HOURS = ReturnTripThresholds.MIN_DURATION_FOR_RETURN_HOURS

    @classmethod
    def should_have_return(cls, trip: Trip) -> bool:
        """Long or lengthy trips are expected to come back"""
        return trip.distance_km > cls.MIN_DISTANCE_KM or trip.duration_hours > cls.MIN_DURATION_HOURS

    @classmethod
    def check(cls, trip: Trip, route_description: str = UNKNOWN_ROUTE) -> list[ReturnTripIssue]:
        if not cls.should_have_return(trip):
            return []

        return [
            build_issue(
                ReturnTripIssueTypeEnum.MISSING_RETURN,
                trip,
                severity=IssueSeverityEnum.MEDIUM,
                description="Expected return trip not found for this outbound journey",
                recommendations=[
                    "Check if return trip exists with different serial number",
                    "Verify if this was actually a one-way trip",
                    "Create return trip entry if journey was completed",
                ],
                route_description=route_description,
            )
        ]
