"""Domain entities and business logic"""

from .trip import Trip
from .entities import (
    UNKNOWN_ROUTE,
    IssueDetails,
    ReturnTripAnalysis,
    ReturnTripIssue,
    ReturnTripMetrics,
    SystemWideReturnTripReport,
)

__all__ = [
    'Trip',
    'UNKNOWN_ROUTE',
    'IssueDetails',
    'ReturnTripAnalysis',
    'ReturnTripIssue',
    'ReturnTripMetrics',
    'SystemWideReturnTripReport',
]
