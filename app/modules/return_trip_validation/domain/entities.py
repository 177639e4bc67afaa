"""Domain entities for return trip validation results"""

from pydantic import BaseModel, Field

from app.enums import IssueSeverityEnum, ReturnTripIssueTypeEnum

UNKNOWN_ROUTE = "Unknown route"


class IssueDetails(BaseModel):
    """Quantitative evidence attached to an issue"""

    expected_value: float | None = None
    actual_value: float | None = None
    difference: float | None = None
    tolerance: float | None = None
    time_gap_hours: float | None = None
    max_allowed_gap_hours: float | None = None

    class Config:
        frozen = True


class ReturnTripIssue(BaseModel):
    """Single anomaly detected on a trip or trip pair"""

    type: ReturnTripIssueTypeEnum
    trip_id: str
    trip_serial_number: str
    related_trip_id: str | None = None
    related_trip_serial: str | None = None
    vehicle_registration: str
    route_description: str = UNKNOWN_ROUTE
    severity: IssueSeverityEnum
    description: str
    details: IssueDetails = Field(default_factory=IssueDetails)
    recommendations: list[str] = Field(default_factory=list)

    class Config:
        frozen = True


class ReturnTripMetrics(BaseModel):
    """Distance, fuel and timing summary of an outbound/return pair"""

    outbound_distance: float | None = None
    return_distance: float | None = None
    distance_variance: float | None = None
    outbound_fuel: float | None = None
    return_fuel: float | None = None
    fuel_variance: float | None = None
    time_gap_hours: float | None = None

    class Config:
        frozen = True


class ReturnTripAnalysis(BaseModel):
    """Validation result for a single trip"""

    trip_id: str
    vehicle_id: str
    vehicle_registration: str
    has_return_trip: bool
    is_round_trip: bool
    issues: list[ReturnTripIssue] = Field(default_factory=list)
    metrics: ReturnTripMetrics = Field(default_factory=ReturnTripMetrics)

    class Config:
        frozen = True


class SystemWideReturnTripReport(BaseModel):
    """Fleet-wide snapshot of return trip issues"""

    total_trips_analyzed: int
    trips_with_issues: int
    issues_by_type: dict[str, int]
    issues_by_severity: dict[str, int]
    analyses: list[ReturnTripAnalysis]

    class Config:
        frozen = True
