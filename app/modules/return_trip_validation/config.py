"""Configuration settings for the return trip validation engine"""


class ReturnTripThresholds:
    """Tolerance thresholds for return trip consistency checks"""

    # Pair tolerances (percent)
    DISTANCE_TOLERANCE_PERCENT = 15.0
    FUEL_TOLERANCE_PERCENT = 20.0

    # Severity escalation (percent)
    DISTANCE_HIGH_SEVERITY_PERCENT = 30.0
    PAIR_FUEL_HIGH_SEVERITY_PERCENT = 35.0
    ROUND_TRIP_FUEL_HIGH_SEVERITY_PERCENT = 30.0

    # Timing (hours)
    MIN_RETURN_GAP_HOURS = 1.0
    MAX_TIME_GAP_HOURS = 48.0
    TIME_GAP_HIGH_SEVERITY_HOURS = 72.0

    # Distances (km)
    MIN_RETURN_DISTANCE = 10.0
    MIN_DISTANCE_FOR_RETURN = 50.0

    # Minimum duration (hours) after which a trip is expected to have a return leg
    MIN_DURATION_FOR_RETURN_HOURS = 6.0


class AggregationConfig:
    """System-wide analysis defaults"""

    WINDOW_DAYS = 30
    TRIP_LIMIT = 100
    # 1 keeps per-trip analysis sequential
    MAX_CONCURRENCY = 1
