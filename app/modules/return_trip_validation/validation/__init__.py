"""Return trip consistency checks"""

from .issues import build_issue
from .metrics import MetricsCalculator
from .pair_matcher import TripPairMatcher
from .internal_consistency import RoundTripConsistencyChecker
from .pair_consistency import TripPairConsistencyChecker
from .missing_return import MissingReturnHeuristic

__all__ = [
    "build_issue",
    "MetricsCalculator",
    "TripPairMatcher",
    "RoundTripConsistencyChecker",
    "TripPairConsistencyChecker",
    "MissingReturnHeuristic",
]
