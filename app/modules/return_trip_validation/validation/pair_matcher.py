# -*- coding: utf-8 -*-
"""
pair_matcher.py - Return trip candidate search
----------------------------------------------
Single responsibility: Find trips that could be the return leg of an outbound trip
"""
from datetime import timedelta
from typing import Iterable, List, Optional

from ..config import ReturnTripThresholds
from ..domain import Trip
from ..repositories import TripRepository
from ..utils import get_logger

logger = get_logger()


class TripPairMatcher:
    """Matches outbound trips with candidate return trips on the same vehicle"""

    MIN_GAP_HOURS = ReturnTripThresholds.MIN_RETURN_GAP_HOURS
    MAX_GAP_HOURS = ReturnTripThresholds.MAX_TIME_GAP_HOURS

    @classmethod
    async def find_return_candidates(
        cls, repository: TripRepository, outbound: Trip
    ) -> List[Trip]:
        """Candidates in the search window whose destinations overlap the outbound ones.

        Repository failures are logged and produce no candidates, so callers fall
        back to the missing-return heuristic.
        """
        window_start = outbound.trip_end_date + timedelta(hours=cls.MIN_GAP_HOURS)
        window_end = outbound.trip_end_date + timedelta(hours=cls.MAX_GAP_HOURS)

        try:
            potential_returns = await repository.find_trips_by_vehicle_in_window(
                outbound.vehicle_id, window_start, window_end, outbound.id
            )
        except Exception:
            logger.exception(f"Error finding return trips for trip {outbound.id}")
            return []

        return [
            trip
            for trip in potential_returns
            if cls.destinations_overlap(outbound.destinations, trip.destinations)
        ]

    @staticmethod
    def destinations_overlap(
        outbound_destinations: Optional[Iterable[str]],
        return_destinations: Optional[Iterable[str]],
    ) -> bool:
        """Whether two destination lists share at least one destination.

        Heuristic: order and direction are ignored, any shared stop counts as
        the same route.
        """
        if not outbound_destinations or not return_destinations:
            return False
        return bool(set(outbound_destinations) & set(return_destinations))
