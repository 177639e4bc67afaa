"""Application services for return trip validation"""

import asyncio
from collections import Counter
from datetime import datetime

from app.modules.return_trip_validation.config import AggregationConfig
from app.modules.return_trip_validation.container import Container, get_container
from app.modules.return_trip_validation.domain import (
    UNKNOWN_ROUTE,
    ReturnTripAnalysis,
    ReturnTripMetrics,
    SystemWideReturnTripReport,
    Trip,
)
from app.modules.return_trip_validation.exceptions import TripNotFoundError
from app.modules.return_trip_validation.utils import DateTimeService, get_logger
from app.modules.return_trip_validation.validation import (
    MetricsCalculator,
    MissingReturnHeuristic,
    RoundTripConsistencyChecker,
    TripPairConsistencyChecker,
    TripPairMatcher,
)

logger = get_logger()

ROUTE_SEPARATOR = " → "


class ReturnTripValidationService:
    """Stateless return trip validation over an injected trip log"""

    def __init__(
        self,
        container: Container | None = None,
        window_days: int = AggregationConfig.WINDOW_DAYS,
        trip_limit: int = AggregationConfig.TRIP_LIMIT,
        max_concurrency: int = AggregationConfig.MAX_CONCURRENCY,
        timezone: str = "UTC",
    ):
        self.container = container or get_container()
        self.window_days = window_days
        self.trip_limit = trip_limit
        self.max_concurrency = max(1, max_concurrency)
        self.timezone = timezone

    @property
    def repository(self):
        return self.container.trip_repository

    async def validate_return_trip(self, trip_id: str) -> ReturnTripAnalysis | None:
        """
        Validate return trip consistency for a single trip

        Returns None when the trip can't be found or loaded. An analysis with
        an empty issue list means the trip passed every check.
        """
        try:
            trip = await self.repository.get_trip_by_id(trip_id)
        except TripNotFoundError:
            logger.error(f"Trip not found: {trip_id}")
            return None
        except Exception:
            logger.exception(f"Error fetching trip {trip_id}")
            return None

        try:
            analysis = await self._analyze(trip)
        except Exception:
            logger.exception(f"Error validating return trip {trip_id}")
            return None

        await self._record_audit(trip_id, analysis)
        return analysis

    async def get_system_wide_return_trip_issues(
        self, now: datetime | None = None
    ) -> SystemWideReturnTripReport:
        """
        Validate the most recent trips of the fleet and tally their issues

        Failing to list the trip window raises. Trips whose validation fails
        are left out of the report.
        """
        since = DateTimeService.days_ago(self.window_days, tz=self.timezone, now=now)
        try:
            trip_ids = await self.repository.list_recent_trips(since, self.trip_limit)
        except Exception:
            logger.exception("Error getting system-wide return trip issues")
            raise

        logger.info(f"Analyzing {len(trip_ids)} trips started since {since}")
        results = await self._validate_many(trip_ids)
        analyses = [analysis for analysis in results if analysis is not None]

        skipped = len(trip_ids) - len(analyses)
        if skipped:
            logger.warning(f"{skipped} trips could not be validated and were skipped")

        return self._build_report(analyses)

    async def _validate_many(self, trip_ids: list[str]) -> list[ReturnTripAnalysis | None]:
        if self.max_concurrency == 1:
            return [await self._safe_validate(trip_id) for trip_id in trip_ids]

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def bounded(trip_id: str):
            async with semaphore:
                return await self._safe_validate(trip_id)

        return await asyncio.gather(*(bounded(trip_id) for trip_id in trip_ids))

    async def _safe_validate(self, trip_id: str) -> ReturnTripAnalysis | None:
        try:
            return await self.validate_return_trip(trip_id)
        except Exception:
            logger.exception(f"Unexpected failure validating trip {trip_id}")
            return None

    async def _analyze(self, trip: Trip) -> ReturnTripAnalysis:
        route_description = await self._describe_route(trip)

        if trip.is_return_trip:
            return ReturnTripAnalysis(
                trip_id=trip.id,
                vehicle_id=trip.vehicle_id,
                vehicle_registration=trip.vehicle_registration,
                has_return_trip=True,
                is_round_trip=True,
                issues=RoundTripConsistencyChecker.check(trip, route_description),
                metrics=MetricsCalculator.calculate_round_trip_metrics(trip),
            )

        candidates = await TripPairMatcher.find_return_candidates(self.repository, trip)
        if candidates:
            issues = []
            for return_trip in candidates:
                issues.extend(
                    TripPairConsistencyChecker.check(trip, return_trip, route_description)
                )
            # Only the earliest candidate's metrics are reported
            metrics = MetricsCalculator.calculate_pair_metrics(trip, candidates[0])
        else:
            issues = MissingReturnHeuristic.check(trip, route_description)
            metrics = ReturnTripMetrics()

        return ReturnTripAnalysis(
            trip_id=trip.id,
            vehicle_id=trip.vehicle_id,
            vehicle_registration=trip.vehicle_registration,
            has_return_trip=bool(candidates),
            is_round_trip=False,
            issues=issues,
            metrics=metrics,
        )

    async def _describe_route(self, trip: Trip) -> str:
        """Destination names joined with arrows, or "Unknown route" """
        if not trip.destinations:
            return UNKNOWN_ROUTE
        try:
            names = await self.container.destination_resolver.resolve_names(trip.destinations)
        except Exception as exc:
            logger.warning(f"Could not resolve destinations of trip {trip.id}: {exc}")
            return UNKNOWN_ROUTE
        if not names:
            return UNKNOWN_ROUTE
        return ROUTE_SEPARATOR.join(names)

    async def _record_audit(self, trip_id: str, analysis: ReturnTripAnalysis) -> None:
        try:
            await self.container.audit_logger.log_return_trip_validation(
                trip_id, analysis, analysis.issues
            )
        except Exception as exc:
            logger.warning(f"Failed to record audit trail for trip {trip_id}: {exc}")

    @staticmethod
    def _build_report(analyses: list[ReturnTripAnalysis]) -> SystemWideReturnTripReport:
        issues_by_type = Counter()
        issues_by_severity = Counter()
        for analysis in analyses:
            for issue in analysis.issues:
                issues_by_type[issue.type.value] += 1
                issues_by_severity[issue.severity.value] += 1

        return SystemWideReturnTripReport(
            total_trips_analyzed=len(analyses),
            trips_with_issues=sum(1 for analysis in analyses if analysis.issues),
            issues_by_type=dict(issues_by_type),
            issues_by_severity=dict(issues_by_severity),
            analyses=analyses,
        )


def get_return_trip_validation_service(**kwargs) -> ReturnTripValidationService:
    """Service wired to the application database"""
    return ReturnTripValidationService(container=get_container(), **kwargs)
