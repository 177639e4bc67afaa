"""Audit trail port for return trip validations"""

from abc import ABC, abstractmethod

import orjson as json

from app.enums import AuditSeverityEnum
from app.modules.return_trip_validation.domain.entities import (
    ReturnTripAnalysis,
    ReturnTripIssue,
)

OPERATION_TYPE = "return_trip_validation"
OPERATION_CATEGORY = "trip_data"
ENTITY_TYPE = "trip"
TAGS = ["return_trip", "validation", "consistency_check"]


class AuditLogger(ABC):
    """Records validation runs in the audit trail"""

    @abstractmethod
    async def log_return_trip_validation(
        self,
        trip_id: str,
        analysis: ReturnTripAnalysis,
        issues: list[ReturnTripIssue],
    ) -> str | None:
        """Persist a validation record, returning its id when one was created"""
        pass


class NullAuditLogger(AuditLogger):
    """Audit logger that discards every record"""

    async def log_return_trip_validation(self, trip_id, analysis, issues) -> None:
        return None


def build_validation_record(
    trip_id: str, analysis: ReturnTripAnalysis, issues: list[ReturnTripIssue]
) -> dict:
    """Audit trail fields describing a single validation run"""
    passed = len(issues) == 0
    return {
        "operation_type": OPERATION_TYPE,
        "operation_category": OPERATION_CATEGORY,
        "entity_type": ENTITY_TYPE,
        "entity_id": trip_id,
        "entity_description": f"Return trip validation for trip {trip_id}",
        "validation_results": {
            "passed": passed,
            "issues": [json.loads(issue.json()) for issue in issues],
            "validation_details": json.loads(analysis.json()),
        },
        "severity_level": AuditSeverityEnum.INFO if passed else AuditSeverityEnum.WARNING,
        "tags": list(TAGS),
        "business_context": f"Return trip validation: {'Passed' if passed else 'Failed'}",
    }
