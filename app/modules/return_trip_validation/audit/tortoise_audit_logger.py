"""Tortoise ORM implementation of the audit logger"""

from app.enums import AuditActionEnum
from app.models import AuditTrail
from app.modules.return_trip_validation.audit.audit_logger import (
    AuditLogger,
    build_validation_record,
)
from app.modules.return_trip_validation.utils import get_logger

logger = get_logger()


class TortoiseAuditLogger(AuditLogger):
    """Writes validation runs to the audit_trail table"""

    async def log_return_trip_validation(self, trip_id, analysis, issues) -> str:
        record = build_validation_record(trip_id, analysis, issues)
        entry = await AuditTrail.create(
            action_performed=AuditActionEnum.VALIDATED,
            **record,
        )
        logger.debug(f"Audit entry {entry.id} recorded for trip {trip_id}")
        return str(entry.id)
