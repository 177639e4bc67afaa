"""Audit trail integration"""

from app.modules.return_trip_validation.audit.audit_logger import (
    AuditLogger,
    NullAuditLogger,
    build_validation_record,
)
from app.modules.return_trip_validation.audit.tortoise_audit_logger import (
    TortoiseAuditLogger,
)

__all__ = [
    "AuditLogger",
    "NullAuditLogger",
    "TortoiseAuditLogger",
    "build_validation_record",
]
