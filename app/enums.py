# -*- coding: utf-8 -*-
from enum import Enum


class ReturnTripIssueTypeEnum(str, Enum):
    DISTANCE_MISMATCH = "distance_mismatch"
    FUEL_INCONSISTENCY = "fuel_inconsistency"
    TIME_GAP = "time_gap"
    MISSING_RETURN = "missing_return"
    ORPHANED_RETURN = "orphaned_return"


class IssueSeverityEnum(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AuditSeverityEnum(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditActionEnum(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    VALIDATED = "validated"
    CORRECTED = "corrected"
    FLAGGED = "flagged"
    ANALYZED = "analyzed"
    DETECTED = "detected"
