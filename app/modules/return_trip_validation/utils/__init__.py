"""
utils package - Shared helpers for return trip validation
"""

from app.modules.return_trip_validation.utils.logging import get_logger
from app.modules.return_trip_validation.utils.datetime import DateTimeService

__all__ = [
    "get_logger",
    "DateTimeService",
]
