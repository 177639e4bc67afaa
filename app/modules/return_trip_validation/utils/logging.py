"""Logging configuration using loguru for consistency with main app"""

from loguru import logger


def get_logger():
    """Get the loguru logger instance with return_trip_validation context"""
    return logger.bind(name="return_trip_validation")
