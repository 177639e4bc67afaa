"""Errors raised by the return trip validation data layer"""


class ReturnTripValidationError(Exception):
    """Base error for the return trip validation module"""


class TripNotFoundError(ReturnTripValidationError):
    """Raised when a trip id doesn't exist in the trip log"""

    def __init__(self, trip_id: str):
        self.trip_id = trip_id
        super().__init__(f"Trip not found: {trip_id}")


class TripRepositoryError(ReturnTripValidationError):
    """Raised when the trip data source can't be queried"""
