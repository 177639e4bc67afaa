"""Domain entities for trip log data"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Trip:
    """Single trip record as read from the trip log"""
    id: str
    vehicle_id: str
    vehicle_registration: str
    trip_serial_number: str
    trip_start_date: datetime
    trip_end_date: datetime
    start_km: float
    end_km: float
    is_return_trip: bool = False
    destinations: list[str] = field(default_factory=list)
    fuel_quantity: Optional[float] = None
    calculated_kmpl: Optional[float] = None

    @property
    def distance_km(self) -> float:
        """Odometer distance covered by the trip"""
        return self.end_km - self.start_km

    @property
    def duration_hours(self) -> float:
        """Trip duration in hours"""
        return (self.trip_end_date - self.trip_start_date).total_seconds() / 3600.0

    @property
    def has_fuel(self) -> bool:
        """Whether a positive fuel quantity was reported"""
        return self.fuel_quantity is not None and self.fuel_quantity > 0
