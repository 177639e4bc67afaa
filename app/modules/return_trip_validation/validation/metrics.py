# -*- coding: utf-8 -*-
"""
metrics.py - Quantitative summary of outbound/return legs
---------------------------------------------------------
Single responsibility: Compute distances, variances and time gaps.
All functions are pure; optional inputs yield None instead of raising.
"""
import math
from typing import Optional

from ..domain import ReturnTripMetrics, Trip
from ..utils import DateTimeService


class MetricsCalculator:
    """Derives the metrics record attached to each analysis"""

    @staticmethod
    def variance_percent(reference: float, observed: float) -> Optional[float]:
        """Relative difference of `observed` against `reference`, in percent"""
        if not reference:
            return None
        return abs((reference - observed) / reference) * 100

    @staticmethod
    def deviation_percent(reference: float, observed: float) -> float:
        """Like `variance_percent`, but a zero reference against a non-zero value is unbounded"""
        if reference:
            return abs((reference - observed) / reference) * 100
        return math.inf if observed else 0.0

    @staticmethod
    def fuel_efficiency(trip: Trip) -> Optional[float]:
        """Kilometres per litre, when a positive fuel quantity is known"""
        if not trip.has_fuel:
            return None
        return trip.distance_km / trip.fuel_quantity

    @classmethod
    def distance_variance(cls, outbound: Trip, return_trip: Trip) -> Optional[float]:
        return cls.variance_percent(outbound.distance_km, return_trip.distance_km)

    @classmethod
    def efficiency_variance(cls, outbound: Trip, return_trip: Trip) -> Optional[float]:
        """Fuel efficiency variance; None unless both legs report fuel"""
        outbound_efficiency = cls.fuel_efficiency(outbound)
        return_efficiency = cls.fuel_efficiency(return_trip)
        if outbound_efficiency is None or return_efficiency is None:
            return None
        return cls.variance_percent(outbound_efficiency, return_efficiency)

    @staticmethod
    def time_gap_hours(outbound: Trip, return_trip: Trip) -> float:
        """Hours between the end of the outbound leg and the start of the return leg"""
        return DateTimeService.hours_between(outbound.trip_end_date, return_trip.trip_start_date)

    @classmethod
    def calculate_pair_metrics(cls, outbound: Trip, return_trip: Trip) -> ReturnTripMetrics:
        efficiency_variance = cls.efficiency_variance(outbound, return_trip)
        return ReturnTripMetrics(
            outbound_distance=outbound.distance_km,
            return_distance=return_trip.distance_km,
            distance_variance=cls.distance_variance(outbound, return_trip),
            outbound_fuel=outbound.fuel_quantity,
            return_fuel=return_trip.fuel_quantity,
            fuel_variance=efficiency_variance if efficiency_variance is not None else 0.0,
            time_gap_hours=cls.time_gap_hours(outbound, return_trip),
        )

    @staticmethod
    def calculate_round_trip_metrics(trip: Trip) -> ReturnTripMetrics:
        """A single round-trip record is split evenly into two assumed legs"""
        half_distance = trip.distance_km / 2
        half_fuel = trip.fuel_quantity / 2 if trip.fuel_quantity is not None else None
        return ReturnTripMetrics(
            outbound_distance=half_distance,
            return_distance=half_distance,
            distance_variance=0.0,
            outbound_fuel=half_fuel,
            return_fuel=half_fuel,
            fuel_variance=0.0,
        )
