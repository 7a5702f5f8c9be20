"""Compose summarizer, packing rules and narrative into one plan."""

from __future__ import annotations

from typing import Sequence

from logic import narrative
from logic.packing_rules import compute_packing_list
from logic.weather_summary import summarize
from models.packing import PackingPlan, TripPlan
from models.weather import DailyReading, TemperatureTolerance, TripWindow


def plan_trip(
    city: str,
    readings: Sequence[DailyReading],
    tolerance: TemperatureTolerance | str,
    window: TripWindow,
    humidity: float | None = None,
) -> TripPlan:
    """Run the full recommendation for one trip.

    Raises InvalidToleranceError, InsufficientDataError or
    InvalidTripWindowError; nothing is caught here.
    """

    parsed = TemperatureTolerance.parse(tolerance)
    aggregate = summarize(readings, city=city, humidity=humidity)
    packing = compute_packing_list(aggregate, parsed, window.trip_days)
    packing = packing.with_notes(tuple(narrative.notes(aggregate, parsed)))
    return TripPlan(
        weather=aggregate,
        summary_line=narrative.summary_line(aggregate, parsed),
        packing=packing,
        trip_days=window.trip_days,
        tolerance=parsed,
    )


def compute_plan(
    city: str,
    readings: Sequence[DailyReading],
    tolerance: TemperatureTolerance | str,
    window: TripWindow,
) -> PackingPlan:
    return plan_trip(city, readings, tolerance, window).packing


__all__ = ["compute_plan", "plan_trip"]
