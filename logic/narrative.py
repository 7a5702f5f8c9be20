"""Human-readable weather sentence and advisory notes."""

from __future__ import annotations

from typing import List

from logic.perceived import perceive
from models.weather import TemperatureTolerance, WeatherAggregate

SUMMARY_BANDS_C = [
    (8.0, "Cold conditions; heavy winter gear recommended."),
    (14.0, "Cool weather; layers and warm clothing needed."),
    (20.0, "Mild days, cooler evenings; light layers recommended."),
    (26.0, "Warm days, comfortable evenings; light clothing suitable."),
]
HOT_SUMMARY = "Hot weather; light, breathable clothing essential."

HUMIDITY_NOTE = "High humidity - breathable fabrics recommended"
RAIN_NOTE = "Rain likely - pack waterproof items"
TOLERANCE_NOTES = {
    TemperatureTolerance.COLD_SENSITIVE: "Cold-sensitive - pack extra warm layers",
    TemperatureTolerance.HEAT_SENSITIVE: "Heat-sensitive - prioritize cooling fabrics",
}


def summary_line(aggregate: WeatherAggregate, tolerance: TemperatureTolerance | str) -> str:
    avg = perceive(aggregate, tolerance).avg
    for upper, sentence in SUMMARY_BANDS_C:
        if avg < upper:
            return sentence
    return HOT_SUMMARY


def notes(aggregate: WeatherAggregate, tolerance: TemperatureTolerance | str) -> List[str]:
    parsed = TemperatureTolerance.parse(tolerance)
    advisories: List[str] = []
    if aggregate.humidity > 70:
        advisories.append(HUMIDITY_NOTE)
    if aggregate.rain_chance >= 40:
        advisories.append(RAIN_NOTE)
    if parsed in TOLERANCE_NOTES:
        advisories.append(TOLERANCE_NOTES[parsed])
    return advisories


__all__ = ["notes", "summary_line", "SUMMARY_BANDS_C"]
