"""Perceived temperature shared by the packing rules and the narrative."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from models.weather import TemperatureTolerance, WeatherAggregate

TOLERANCE_OFFSETS_C: Dict[TemperatureTolerance, float] = {
    TemperatureTolerance.COLD_SENSITIVE: 2.0,
    TemperatureTolerance.NEUTRAL: 0.0,
    TemperatureTolerance.HEAT_SENSITIVE: -2.0,
}


@dataclass(frozen=True)
class PerceivedTemperature:
    avg: float
    min: float
    max: float


def perceived_offset(tolerance: TemperatureTolerance | str) -> float:
    return TOLERANCE_OFFSETS_C[TemperatureTolerance.parse(tolerance)]


def perceive(aggregate: WeatherAggregate, tolerance: TemperatureTolerance | str) -> PerceivedTemperature:
    """Shift avg/min/max by the tolerance offset."""

    offset = perceived_offset(tolerance)
    return PerceivedTemperature(
        avg=aggregate.avg + offset,
        min=aggregate.min + offset,
        max=aggregate.max + offset,
    )


__all__ = ["PerceivedTemperature", "TOLERANCE_OFFSETS_C", "perceive", "perceived_offset"]
