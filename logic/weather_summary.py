"""Reduce daily forecast readings into a single weather aggregate."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from models.errors import InsufficientDataError
from models.weather import DEFAULT_HUMIDITY, DailyReading, WeatherAggregate

# (upper bound exclusive, phrase); the last band catches everything above.
TEMPERATURE_BANDS_C = [
    (5.0, "Cold weather with freezing temperatures"),
    (15.0, "Cool weather, bring warm layers"),
    (25.0, "Mild weather, comfortable temperatures"),
    (35.0, "Warm weather, light clothing recommended"),
]
HOT_PHRASE = "Hot weather, stay cool and hydrated"

# (lower bound exclusive, phrase)
RANGE_BANDS_C = [
    (15.0, "; significant temperature swings between day and night"),
    (8.0, "; moderate temperature variation"),
]
RAIN_BANDS_PCT = [
    (70.0, ". High chance of rain, pack waterproof items"),
    (40.0, ". Moderate chance of rain, consider rain gear"),
    (20.0, ". Low chance of rain"),
]


def describe_weather(avg: float, minimum: float, maximum: float, rain_chance: float) -> str:
    """Compose the descriptive summary from temperature, spread and rain bands."""

    summary = HOT_PHRASE
    for upper, phrase in TEMPERATURE_BANDS_C:
        if avg < upper:
            summary = phrase
            break

    spread = maximum - minimum
    for lower, phrase in RANGE_BANDS_C:
        if spread > lower:
            summary += phrase
            break

    for lower, phrase in RAIN_BANDS_PCT:
        if rain_chance > lower:
            summary += phrase
            break
    return summary


def _valid_readings(readings: Iterable[DailyReading]) -> List[DailyReading]:
    return [reading for reading in readings if reading.is_complete]


def summarize(
    readings: Sequence[DailyReading],
    city: str = "",
    humidity: float | None = None,
) -> WeatherAggregate:
    """Aggregate daily readings.

    Readings missing a max or min temperature are dropped before the
    temperature statistics are computed. Rain chance is averaged over every
    supplied reading, with missing probabilities counted as zero.

    Raises:
        InsufficientDataError: when no complete reading remains.
    """

    all_readings = list(readings)
    valid = _valid_readings(all_readings)
    if not valid:
        raise InsufficientDataError("No temperature data available for the selected dates")

    avg = sum(reading.midpoint for reading in valid) / len(valid)
    minimum = min(reading.min_temp for reading in valid)  # type: ignore[type-var]
    maximum = max(reading.max_temp for reading in valid)  # type: ignore[type-var]
    rain_chance = sum(reading.precip_probability or 0.0 for reading in all_readings) / len(all_readings)

    return WeatherAggregate(
        city=city,
        avg=avg,
        min=float(minimum),
        max=float(maximum),
        humidity=DEFAULT_HUMIDITY if humidity is None else float(humidity),
        rain_chance=rain_chance,
        summary=describe_weather(avg, float(minimum), float(maximum), rain_chance),
    )


__all__ = ["describe_weather", "summarize", "TEMPERATURE_BANDS_C", "RANGE_BANDS_C", "RAIN_BANDS_PCT"]
