"""Weather and trip input types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict

from models.errors import InvalidToleranceError, InvalidTripWindowError

DEFAULT_HUMIDITY = 65.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity (-2.5 -> -2)."""

    return int(math.floor(value + 0.5))


class TemperatureTolerance(str, Enum):
    """How the traveller experiences temperature."""

    COLD_SENSITIVE = "cold-sensitive"
    NEUTRAL = "neutral"
    HEAT_SENSITIVE = "heat-sensitive"

    @classmethod
    def parse(cls, value: "TemperatureTolerance | str") -> "TemperatureTolerance":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            cleaned = value.strip().lower().replace("_", "-")
            for member in cls:
                if member.value == cleaned:
                    return member
        raise InvalidToleranceError(f"Unknown temperature tolerance: {value!r}")


@dataclass(frozen=True)
class DailyReading:
    """One forecast day. Any field may be missing in raw provider output."""

    max_temp: float | None
    min_temp: float | None
    precip_probability: float | None = None

    @property
    def is_complete(self) -> bool:
        return self.max_temp is not None and self.min_temp is not None

    @property
    def midpoint(self) -> float:
        if not self.is_complete:
            raise ValueError("midpoint requires both max_temp and min_temp")
        return (self.max_temp + self.min_temp) / 2  # type: ignore[operator]


@dataclass(frozen=True)
class WeatherAggregate:
    """Single summary of a multi-day forecast, kept at full precision."""

    city: str
    avg: float
    min: float
    max: float
    humidity: float = DEFAULT_HUMIDITY
    rain_chance: float = 0.0
    summary: str = ""

    def rounded(self) -> Dict[str, object]:
        """Presentation view with temperatures and rain chance as integers."""

        return {
            "city": self.city,
            "avg": round_half_up(self.avg),
            "min": round_half_up(self.min),
            "max": round_half_up(self.max),
            "humidity": round_half_up(self.humidity),
            "rain_chance": round_half_up(self.rain_chance),
            "summary": self.summary,
        }


@dataclass(frozen=True)
class TripWindow:
    """Inclusive travel date range."""

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise InvalidTripWindowError(
                f"Trip ends ({self.end_date.isoformat()}) before it starts ({self.start_date.isoformat()})"
            )

    @property
    def trip_days(self) -> int:
        return max(1, (self.end_date - self.start_date).days + 1)


__all__ = [
    "DEFAULT_HUMIDITY",
    "DailyReading",
    "TemperatureTolerance",
    "TripWindow",
    "WeatherAggregate",
    "round_half_up",
]
