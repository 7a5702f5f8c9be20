"""Evaluation scenarios covering climates, trip lengths and tolerances."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List

from models.weather import DailyReading, TemperatureTolerance


@dataclass
class EvaluationScenario:
    name: str
    description: str
    destination: str
    start_date: date
    trip_days: int
    tolerance: TemperatureTolerance
    readings: List[DailyReading]
    expectations: Dict[str, object]

    @property
    def end_date(self) -> date:
        return self.start_date + timedelta(days=self.trip_days - 1)


def _repeat(max_temp: float, min_temp: float, precip: float, days: int) -> List[DailyReading]:
    return [DailyReading(max_temp=max_temp, min_temp=min_temp, precip_probability=precip) for _ in range(days)]


SCENARIOS = [
    EvaluationScenario(
        name="tokyo_summer_weekend",
        description="Short, hot city break with low rain risk.",
        destination="Tokyo",
        start_date=date(2025, 7, 18),
        trip_days=3,
        tolerance=TemperatureTolerance.NEUTRAL,
        readings=_repeat(34.0, 26.0, 10.0, 3),
        expectations={
            "outerwear": [],
            "footwear_includes": ["sandals"],
            "accessories_include": ["sunglasses", "hat"],
            "accessories_exclude": ["compact umbrella"],
        },
    ),
    EvaluationScenario(
        name="reykjavik_winter_fortnight",
        description="Long, freezing and wet trip for a cold-sensitive traveller.",
        destination="Reykjavik",
        start_date=date(2025, 1, 6),
        trip_days=10,
        tolerance=TemperatureTolerance.COLD_SENSITIVE,
        readings=_repeat(6.0, -5.0, 65.0, 10),
        expectations={
            "max_tops": 8,
            "outerwear": ["heavy coat", "thermals"],
            "footwear_includes": ["boots"],
            "accessories_include": ["scarf", "gloves", "compact umbrella"],
        },
    ),
    EvaluationScenario(
        name="london_spring_showers",
        description="Mild week with moderate rain; a light jacket already covers the rain.",
        destination="London",
        start_date=date(2025, 4, 14),
        trip_days=7,
        tolerance=TemperatureTolerance.NEUTRAL,
        readings=_repeat(21.0, 13.0, 45.0, 7),
        expectations={
            "outerwear": ["light jacket"],
            "footwear_includes": ["sandals"],
            "accessories_include": ["compact umbrella"],
        },
    ),
    EvaluationScenario(
        name="lisbon_autumn_heat_sensitive",
        description="Warm autumn trip for a heat-sensitive traveller with cool nights.",
        destination="Lisbon",
        start_date=date(2025, 9, 22),
        trip_days=4,
        tolerance=TemperatureTolerance.HEAT_SENSITIVE,
        readings=_repeat(27.0, 17.0, 25.0, 4),
        expectations={
            "outerwear": ["light cardigan"],
            "accessories_include": ["sunglasses", "hat"],
            "accessories_exclude": ["scarf"],
        },
    ),
    EvaluationScenario(
        name="singapore_monsoon",
        description="Hot, very wet long stay.",
        destination="Singapore",
        start_date=date(2025, 12, 1),
        trip_days=12,
        tolerance=TemperatureTolerance.NEUTRAL,
        readings=_repeat(31.0, 25.0, 80.0, 12),
        expectations={
            "max_tops": 8,
            "outerwear": ["rain jacket"],
            "footwear_includes": ["sandals", "boots"],
            "accessories_include": ["compact umbrella"],
        },
    ),
]
