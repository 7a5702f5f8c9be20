"""Model package exports."""

from models.errors import *  # noqa: F401,F403
from models.packing import BottomsPlan, PackingItem, PackingPlan, TopsPlan, TripPlan
from models.weather import DailyReading, TemperatureTolerance, TripWindow, WeatherAggregate

__all__ = [
    "BottomsPlan",
    "DailyReading",
    "PackingItem",
    "PackingPlan",
    "TemperatureTolerance",
    "TopsPlan",
    "TripPlan",
    "TripWindow",
    "WeatherAggregate",
]
