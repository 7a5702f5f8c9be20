"""Packing plan schemas."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from models.weather import TemperatureTolerance, WeatherAggregate


@dataclass(frozen=True)
class PackingItem:
    name: str
    count: int


@dataclass(frozen=True)
class TopsPlan:
    short_sleeve: int
    long_sleeve: int
    note: Optional[str] = None

    @property
    def total(self) -> int:
        return self.short_sleeve + self.long_sleeve


@dataclass(frozen=True)
class BottomsPlan:
    shorts: int
    pants: int
    note: Optional[str] = None

    @property
    def total(self) -> int:
        return self.shorts + self.pants


@dataclass(frozen=True)
class PackingPlan:
    """Clothing quantities plus advisory notes for one trip."""

    tops: TopsPlan
    bottoms: BottomsPlan
    outerwear: Tuple[PackingItem, ...] = ()
    footwear: Tuple[PackingItem, ...] = ()
    accessories: Tuple[str, ...] = ()
    notes: Tuple[str, ...] = ()

    def with_notes(self, notes: Tuple[str, ...]) -> "PackingPlan":
        return replace(self, notes=tuple(notes))

    def to_dict(self) -> Dict[str, object]:
        return {
            "tops": {
                "short_sleeve": self.tops.short_sleeve,
                "long_sleeve": self.tops.long_sleeve,
                "total": self.tops.total,
                "note": self.tops.note,
            },
            "bottoms": {
                "shorts": self.bottoms.shorts,
                "pants": self.bottoms.pants,
                "total": self.bottoms.total,
                "note": self.bottoms.note,
            },
            "outerwear": [{"name": item.name, "count": item.count} for item in self.outerwear],
            "footwear": [{"name": item.name, "count": item.count} for item in self.footwear],
            "accessories": list(self.accessories),
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class TripPlan:
    """Packing plan together with the weather it was derived from."""

    weather: WeatherAggregate
    summary_line: str
    packing: PackingPlan
    trip_days: int
    tolerance: TemperatureTolerance

    def to_dict(self) -> Dict[str, object]:
        weather = self.weather.rounded()
        weather["summary_line"] = self.summary_line
        return {
            "weather": weather,
            "trip_days": self.trip_days,
            "tolerance": self.tolerance.value,
            "packing": self.packing.to_dict(),
            "notes": list(self.packing.notes),
        }


__all__ = ["PackingItem", "TopsPlan", "BottomsPlan", "PackingPlan", "TripPlan"]
