"""Deterministic packing rules mapping a weather aggregate to clothing counts.

All temperature thresholds are evaluated against perceived temperatures (the
raw aggregate shifted by the traveller's tolerance). Rain thresholds use the
raw aggregate rain chance. Outerwear, footwear and accessories are expressed
as ordered rule tables so each threshold can be tested on its own.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from logic.perceived import PerceivedTemperature, perceive
from models.errors import InvalidTripWindowError
from models.packing import BottomsPlan, PackingItem, PackingPlan, TopsPlan
from models.weather import TemperatureTolerance, WeatherAggregate

MAX_TOPS = 8
MAX_BOTTOMS = 6
HEAVY_RAIN_PCT = 60.0
RAIN_GEAR_PCT = 40.0
HUMID_PCT = 70.0

HOT_TOPS_C = 24.0
COLD_TOPS_C = 5.0
HOT_BOTTOMS_C = 26.0
# (max trip days, extra tops); longer trips fall through to the last value.
HOT_TOPS_BONUS = [(3, 1), (7, 2)]
HOT_TOPS_BONUS_LONG = 3

TOPS_HOT_NOTE = "Extra tops recommended due to hot weather and sweating."
TOPS_COLD_NOTE = "Extra top recommended for layering in cold weather."
TOPS_RAIN_CLAUSE = " Extra top for potential rain."
TOPS_RAIN_NOTE = "Extra top recommended due to high chance of rain."
BOTTOMS_HOT_NOTE = "Extra bottoms recommended due to hot weather and sweating."
BOTTOMS_RAIN_CLAUSE = " Extra bottoms for potential rain."
BOTTOMS_RAIN_NOTE = "Extra bottoms recommended due to high chance of rain."


@dataclass(frozen=True)
class RuleContext:
    """Inputs visible to every rule in the tables below."""

    perceived: PerceivedTemperature
    rain_chance: float
    humidity: float
    trip_days: int


Predicate = Callable[[RuleContext], bool]


@dataclass(frozen=True)
class OuterwearTier:
    name: str
    applies: Predicate
    items: Callable[[RuleContext], List[PackingItem]]


def _half_trip(trip_days: int) -> int:
    return max(1, math.ceil(trip_days / 2))


def _freezing_items(ctx: RuleContext) -> List[PackingItem]:
    items = [PackingItem("heavy coat", 1)]
    if ctx.perceived.min < 0:
        items.append(PackingItem("thermals", _half_trip(ctx.trip_days)))
    return items


def _cold_items(ctx: RuleContext) -> List[PackingItem]:
    items = [PackingItem("heavy coat", 1)]
    if ctx.trip_days > 3:
        items.append(PackingItem("thermals", 1))
    return items


def _warm_items(ctx: RuleContext) -> List[PackingItem]:
    if ctx.perceived.min < 18:
        return [PackingItem("light cardigan", 1)]
    return []


OUTERWEAR_TIERS: Tuple[OuterwearTier, ...] = (
    OuterwearTier("freezing", lambda ctx: ctx.perceived.avg < 5, _freezing_items),
    OuterwearTier("cold", lambda ctx: ctx.perceived.avg < 10, _cold_items),
    OuterwearTier("cool", lambda ctx: ctx.perceived.avg < 15, lambda ctx: [PackingItem("light/heavy jacket", 1)]),
    OuterwearTier("mild", lambda ctx: ctx.perceived.avg < 20, lambda ctx: [PackingItem("light jacket", 1)]),
    OuterwearTier("warm", lambda ctx: ctx.perceived.avg < 25, _warm_items),
)

FOOTWEAR_RULES: Tuple[Tuple[str, Predicate], ...] = (
    ("sneakers", lambda ctx: True),
    ("sandals", lambda ctx: ctx.perceived.avg >= 24 or ctx.trip_days > 4),
    ("boots", lambda ctx: ctx.perceived.avg < 10 or ctx.rain_chance >= HEAVY_RAIN_PCT),
)

ACCESSORY_RULES: Tuple[Tuple[Tuple[str, ...], Predicate], ...] = (
    (("sunglasses", "hat"), lambda ctx: ctx.perceived.max >= 24),
    (("scarf", "gloves"), lambda ctx: ctx.perceived.avg < 15),
    (("compact umbrella",), lambda ctx: ctx.rain_chance >= RAIN_GEAR_PCT),
    (("moisture-wicking socks",), lambda ctx: ctx.humidity > HUMID_PCT and ctx.perceived.avg >= 20),
)


def _append_note(note: Optional[str], clause: str, standalone: str) -> str:
    return note + clause if note else standalone


def _split_majority(total: int, ratio: float) -> Tuple[int, int]:
    """Majority share rounded up; the minority always gets at least one."""

    major = math.ceil(total * ratio)
    return major, max(1, total - major)


def _split_mixed(total: int, ratio: float) -> Tuple[int, int]:
    first = math.ceil(total * ratio)
    return first, total - first


def plan_tops(ctx: RuleContext) -> TopsPlan:
    count = max(1, ctx.trip_days)
    note: Optional[str] = None
    avg = ctx.perceived.avg

    if avg >= HOT_TOPS_C:
        bonus = HOT_TOPS_BONUS_LONG
        for max_days, extra in HOT_TOPS_BONUS:
            if ctx.trip_days <= max_days:
                bonus = extra
                break
        count += bonus
        note = TOPS_HOT_NOTE
    elif avg <= COLD_TOPS_C:
        count += 1
        note = TOPS_COLD_NOTE

    if ctx.rain_chance >= HEAVY_RAIN_PCT:
        count += 1
        note = _append_note(note, TOPS_RAIN_CLAUSE, TOPS_RAIN_NOTE)

    total = min(count, MAX_TOPS)
    if avg >= 22:
        short_sleeve, long_sleeve = _split_majority(total, 0.8)
    elif avg >= 15:
        short_sleeve, long_sleeve = _split_mixed(total, 0.6)
    else:
        long_sleeve, short_sleeve = _split_majority(total, 0.8)
    return TopsPlan(short_sleeve=short_sleeve, long_sleeve=long_sleeve, note=note)


def plan_bottoms(ctx: RuleContext) -> BottomsPlan:
    count = _half_trip(ctx.trip_days)
    note: Optional[str] = None
    avg = ctx.perceived.avg

    if avg >= HOT_BOTTOMS_C:
        count = min(count + 1, MAX_BOTTOMS)
        note = BOTTOMS_HOT_NOTE

    if ctx.rain_chance >= HEAVY_RAIN_PCT:
        count = min(count + 1, MAX_BOTTOMS)
        note = _append_note(note, BOTTOMS_RAIN_CLAUSE, BOTTOMS_RAIN_NOTE)

    total = min(count, MAX_BOTTOMS)
    if avg >= 24:
        shorts, pants = _split_majority(total, 0.7)
    elif avg >= 18:
        shorts, pants = _split_mixed(total, 0.4)
    else:
        pants, shorts = _split_majority(total, 0.8)
    return BottomsPlan(shorts=shorts, pants=pants, note=note)


def plan_outerwear(ctx: RuleContext, tiers: Sequence[OuterwearTier] = OUTERWEAR_TIERS) -> List[PackingItem]:
    items: List[PackingItem] = []
    for tier in tiers:
        if tier.applies(ctx):
            items.extend(tier.items(ctx))
            break

    if ctx.rain_chance >= RAIN_GEAR_PCT:
        covered = any("coat" in item.name or "jacket" in item.name for item in items)
        if not covered:
            items.append(PackingItem("rain jacket", 1))
    return items


def plan_footwear(ctx: RuleContext) -> List[PackingItem]:
    return [PackingItem(name, 1) for name, applies in FOOTWEAR_RULES if applies(ctx)]


def plan_accessories(ctx: RuleContext) -> List[str]:
    accessories: List[str] = []
    for names, applies in ACCESSORY_RULES:
        if not applies(ctx):
            continue
        for name in names:
            if name not in accessories:
                accessories.append(name)
    return accessories


def build_context(
    aggregate: WeatherAggregate, tolerance: TemperatureTolerance | str, trip_days: int
) -> RuleContext:
    if trip_days < 1:
        raise InvalidTripWindowError(f"Trip must span at least one day, got {trip_days}")
    return RuleContext(
        perceived=perceive(aggregate, tolerance),
        rain_chance=aggregate.rain_chance,
        humidity=aggregate.humidity,
        trip_days=trip_days,
    )


def compute_packing_list(
    aggregate: WeatherAggregate, tolerance: TemperatureTolerance | str, trip_days: int
) -> PackingPlan:
    """Return clothing quantities for the trip; ``notes`` is left empty."""

    ctx = build_context(aggregate, tolerance, trip_days)
    return PackingPlan(
        tops=plan_tops(ctx),
        bottoms=plan_bottoms(ctx),
        outerwear=tuple(plan_outerwear(ctx)),
        footwear=tuple(plan_footwear(ctx)),
        accessories=tuple(plan_accessories(ctx)),
    )


__all__ = [
    "ACCESSORY_RULES",
    "FOOTWEAR_RULES",
    "OUTERWEAR_TIERS",
    "OuterwearTier",
    "RuleContext",
    "build_context",
    "compute_packing_list",
    "plan_accessories",
    "plan_bottoms",
    "plan_footwear",
    "plan_outerwear",
    "plan_tops",
]
