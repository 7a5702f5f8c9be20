"""Weather summarizer coverage."""

import pytest

from logic.weather_summary import describe_weather, summarize
from models.errors import InsufficientDataError
from models.weather import DailyReading


def test_summarize_filters_incomplete_days_but_averages_rain_over_all() -> None:
    readings = [
        DailyReading(max_temp=10.0, min_temp=2.0, precip_probability=20.0),
        DailyReading(max_temp=14.0, min_temp=6.0, precip_probability=None),
        DailyReading(max_temp=None, min_temp=3.0, precip_probability=90.0),
    ]

    aggregate = summarize(readings, city="Bergen")

    assert aggregate.city == "Bergen"
    assert aggregate.avg == pytest.approx(8.0)
    assert aggregate.min == 2.0
    assert aggregate.max == 14.0
    assert aggregate.rain_chance == pytest.approx(110 / 3)
    assert aggregate.humidity == 65.0
    assert aggregate.summary == (
        "Cool weather, bring warm layers; moderate temperature variation. Low chance of rain"
    )


def test_summarize_keeps_full_precision() -> None:
    readings = [
        DailyReading(max_temp=20.3, min_temp=11.1, precip_probability=33.0),
        DailyReading(max_temp=21.9, min_temp=12.4, precip_probability=34.0),
    ]

    aggregate = summarize(readings)

    assert aggregate.avg == pytest.approx((15.7 + 17.15) / 2)
    assert aggregate.rain_chance == pytest.approx(33.5)
    assert aggregate.min <= aggregate.avg <= aggregate.max


def test_sub_zero_halves_round_up_for_display() -> None:
    aggregate = summarize([DailyReading(0.0, -5.0, 0.0), DailyReading(1.0, -6.0, 0.0)])

    assert aggregate.avg == pytest.approx(-2.5)
    assert aggregate.rounded()["avg"] == -2
    assert aggregate.rounded()["min"] == -6


def test_summarize_uses_supplied_humidity() -> None:
    aggregate = summarize([DailyReading(30.0, 24.0, 0.0)], humidity=82)
    assert aggregate.humidity == 82.0


@pytest.mark.parametrize(
    "readings",
    [
        [],
        [DailyReading(max_temp=None, min_temp=None, precip_probability=50.0)],
        [DailyReading(max_temp=12.0, min_temp=None), DailyReading(max_temp=None, min_temp=4.0)],
    ],
)
def test_summarize_without_complete_readings_raises(readings) -> None:
    with pytest.raises(InsufficientDataError):
        summarize(readings)


@pytest.mark.parametrize(
    ("avg", "expected"),
    [
        (-3.0, "Cold weather with freezing temperatures"),
        (4.99, "Cold weather with freezing temperatures"),
        (5.0, "Cool weather, bring warm layers"),
        (14.99, "Cool weather, bring warm layers"),
        (15.0, "Mild weather, comfortable temperatures"),
        (25.0, "Warm weather, light clothing recommended"),
        (34.99, "Warm weather, light clothing recommended"),
        (35.0, "Hot weather, stay cool and hydrated"),
    ],
)
def test_describe_weather_temperature_bands(avg: float, expected: str) -> None:
    assert describe_weather(avg, avg - 1, avg + 1, 0.0) == expected


@pytest.mark.parametrize(
    ("spread", "suffix"),
    [
        (8.0, ""),
        (8.5, "; moderate temperature variation"),
        (15.0, "; moderate temperature variation"),
        (15.5, "; significant temperature swings between day and night"),
    ],
)
def test_describe_weather_range_phrases(spread: float, suffix: str) -> None:
    assert describe_weather(20.0, 10.0, 10.0 + spread, 0.0) == "Mild weather, comfortable temperatures" + suffix


@pytest.mark.parametrize(
    ("rain", "suffix"),
    [
        (20.0, ""),
        (20.5, ". Low chance of rain"),
        (40.0, ". Low chance of rain"),
        (40.5, ". Moderate chance of rain, consider rain gear"),
        (70.0, ". Moderate chance of rain, consider rain gear"),
        (70.5, ". High chance of rain, pack waterproof items"),
    ],
)
def test_describe_weather_rain_phrases(rain: float, suffix: str) -> None:
    assert describe_weather(20.0, 18.0, 22.0, rain) == "Mild weather, comfortable temperatures" + suffix
