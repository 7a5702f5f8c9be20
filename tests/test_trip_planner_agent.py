"""Trip planner agent: request validation, error translation and the happy path."""

from datetime import date

from agents.trip_planner import PAST_START_MESSAGE, RATE_LIMITED_MESSAGE, TripPlannerAgent
from models.errors import DateOutOfRangeError, ForecastUnavailableError, LocationNotFoundError
from models.weather import DailyReading
from packing_app.config import PackingConfig
from tools.rate_limiter import InMemoryRateLimiter
from tools.weather_provider import ForecastProvider, MockForecastProvider

TODAY = date(2025, 7, 1)


class _FailingProvider(ForecastProvider):
    def __init__(self, error: Exception) -> None:
        self.error = error

    def get_daily_readings(self, destination, start_date, end_date):
        raise self.error


def _payload(**overrides) -> dict:
    payload = {
        "destination": "Tokyo",
        "start_date": "2025-07-18",
        "end_date": "2025-07-20",
        "tolerance": "neutral",
    }
    payload.update(overrides)
    return payload


def _agent(provider: ForecastProvider | None = None, **kwargs) -> TripPlannerAgent:
    readings = [DailyReading(34.0, 26.0, 10.0) for _ in range(3)]
    return TripPlannerAgent(
        config=PackingConfig(default_humidity=75.0),
        provider=provider or MockForecastProvider(readings=readings, city="Tokyo"),
        **kwargs,
    )


def test_plan_returns_rounded_weather_and_packing() -> None:
    response = _agent().plan(_payload(), today=TODAY)

    assert response["status"] == "ok"
    plan = response["plan"]
    assert plan["weather"] == {
        "city": "Tokyo",
        "avg": 30,
        "min": 26,
        "max": 34,
        "humidity": 75,
        "rain_chance": 10,
        "summary": "Warm weather, light clothing recommended",
        "summary_line": "Hot weather; light, breathable clothing essential.",
    }
    assert plan["trip_days"] == 3
    assert plan["packing"]["tops"]["short_sleeve"] == 4
    assert plan["notes"] == ["High humidity - breathable fabrics recommended"]
    assert response["request"]["tolerance"] == "neutral"
    assert response["user_facing_summary"].startswith("Hot weather")


def test_rate_limited_requests_are_refused() -> None:
    agent = _agent(rate_limiter=InMemoryRateLimiter(limit=1, window_seconds=600))

    assert agent.plan(_payload(), client_id="1.2.3.4", today=TODAY)["status"] == "ok"
    refused = agent.plan(_payload(), client_id="1.2.3.4", today=TODAY)

    assert refused == {"status": "error", "error_type": "rate_limited", "message": RATE_LIMITED_MESSAGE}
    assert agent.plan(_payload(), client_id="5.6.7.8", today=TODAY)["status"] == "ok"


def test_end_before_start_is_rejected() -> None:
    response = _agent().plan(_payload(end_date="2025-07-17"), today=TODAY)

    assert response["status"] == "error"
    assert response["error_type"] == "invalid_request"
    assert response["message"] == "End date must be after start date"


def test_past_start_date_is_rejected() -> None:
    response = _agent().plan(_payload(start_date="2025-06-30"), today=TODAY)

    assert response["message"] == PAST_START_MESSAGE


def test_blank_destination_is_rejected() -> None:
    response = _agent().plan(_payload(destination="   "), today=TODAY)

    assert response["error_type"] == "invalid_request"
    assert response["message"] == "Destination is required"


def test_unknown_tolerance_is_rejected() -> None:
    response = _agent().plan(_payload(tolerance="lukewarm"), today=TODAY)

    assert response["status"] == "error"
    assert response["error_type"] == "invalid_request"


def test_missing_temperatures_map_to_insufficient_data() -> None:
    provider = MockForecastProvider(readings=[DailyReading(None, None, 20.0)])

    response = _agent(provider).plan(_payload(), today=TODAY)

    assert response["error_type"] == "insufficient_data"


def test_provider_failures_are_translated() -> None:
    cases = {
        "location_not_found": LocationNotFoundError('Could not find coordinates for "Atlantis"'),
        "date_out_of_range": DateOutOfRangeError("out of range"),
        "forecast_unavailable": ForecastUnavailableError("Weather API error: 500"),
    }
    for error_type, error in cases.items():
        response = _agent(_FailingProvider(error)).plan(_payload(), today=TODAY)
        assert response["status"] == "error"
        assert response["error_type"] == error_type
        assert response["message"] == str(error)


def test_unexpected_failures_get_generic_message() -> None:
    response = _agent(_FailingProvider(KeyError("daily"))).plan(_payload(), today=TODAY)

    assert response["error_type"] == "internal"
    assert response["message"] == "Failed to generate packing plan. Please try again."


def test_provider_receives_validated_dates() -> None:
    provider = MockForecastProvider(readings=[DailyReading(20.0, 12.0, 0.0)])

    _agent(provider).plan(_payload(destination="  Lisbon "), today=TODAY)

    assert provider.calls == [("Lisbon", date(2025, 7, 18), date(2025, 7, 20))]
