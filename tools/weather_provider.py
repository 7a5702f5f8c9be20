"""Forecast provider abstractions and implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

import requests
from pydantic import BaseModel, Field, ValidationError, model_validator

from models.errors import DateOutOfRangeError, ForecastUnavailableError, LocationNotFoundError
from models.weather import DailyReading
from packing_app.config import DEFAULT_FORECAST_URL, DEFAULT_GEOCODING_URL
from packing_app.logging_config import get_logger
from tools.observability import instrument_call


LOGGER = get_logger(__name__)


class ForecastQuery(BaseModel):
    destination: str = Field(min_length=1)
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def _ordered(self) -> "ForecastQuery":
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot precede start_date")
        return self


class _GeocodingMatch(BaseModel):
    name: str
    latitude: float
    longitude: float
    country: str = ""
    admin1: Optional[str] = None


class _GeocodingResponse(BaseModel):
    results: List[_GeocodingMatch] = []


class _DailySeries(BaseModel):
    time: List[str] = []
    temperature_2m_max: List[Optional[float]] = []
    temperature_2m_min: List[Optional[float]] = []
    precipitation_probability_max: List[Optional[float]] = []


class _ForecastResponse(BaseModel):
    daily: _DailySeries


@dataclass
class ForecastResult:
    """Resolved destination plus its daily readings."""

    city: str
    readings: List[DailyReading] = field(default_factory=list)
    latitude: float | None = None
    longitude: float | None = None


class ForecastProvider(ABC):
    """Abstract forecast provider interface."""

    @abstractmethod
    def get_daily_readings(self, destination: str, start_date: date, end_date: date) -> ForecastResult:
        """Return one reading per day of the requested range."""


def _readings_from_series(series: _DailySeries) -> List[DailyReading]:
    readings: List[DailyReading] = []
    for idx, max_temp in enumerate(series.temperature_2m_max):
        min_temp = series.temperature_2m_min[idx] if idx < len(series.temperature_2m_min) else None
        precip = (
            series.precipitation_probability_max[idx]
            if idx < len(series.precipitation_probability_max)
            else None
        )
        readings.append(DailyReading(max_temp=max_temp, min_temp=min_temp, precip_probability=precip))
    return readings


class OpenMeteoProvider(ForecastProvider):
    """Open-Meteo geocoding + daily forecast client with schema validation."""

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        forecast_url: str = DEFAULT_FORECAST_URL,
        geocoding_url: str = DEFAULT_GEOCODING_URL,
        min_date: date | None = None,
        max_date: date | None = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.forecast_url = forecast_url
        self.geocoding_url = geocoding_url
        self.min_date = min_date
        self.max_date = max_date

    def _check_window(self, start_date: date, end_date: date) -> None:
        too_early = self.min_date is not None and start_date < self.min_date
        too_late = self.max_date is not None and end_date > self.max_date
        if too_early or too_late:
            bounds = f"{self.min_date or 'any date'} and {self.max_date or 'any date'}"
            raise DateOutOfRangeError(
                f"Weather forecast is only available for dates between {bounds}. Please adjust your travel dates."
            )

    def _get_json(self, url: str, params: dict) -> dict:
        try:
            response = requests.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            LOGGER.error("Forecast service unreachable", exc_info=exc)
            raise ForecastUnavailableError("Weather service is unreachable") from exc

        if not response.ok:
            reason = None
            try:
                reason = response.json().get("reason")
            except ValueError:
                pass
            if reason:
                raise ForecastUnavailableError(f"Weather API: {reason}")
            raise ForecastUnavailableError(f"Weather API error: {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise ForecastUnavailableError("Weather API returned a non-JSON payload") from exc

    def geocode(self, destination: str) -> _GeocodingMatch:
        payload = self._get_json(
            self.geocoding_url,
            {"name": destination, "count": 1, "language": "en", "format": "json"},
        )
        try:
            parsed = _GeocodingResponse.model_validate(payload)
        except ValidationError as exc:
            LOGGER.error("Geocoding payload schema validation failed", exc_info=exc)
            raise ForecastUnavailableError("Geocoding response could not be read") from exc
        if not parsed.results:
            raise LocationNotFoundError(f'Could not find coordinates for "{destination}"')
        return parsed.results[0]

    @instrument_call("get_daily_readings", input_model=ForecastQuery)
    def get_daily_readings(self, destination: str, start_date: date, end_date: date) -> ForecastResult:
        self._check_window(start_date, end_date)
        match = self.geocode(destination)
        LOGGER.info("Fetching daily forecast", extra={"start_date": str(start_date), "end_date": str(end_date)})

        payload = self._get_json(
            self.forecast_url,
            {
                "latitude": match.latitude,
                "longitude": match.longitude,
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
                "daily": "temperature_2m_max,temperature_2m_min,precipitation_probability_max",
                "timezone": "auto",
            },
        )
        try:
            parsed = _ForecastResponse.model_validate(payload)
        except ValidationError as exc:
            LOGGER.error("Forecast payload schema validation failed", exc_info=exc)
            raise ForecastUnavailableError("Forecast response could not be read") from exc

        return ForecastResult(
            city=match.name,
            readings=_readings_from_series(parsed.daily),
            latitude=match.latitude,
            longitude=match.longitude,
        )


class MockForecastProvider(ForecastProvider):
    """Offline deterministic forecast provider for tests."""

    def __init__(self, readings: List[DailyReading] | None = None, city: str = "Testville") -> None:
        self.city = city
        self.readings = readings if readings is not None else [
            DailyReading(max_temp=22.0, min_temp=14.0, precip_probability=10.0),
        ]
        self.calls: List[tuple] = []

    def get_daily_readings(self, destination: str, start_date: date, end_date: date) -> ForecastResult:
        LOGGER.info("Returning mock forecast", extra={"start_date": str(start_date), "end_date": str(end_date)})
        self.calls.append((destination, start_date, end_date))
        return ForecastResult(city=self.city or destination, readings=list(self.readings))


__all__ = [
    "ForecastProvider",
    "ForecastQuery",
    "ForecastResult",
    "MockForecastProvider",
    "OpenMeteoProvider",
]
