"""Application bootstrap for the packing assistant."""

from datetime import date as dt_date
import logging
from typing import Any, Dict, Mapping

from packing_app.config import PackingConfig
from packing_app.logging_config import configure_logging, get_logger, log_event
from agents.trip_planner import TripPlannerAgent
from logic.validation import PlanRequest
from tools.rate_limiter import InMemoryRateLimiter, RateLimiter
from tools.weather_provider import ForecastProvider, OpenMeteoProvider


LOGGER = get_logger(__name__)


class PackingAssistantApp:
    """Wires together configuration, the forecast provider, rate limiting and the planner."""

    def __init__(
        self,
        config: PackingConfig | None = None,
        provider: ForecastProvider | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self.config = config or PackingConfig.from_env()
        configure_logging()

        self.provider = provider or OpenMeteoProvider(
            timeout_seconds=self.config.request_timeout_seconds,
            forecast_url=self.config.forecast_url,
            geocoding_url=self.config.geocoding_url,
            min_date=self.config.forecast_min_date,
            max_date=self.config.forecast_max_date,
        )
        self.rate_limiter = rate_limiter or InMemoryRateLimiter(
            limit=self.config.rate_limit_requests,
            window_seconds=self.config.rate_limit_window_seconds,
        )
        self.planner = TripPlannerAgent(
            config=self.config,
            provider=self.provider,
            rate_limiter=self.rate_limiter,
        )
        log_event(
            LOGGER,
            level=logging.INFO,
            event="app_started",
            environment=self.config.environment or "local",
            provider=type(self.provider).__name__,
        )

    def get_plan(
        self,
        payload: Mapping[str, Any] | PlanRequest,
        client_id: str = "default",
        today: dt_date | None = None,
    ) -> Dict[str, Any]:
        """Entry point shared by the HTTP server and the CLI."""

        return self.planner.plan(payload, client_id=client_id, today=today)


__all__ = ["PackingAssistantApp"]
