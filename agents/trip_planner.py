"""Trip planner agent wiring request validation, forecast lookup and the packing core."""

from __future__ import annotations

from datetime import date as dt_date
import logging
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from packing_app.config import PackingConfig
from packing_app.logging_config import get_logger, log_event, operation_context
from logic.planner import plan_trip
from logic.validation import PlanRequest, PlanResponse, first_error_message, validation_failure
from models.errors import (
    DateOutOfRangeError,
    ForecastError,
    InsufficientDataError,
    LocationNotFoundError,
    PackingPlanError,
)
from models.weather import TripWindow
from tools.rate_limiter import RateLimiter, UnlimitedRateLimiter
from tools.weather_provider import ForecastProvider


LOGGER = get_logger(__name__)

RATE_LIMITED_MESSAGE = "Too many requests. Please try again later."
PAST_START_MESSAGE = "Start date cannot be in the past"
GENERIC_FAILURE_MESSAGE = "Failed to generate packing plan. Please try again."
NO_DATA_MESSAGE = "No temperature data available for the selected dates. Please try dates within the next 16 days."


class TripPlannerAgent:
    """Turns a raw plan request into a packing plan or a user-facing error.

    The packing core is pure; this agent owns everything around it: rate
    limiting, request validation, the forecast lookup and the translation of
    failures into messages.
    """

    def __init__(
        self,
        config: PackingConfig,
        provider: ForecastProvider,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self.config = config
        self.provider = provider
        self.rate_limiter = rate_limiter or UnlimitedRateLimiter()

    def _error(self, error_type: str, message: str, correlation_id: str) -> Dict[str, Any]:
        log_event(
            LOGGER,
            level=logging.WARNING,
            event="plan_request_failed",
            agent="trip_planner",
            correlation_id=correlation_id,
            error_type=error_type,
            reason=message,
        )
        return {"status": "error", "error_type": error_type, "message": message}

    def plan(
        self,
        payload: Mapping[str, Any] | PlanRequest,
        client_id: str = "default",
        today: dt_date | None = None,
    ) -> Dict[str, Any]:
        """Validate the request, fetch the forecast and build the packing plan."""

        with operation_context("agent:trip_planner.plan") as correlation_id:
            if not self.rate_limiter.try_acquire(client_id):
                return self._error("rate_limited", RATE_LIMITED_MESSAGE, correlation_id)

            try:
                request = payload if isinstance(payload, PlanRequest) else PlanRequest.model_validate(dict(payload))
            except ValidationError as exc:
                return self._error("invalid_request", first_error_message(exc), correlation_id)

            current_day = today or dt_date.today()
            if request.start_date < current_day:
                return self._error("invalid_request", PAST_START_MESSAGE, correlation_id)

            log_event(
                LOGGER,
                level=logging.INFO,
                event="agent_call_started",
                agent="trip_planner",
                method="plan",
                correlation_id=correlation_id,
                destination=request.destination,
                tolerance=request.tolerance.value,
            )

            try:
                window = TripWindow(request.start_date, request.end_date)
                forecast = self.provider.get_daily_readings(
                    destination=request.destination,
                    start_date=request.start_date,
                    end_date=request.end_date,
                )
                trip_plan = plan_trip(
                    forecast.city,
                    forecast.readings,
                    request.tolerance,
                    window,
                    humidity=self.config.default_humidity,
                )
            except LocationNotFoundError as exc:
                return self._error("location_not_found", str(exc), correlation_id)
            except DateOutOfRangeError as exc:
                return self._error("date_out_of_range", str(exc), correlation_id)
            except ForecastError as exc:
                return self._error("forecast_unavailable", str(exc), correlation_id)
            except InsufficientDataError:
                return self._error("insufficient_data", NO_DATA_MESSAGE, correlation_id)
            except PackingPlanError as exc:
                return self._error("invalid_request", str(exc), correlation_id)
            except Exception:
                log_event(
                    LOGGER,
                    level=logging.ERROR,
                    event="plan_request_crashed",
                    agent="trip_planner",
                    correlation_id=correlation_id,
                    exc_info=True,
                )
                return {"status": "error", "error_type": "internal", "message": GENERIC_FAILURE_MESSAGE}

            response = {
                "status": "ok",
                "request": request.model_dump(mode="json"),
                "plan": trip_plan.to_dict(),
                "user_facing_summary": trip_plan.summary_line,
            }
            try:
                PlanResponse.model_validate(response)
            except ValidationError as exc:
                log_event(
                    LOGGER,
                    level=logging.WARNING,
                    event="plan_response_invalid",
                    agent="trip_planner",
                    details=str(exc),
                    correlation_id=correlation_id,
                )
                return validation_failure("Packing plan failed schema checks", exc)

            log_event(
                LOGGER,
                level=logging.INFO,
                event="agent_call_completed",
                agent="trip_planner",
                method="plan",
                correlation_id=correlation_id,
                trip_days=trip_plan.trip_days,
                tops=trip_plan.packing.tops.total,
                bottoms=trip_plan.packing.bottoms.total,
            )
            return response


__all__ = ["TripPlannerAgent", "RATE_LIMITED_MESSAGE", "PAST_START_MESSAGE", "GENERIC_FAILURE_MESSAGE"]
