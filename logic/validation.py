"""Pydantic schemas and helpers for validating plan requests and responses."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from models.weather import TemperatureTolerance


class PlanRequest(BaseModel):
    """Form fields accepted for a packing plan."""

    destination: str = Field(min_length=1)
    start_date: date
    end_date: date
    tolerance: TemperatureTolerance = TemperatureTolerance.NEUTRAL

    @field_validator("destination", mode="before")
    @classmethod
    def _strip_destination(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Destination is required")
        return value

    @field_validator("tolerance", mode="before")
    @classmethod
    def _parse_tolerance(cls, value: Any) -> Any:
        if isinstance(value, str):
            cleaned = value.strip().lower().replace("_", "-")
            return cleaned or TemperatureTolerance.NEUTRAL.value
        return value

    @model_validator(mode="after")
    def _validate_range(self) -> "PlanRequest":
        if self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self


class PlanResponse(BaseModel):
    """Minimal structure expected from planner responses."""

    status: Literal["ok", "error", "needs_review"]
    request: Dict[str, Any]
    plan: Dict[str, Any]
    user_facing_summary: Optional[str] = None


class ValidationResult(BaseModel):
    """Wrapper returned when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def first_error_message(exc: Any) -> str:
    """Short message for the first failing field, without pydantic prefixes.

    Accepts a pydantic ``ValidationError`` or FastAPI's ``RequestValidationError``.
    """

    errors = exc.errors()
    if not errors:
        return "Invalid request"
    message = str(errors[0].get("msg", "Invalid request"))
    return message.removeprefix("Value error, ")


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": str(error.get("msg", "")), "type": error.get("type")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "PlanRequest",
    "PlanResponse",
    "ValidationResult",
    "first_error_message",
    "validation_failure",
]
