"""Error taxonomy for packing plan requests."""

from __future__ import annotations


class PackingPlanError(ValueError):
    """Base class for errors raised by the packing recommendation core."""


class InsufficientDataError(PackingPlanError):
    """Raised when no usable daily readings remain after filtering."""


class InvalidTripWindowError(PackingPlanError):
    """Raised when the trip window ends before it starts or has no days."""


class InvalidToleranceError(PackingPlanError):
    """Raised for a temperature tolerance value outside the known variants."""


class ForecastError(RuntimeError):
    """Base class for failures of the upstream forecast lookup."""


class LocationNotFoundError(ForecastError):
    """Raised when geocoding returns no match for the destination."""


class ForecastUnavailableError(ForecastError):
    """Raised when the forecast service is unreachable or returns a bad payload."""


class DateOutOfRangeError(ForecastError):
    """Raised when the requested dates fall outside the provider's forecast window."""


__all__ = [
    "PackingPlanError",
    "InsufficientDataError",
    "InvalidTripWindowError",
    "InvalidToleranceError",
    "ForecastError",
    "LocationNotFoundError",
    "ForecastUnavailableError",
    "DateOutOfRangeError",
]
