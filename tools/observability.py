"""Observability helpers for instrumenting calls to external collaborators."""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Mapping, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from packing_app.logging_config import (
    ensure_correlation_id,
    get_logger,
    log_event,
    redact_for_log,
    tracing_span,
)

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _preview_arguments(arguments: Mapping[str, Any], max_keys: int = 6) -> dict:
    """First few call arguments, scrubbed, with ``self`` dropped."""

    visible = [(key, value) for key, value in arguments.items() if key != "self"]
    preview = dict(visible[:max_keys])
    if len(visible) > max_keys:
        preview["truncated"] = True
    return redact_for_log(preview)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def instrument_call(
    operation: str,
    input_model: type[BaseModel] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap a callable with argument validation, structured logs and a span.

    When ``input_model`` is given, the arguments named by its fields are
    validated and coerced through it before the call; a failure is logged and
    re-raised.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            start = time.perf_counter()
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()

            if input_model:
                checked = {key: value for key, value in bound.arguments.items() if key in input_model.model_fields}
                try:
                    bound.arguments.update(input_model.model_validate(checked).model_dump())
                except ValidationError as exc:
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "call_validation_failed",
                        operation=operation,
                        correlation_id=correlation_id,
                        errors=[error.get("msg") for error in exc.errors()],
                    )
                    raise

            log_event(
                LOGGER,
                logging.INFO,
                "call_started",
                operation=operation,
                correlation_id=correlation_id,
                arguments=_preview_arguments(bound.arguments),
            )
            with tracing_span(f"call:{operation}", correlation_id=correlation_id):
                try:
                    result = func(*bound.args, **bound.kwargs)
                except Exception:
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "call_failed",
                        operation=operation,
                        correlation_id=correlation_id,
                        duration_ms=_elapsed_ms(start),
                        exc_info=True,
                    )
                    raise
            log_event(
                LOGGER,
                logging.INFO,
                "call_completed",
                operation=operation,
                correlation_id=correlation_id,
                duration_ms=_elapsed_ms(start),
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_call"]
