"""Configuration loading and structured logging helpers."""

import json
import logging
from datetime import date

import pytest

from packing_app.config import DEFAULT_FORECAST_URL, PackingConfig
from packing_app.logging_config import (
    CORRELATION_ID,
    JsonFormatter,
    correlation_context,
    log_event,
    redact_for_log,
)

_ENV_KEYS = [
    "APP_ENV",
    "APP_CONFIG_PATH",
    "PACKING_CONFIG_DIR",
    "FORECAST_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "DEFAULT_HUMIDITY",
    "FORECAST_MIN_DATE",
    "FORECAST_MAX_DATE",
    "RATE_LIMIT_REQUESTS",
    "RATE_LIMIT_WINDOW_SECONDS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_environment() -> None:
    config = PackingConfig.from_env()

    assert config.forecast_url == DEFAULT_FORECAST_URL
    assert config.default_humidity == 65.0
    assert config.rate_limit_requests == 30
    assert config.rate_limit_window_seconds == 600.0
    assert config.forecast_min_date is None
    assert config.environment is None


def test_yaml_file_is_merged_and_env_wins(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "staging.yaml").write_text(
        "# staging overrides\n"
        "request_timeout_seconds: 4\n"
        "default_humidity: 80\n"
        "forecast_min_date: '2025-05-03'\n"
        "forecast_max_date: \"2025-08-19\"\n"
        "rate_limit_requests: 5\n"
    )
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("PACKING_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("RATE_LIMIT_REQUESTS", "12")

    config = PackingConfig.from_env()

    assert config.environment == "staging"
    assert config.request_timeout_seconds == 4.0
    assert config.default_humidity == 80.0
    assert config.forecast_min_date == date(2025, 5, 3)
    assert config.forecast_max_date == date(2025, 8, 19)
    assert config.rate_limit_requests == 12


def test_explicit_config_path(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("forecast_url: http://localhost:9000/forecast\n")
    monkeypatch.setenv("APP_CONFIG_PATH", str(path))

    assert PackingConfig.from_env().forecast_url == "http://localhost:9000/forecast"


def test_redact_for_log_masks_identifiers() -> None:
    scrubbed = redact_for_log(
        {
            "destination": "Tokyo",
            "client_id": "10.0.0.1",
            "nested": [{"email": "a@b.com"}, "contact me at a@b.com"],
            "url": "https://api.open-meteo.com/v1/forecast?latitude=1",
            "trip_days": 3,
        }
    )

    assert scrubbed == {
        "destination": "[redacted]",
        "client_id": "[redacted]",
        "nested": [{"email": "[redacted]"}, "contact me at [redacted-email]"],
        "url": "https://api.open-meteo.com/v1/forecast?[redacted]",
        "trip_days": 3,
    }


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord("packing", logging.INFO, __file__, 1, "plan_built", None, None)
    record.event = "plan_built"
    record.trip_days = 4
    record.when = date(2025, 7, 1)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["event"] == "plan_built"
    assert payload["trip_days"] == 4
    assert payload["when"] == "2025-07-01"


def test_log_event_carries_correlation_id(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("packing.test")
    with caplog.at_level(logging.INFO, logger="packing.test"):
        with correlation_context("abc123"):
            log_event(logger, level=logging.INFO, event="plan_built", destination="Oslo", tops=5)

    record = caplog.records[-1]
    assert record.correlation_id == "abc123"
    assert record.destination == "[redacted]"
    assert record.tops == 5
    assert CORRELATION_ID.get() != "abc123"
