"""Configuration helpers for the packing assistant."""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
import os
from typing import Optional

DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"


@dataclass
class PackingConfig:
    """Configuration values for the packing assistant.

    Defaults work offline for tests; deployments override them through the
    environment or an environment YAML file.
    """

    forecast_url: str = DEFAULT_FORECAST_URL
    geocoding_url: str = DEFAULT_GEOCODING_URL
    request_timeout_seconds: float = 10.0
    default_humidity: float = 65.0
    forecast_min_date: Optional[date] = None
    forecast_max_date: Optional[date] = None
    rate_limit_requests: int = 30
    rate_limit_window_seconds: float = 600.0
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "PackingConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables, which win.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("PACKING_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        return cls(
            forecast_url=str(get_value("forecast_url") or DEFAULT_FORECAST_URL),
            geocoding_url=str(get_value("geocoding_url") or DEFAULT_GEOCODING_URL),
            request_timeout_seconds=float(get_value("request_timeout_seconds") or 10.0),
            default_humidity=float(get_value("default_humidity") or 65.0),
            forecast_min_date=cls._parse_date(get_value("forecast_min_date")),
            forecast_max_date=cls._parse_date(get_value("forecast_max_date")),
            rate_limit_requests=int(get_value("rate_limit_requests") or 30),
            rate_limit_window_seconds=float(get_value("rate_limit_window_seconds") or 600.0),
            environment=env_name,
        )

    @staticmethod
    def _parse_date(raw: Optional[str]) -> Optional[date]:
        if not raw:
            return None
        return date.fromisoformat(raw.strip())

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
