# ABOUTME: Configuration for the NWS forecast client, loaded from .env and the environment.
# ABOUTME: Values are validated by a Pydantic model so bad settings fail before any request.

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from nws_forecast.models import UnitSystem

DEFAULT_USER_AGENT = "nws-forecast/0.1 (contact: you@example.com)"


class NwsConfig(BaseModel):
    """Where to fetch the forecast for and how to summarize it."""

    coordinates: tuple[str, str] | None = None
    forecast_hours: int = Field(default=12, ge=1)
    units: UnitSystem = UnitSystem.METRIC
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=3)
    timeout_seconds: float = Field(default=10.0, gt=0)


def load_config() -> NwsConfig:
    """Build an NwsConfig from NWS_* environment variables, reading .env first."""
    load_dotenv(find_dotenv(usecwd=True))

    values: dict = {}
    lat = os.environ.get("NWS_LATITUDE")
    lon = os.environ.get("NWS_LONGITUDE")
    if lat and lon:
        values["coordinates"] = (lat, lon)
    for key, env in (
        ("forecast_hours", "NWS_FORECAST_HOURS"),
        ("units", "NWS_UNITS"),
        ("user_agent", "NWS_USER_AGENT"),
        ("timeout_seconds", "NWS_TIMEOUT_SECONDS"),
    ):
        if env in os.environ:
            values[key] = os.environ[env]
    return NwsConfig(**values)
