# ABOUTME: Shared test fixtures for the NWS forecast test suite.
# ABOUTME: Provides a factory for ForecastSample periods and canned NWS API payloads.

import pytest

from nws_forecast.models import ForecastSample


def _period(
    temp: float = 20.0,
    temp_unit: str = "wmoUnit:degC",
    humidity: float = 50.0,
    wind: float = 10.0,
    wind_unit: str = "wmoUnit:km_h-1",
    direction: str | None = "N",
    text: str = "Sunny",
    is_daytime: bool = True,
) -> dict:
    """Build one forecastHourly period in the camelCase shape the NWS API returns."""
    return {
        "isDaytime": is_daytime,
        "temperature": {"unitCode": temp_unit, "value": temp},
        "relativeHumidity": {"unitCode": "wmoUnit:percent", "value": humidity},
        "windSpeed": {"unitCode": wind_unit, "value": wind},
        "windDirection": direction,
        "shortForecast": text,
    }


@pytest.fixture
def period():
    """Factory for raw NWS period dicts."""
    return _period


@pytest.fixture
def make_sample():
    """Factory for decoded ForecastSample objects."""

    def factory(**kwargs) -> ForecastSample:
        return ForecastSample.model_validate(_period(**kwargs))

    return factory


@pytest.fixture
def points_payload() -> dict:
    return {
        "properties": {
            "forecastHourly": "https://api.weather.gov/gridpoints/TOP/32,81/forecast/hourly",
            "relativeLocation": {"properties": {"city": "Linn", "state": "KS"}},
        }
    }


@pytest.fixture
def forecast_payload(period) -> dict:
    return {
        "properties": {
            "periods": [
                period(temp=18.0, wind=12.0, direction="SW", text="Mostly Clear", is_daytime=False),
                period(temp=17.0, wind=10.0, direction="SSW", text="Partly Cloudy", is_daytime=False),
                period(temp=21.0, wind=8.0, direction="S", text="Chance Showers And Thunderstorms"),
            ]
        }
    }
