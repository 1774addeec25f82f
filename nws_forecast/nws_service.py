# ABOUTME: Service layer for US National Weather Service API calls and response parsing.
# ABOUTME: Resolves coordinates to a forecast grid point, fetches hourly periods and runs the pipeline.

import logging

import httpx
from pydantic import ValidationError

from nws_forecast import pipeline
from nws_forecast.config import NwsConfig
from nws_forecast.errors import LocationError, WeatherFetchError
from nws_forecast.models import ForecastSample, LocationInfo, UnitSystem, WeatherResult

logger = logging.getLogger(__name__)

API_URL = "https://api.weather.gov"

# Ask for temperature and wind speed as {value, unitCode} objects instead of "10 mph" strings.
FEATURE_FLAGS = "forecast_wind_speed_qv,forecast_temperature_qv"


async def resolve_location(
    client: httpx.AsyncClient,
    latitude: str,
    longitude: str,
    units: UnitSystem,
) -> LocationInfo:
    """Resolve coordinates to the hourly forecast URL of their NWS grid point."""
    resp = await client.get(f"{API_URL}/points/{latitude},{longitude}")
    resp.raise_for_status()
    props = resp.json()["properties"]

    query = props["forecastHourly"]
    query += "?units=si" if units == UnitSystem.METRIC else "?units=us"
    place = props["relativeLocation"]["properties"]
    return LocationInfo(query=query, name=f"{place['city']}, {place['state']}")


async def get_hourly_forecast(client: httpx.AsyncClient, location: LocationInfo) -> list[ForecastSample]:
    """Fetch the hourly forecast periods for a resolved location, soonest first."""
    resp = await client.get(location.query, headers={"Feature-Flags": FEATURE_FLAGS})
    resp.raise_for_status()
    data = resp.json()
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return parse_periods(data.get("properties", {}))


def parse_periods(raw: dict) -> list[ForecastSample]:
    """Parse the ``periods`` array of a forecastHourly ``properties`` object."""
    if not isinstance(raw, dict):
        raise ValueError(f"expected forecast properties to be an object, got {type(raw).__name__}")
    periods = raw.get("periods", [])
    if not isinstance(periods, list):
        raise ValueError(f"expected forecast periods to be a list, got {type(periods).__name__}")
    return [ForecastSample.model_validate(period) for period in periods]


class WeatherService:
    """Fetches one forecast per call and summarizes it according to the config."""

    def __init__(self, client: httpx.AsyncClient, config: NwsConfig) -> None:
        self._client = client
        self._config = config
        self._location: LocationInfo | None = None

    async def get_weather(
        self,
        autolocated: tuple[float, float] | None = None,
        need_forecast: bool = True,
    ) -> WeatherResult:
        """Fetch and summarize the forecast.

        Args:
            autolocated: Coordinates found by the caller; these take precedence over the config.
            need_forecast: When False only the current conditions are computed.

        Raises:
            LocationError: If there are no coordinates to use.
            WeatherFetchError: If a request fails or the response cannot be decoded.
            NoCurrentDataError: If the forecast has no periods.
        """
        try:
            location = await self._location_for(autolocated)
            samples = await get_hourly_forecast(self._client, location)
        except httpx.HTTPError as e:
            logger.warning("NWS request failed: %s", e)
            raise WeatherFetchError(f"weather request failed: {e}") from e
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            logger.exception("Could not parse NWS response")
            raise WeatherFetchError(f"parsing weather data failed: {e}") from e

        logger.debug("Fetched %d periods for %s", len(samples), location.name)
        return pipeline.run(
            samples,
            self._config.units,
            self._config.forecast_hours,
            need_forecast,
            location=location.name,
        )

    async def _location_for(self, autolocated: tuple[float, float] | None) -> LocationInfo:
        if autolocated is not None:
            lat, lon = autolocated
            return await resolve_location(self._client, str(lat), str(lon), self._config.units)
        if self._location is None:
            if self._config.coordinates is None:
                raise LocationError("no location given")
            lat, lon = self._config.coordinates
            self._location = await resolve_location(self._client, lat, lon, self._config.units)
        return self._location
