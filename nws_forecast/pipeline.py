# ABOUTME: Turns a decoded list of hourly NWS periods into current conditions and a forecast summary.
# ABOUTME: Pure and synchronous; the network fetch happens before this module is called.

import logging

from nws_forecast.aggregate import bearing_to_degrees, combine_forecasts
from nws_forecast.apparent import apparent_temp
from nws_forecast.errors import NoCurrentDataError
from nws_forecast.icons import classify, icon_word
from nws_forecast.models import ForecastAggregate, ForecastSample, UnitSystem, WeatherMoment, WeatherResult
from nws_forecast.units import temperature_local, wind_speed_kmh, wind_speed_local

logger = logging.getLogger(__name__)


def to_aggregate(sample: ForecastSample, units: UnitSystem) -> ForecastAggregate:
    """Normalize one period into the numeric record the aggregator works on."""
    return ForecastAggregate(
        temp=temperature_local(sample.temperature.value, sample.temperature.unit_code, units),
        apparent=apparent_temp(sample, units),
        humidity=sample.relative_humidity.value,
        wind=wind_speed_local(sample.wind_speed.value, sample.wind_speed.unit_code, units),
        wind_kmh=wind_speed_kmh(sample.wind_speed.value, sample.wind_speed.unit_code),
        wind_direction=bearing_to_degrees(sample.wind_direction),
    )


def to_moment(sample: ForecastSample, units: UnitSystem) -> WeatherMoment:
    icon = classify(sample.short_forecast, not sample.is_daytime)
    agg = to_aggregate(sample, units)
    return WeatherMoment(
        icon=icon,
        weather=icon_word(icon),
        weather_verbose=sample.short_forecast,
        temp=agg.temp,
        apparent=agg.apparent,
        humidity=agg.humidity,
        wind=agg.wind,
        wind_kmh=agg.wind_kmh,
        wind_direction=agg.wind_direction,
    )


def run(
    samples: list[ForecastSample],
    units: UnitSystem,
    forecast_hours: int,
    need_forecast: bool,
    location: str = "",
) -> WeatherResult:
    """Build the WeatherResult for one forecast response.

    Args:
        samples: Hourly periods in chronological order, the first being the current hour.
        units: Unit system to report readings in.
        forecast_hours: Number of periods in the aggregate window.
        need_forecast: When False only the current conditions are computed.
        location: Display label copied into the result.

    Raises:
        NoCurrentDataError: If ``samples`` is empty.
        EmptyWindowError: If a forecast is requested with ``forecast_hours`` of 0.
    """
    if not samples:
        raise NoCurrentDataError("No current weather")

    current_weather = to_moment(samples[0], units)
    if not need_forecast:
        return WeatherResult(location=location, current_weather=current_weather)

    window = [to_aggregate(sample, units) for sample in samples[:forecast_hours]]
    fin = to_moment(samples[min(forecast_hours, len(samples) - 1)], units)
    logger.debug("Summarizing %d of %d forecast periods", len(window), len(samples))
    return WeatherResult(
        location=location,
        current_weather=current_weather,
        forecast=combine_forecasts(window, fin),
    )
