# ABOUTME: Combines a window of normalized forecast periods into average, minimum and maximum.
# ABOUTME: Wind direction is averaged as a vector so bearings either side of north do not cancel out.

import math
import warnings

from nws_forecast.errors import EmptyWindowError, UnresolvableDirectionWarning
from nws_forecast.models import Forecast, ForecastAggregate, WeatherMoment

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
_DEGREES_PER_POINT = 360.0 / len(COMPASS_POINTS)


def bearing_to_degrees(bearing: str | None) -> float | None:
    """Convert a 16-point compass bearing like "SSW" to degrees clockwise from north.

    Returns None when the bearing is missing or unknown. Unknown tokens also emit an
    UnresolvableDirectionWarning; they must not be read as north.
    """
    if not bearing:
        return None
    try:
        index = COMPASS_POINTS.index(bearing)
    except ValueError:
        warnings.warn(f"unknown wind bearing {bearing!r}", UnresolvableDirectionWarning, stacklevel=2)
        return None
    return index * _DEGREES_PER_POINT


class WindAccumulator:
    """Running vector sum of wind readings that carry a direction."""

    def __init__(self) -> None:
        self.north = 0.0
        self.east = 0.0
        self.north_kmh = 0.0
        self.east_kmh = 0.0
        self.count = 0

    def add(self, wind: float, wind_kmh: float, direction: float | None) -> None:
        if direction is None:
            return
        radians = math.radians(direction)
        sin, cos = math.sin(radians), math.cos(radians)
        self.north += wind * cos
        self.east += wind * sin
        self.north_kmh += wind_kmh * cos
        self.east_kmh += wind_kmh * sin
        self.count += 1

    def mean(self) -> tuple[float, float, float | None]:
        """Return (wind, wind_kmh, direction); all zero/None when nothing had a direction."""
        if self.count == 0:
            return 0.0, 0.0, None
        direction = math.degrees(math.atan2(self.east, self.north)) % 360.0
        # A tiny negative angle rounds up to exactly 360.0
        if direction >= 360.0:
            direction = 0.0
        return (
            math.hypot(self.east, self.north) / self.count,
            math.hypot(self.east_kmh, self.north_kmh) / self.count,
            direction,
        )


def _mean(values: list[float]) -> float:
    """Arithmetic mean, kept inside [min, max] even when the division rounds outward."""
    return min(max(math.fsum(values) / len(values), min(values)), max(values))


def combine_forecasts(data: list[ForecastAggregate], fin: WeatherMoment) -> Forecast:
    """Reduce a forecast window to its average, minimum and maximum readings.

    The min and max wind take their direction from the period that had the extreme
    speed. Ties keep the earliest period.
    """
    if not data:
        raise EmptyWindowError("cannot summarize an empty forecast window")

    wind = WindAccumulator()
    lowest = highest = data[0]
    for val in data:
        wind.add(val.wind, val.wind_kmh, val.wind_direction)
        if val.wind > highest.wind:
            highest = val
        if val.wind < lowest.wind:
            lowest = val

    avg_wind, avg_wind_kmh, avg_direction = wind.mean()
    avg = ForecastAggregate(
        temp=_mean([val.temp for val in data]),
        apparent=_mean([val.apparent for val in data]),
        humidity=_mean([val.humidity for val in data]),
        wind=avg_wind,
        wind_kmh=avg_wind_kmh,
        wind_direction=avg_direction,
    )
    maximum = ForecastAggregate(
        temp=max(val.temp for val in data),
        apparent=max(val.apparent for val in data),
        humidity=max(val.humidity for val in data),
        wind=highest.wind,
        wind_kmh=highest.wind_kmh,
        wind_direction=highest.wind_direction,
    )
    minimum = ForecastAggregate(
        temp=min(val.temp for val in data),
        apparent=min(val.apparent for val in data),
        humidity=min(val.humidity for val in data),
        wind=lowest.wind,
        wind_kmh=lowest.wind_kmh,
        wind_direction=lowest.wind_direction,
    )
    return Forecast(avg=avg, min=minimum, max=maximum, fin=fin)
