# ABOUTME: Exception and warning types raised by the forecast engine and NWS service.
# ABOUTME: Every fatal condition is a WeatherError so callers can catch one base class.


class WeatherError(Exception):
    """Base class for all failures that prevent a WeatherResult from being produced."""


class NoCurrentDataError(WeatherError):
    """The forecast response contained no periods at all."""


class EmptyWindowError(WeatherError):
    """Aggregation was asked to combine zero forecast periods."""


class LocationError(WeatherError):
    """No coordinates were configured and none were autolocated."""


class WeatherFetchError(WeatherError):
    """The NWS request failed or returned a payload that could not be decoded."""


class UnresolvableDirectionWarning(UserWarning):
    """A wind bearing token is not one of the 16 compass points.

    The period still counts toward the scalar averages but is left out of the
    wind direction vector mean.
    """
