# ABOUTME: Apparent ("feels like") temperature from the Australian Bureau of Meteorology formula.
# ABOUTME: Combines dry-bulb temperature, water vapour pressure and wind speed in m/s.

import math

from nws_forecast.models import ForecastSample, UnitSystem
from nws_forecast.units import celsius_to_fahrenheit, temperature_celsius, wind_speed_ms


def australian_apparent_temp(temp: float, humidity: float, wind_speed: float) -> float:
    """Apparent temperature in Celsius.

    Args:
        temp: Dry-bulb temperature in Celsius.
        humidity: Relative humidity in percent (0-100).
        wind_speed: Wind speed in m/s, the unit the formula is calibrated for.
    """
    vapor_pressure = humidity / 100.0 * 6.105 * math.exp(17.27 * temp / (237.7 + temp))
    return temp + 0.33 * vapor_pressure - 0.70 * wind_speed - 4.00


def apparent_temp(sample: ForecastSample, units: UnitSystem) -> float:
    """Apparent temperature of a forecast period in the display unit of ``units``."""
    temp = temperature_celsius(sample.temperature.value, sample.temperature.unit_code)
    wind = wind_speed_ms(sample.wind_speed.value, sample.wind_speed.unit_code)
    apparent = australian_apparent_temp(temp, sample.relative_humidity.value, wind)
    if units == UnitSystem.IMPERIAL:
        return celsius_to_fahrenheit(apparent)
    return apparent
