# ABOUTME: Unit normalization for NWS readings tagged with WMO unit codes.
# ABOUTME: Converts temperatures to Celsius and wind speeds to km/h, m/s or the caller's local unit.

from nws_forecast.models import UnitSystem

MPH_TO_KMH = 1.609344
KMH_TO_MS = 1.0 / 3.6
MPH_TO_MS = MPH_TO_KMH * KMH_TO_MS


def _is_celsius(unit_code: str) -> bool:
    return unit_code.endswith("degC")


def _is_kmh(unit_code: str) -> bool:
    return unit_code.endswith("km_h-1")


def temperature_celsius(value: float, unit_code: str) -> float:
    """Return a temperature in Celsius. Anything not tagged ``degC`` is treated as Fahrenheit."""
    if _is_celsius(unit_code):
        return value
    return (value - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9.0 / 5.0 + 32.0


def temperature_local(value: float, unit_code: str, units: UnitSystem) -> float:
    """Return a temperature in the display unit of ``units`` (Celsius or Fahrenheit)."""
    celsius = temperature_celsius(value, unit_code)
    if units == UnitSystem.IMPERIAL:
        return celsius_to_fahrenheit(celsius)
    return celsius


def wind_speed_kmh(value: float, unit_code: str) -> float:
    """Return a wind speed in km/h. Anything not tagged ``km_h-1`` is treated as mph."""
    if _is_kmh(unit_code):
        return value
    return value * MPH_TO_KMH


def wind_speed_ms(value: float, unit_code: str) -> float:
    if _is_kmh(unit_code):
        return value * KMH_TO_MS
    return value * MPH_TO_MS


def wind_speed_local(value: float, unit_code: str, units: UnitSystem) -> float:
    """Return a wind speed in km/h for metric or mph for imperial, whatever the source unit."""
    kmh = wind_speed_kmh(value, unit_code)
    if units == UnitSystem.IMPERIAL:
        return kmh / MPH_TO_KMH
    return kmh
