# ABOUTME: Contract tests for the Australian apparent temperature calculation.
# ABOUTME: Checks known values, the effect of wind and humidity, and unit handling per sample.

import math

import pytest

from nws_forecast.apparent import apparent_temp, australian_apparent_temp
from nws_forecast.models import UnitSystem


class TestAustralianApparentTemp:
    def test_saturated_calm_freezing(self):
        """At 0 C the vapour pressure term reduces to 6.105 hPa times humidity.

        Implementation: Evaluates T=0, RH=100%, wind 10 m/s.
        Passing implies: The formula constants are 0.33, 0.70 and 4.00.
        """
        assert australian_apparent_temp(0.0, 100.0, 10.0) == pytest.approx(0.33 * 6.105 - 7.0 - 4.0, rel=1e-9)

    def test_mild_day(self):
        """A 20 C day at 50% humidity with no wind feels just under 20 C.

        Implementation: Evaluates T=20, RH=50%, calm.
        Passing implies: The exponential saturation term is applied.
        """
        assert australian_apparent_temp(20.0, 50.0, 0.0) == pytest.approx(19.85, abs=0.01)

    def test_matches_reference_formula(self):
        temp, humidity, wind = 27.3, 64.0, 3.2
        vapor = humidity / 100 * 6.105 * math.exp(17.27 * temp / (237.7 + temp))
        expected = temp + 0.33 * vapor - 0.70 * wind - 4.00
        assert australian_apparent_temp(temp, humidity, wind) == pytest.approx(expected, rel=1e-9)

    def test_wind_lowers_and_humidity_raises(self):
        """More wind feels colder and more humidity feels warmer.

        Implementation: Compares results while varying one input at a time.
        Passing implies: The wind and vapour pressure terms have the right sign.
        """
        base = australian_apparent_temp(25.0, 50.0, 2.0)
        assert australian_apparent_temp(25.0, 50.0, 8.0) < base
        assert australian_apparent_temp(25.0, 90.0, 2.0) > base


class TestApparentTempForSample:
    def test_metric_sample_uses_ms(self, make_sample):
        """A metric sample's km/h wind is converted to m/s before the formula.

        Implementation: Builds a sample with 36 km/h wind and compares to the formula at 10 m/s.
        Passing implies: The formula is always fed its calibration unit.
        """
        sample = make_sample(temp=0.0, humidity=100.0, wind=36.0, wind_unit="wmoUnit:km_h-1")
        assert apparent_temp(sample, UnitSystem.METRIC) == pytest.approx(australian_apparent_temp(0.0, 100.0, 10.0))

    def test_imperial_result_is_fahrenheit(self, make_sample):
        """Fahrenheit/mph input reported in imperial gives the Celsius result converted to F.

        Implementation: Builds a 68 F, 10 mph sample.
        Passing implies: Input is normalized to Celsius and m/s, output converted to F.
        """
        sample = make_sample(temp=68.0, temp_unit="wmoUnit:degF", humidity=40.0, wind=10.0, wind_unit="wmoUnit:mi_h-1")
        celsius = australian_apparent_temp(20.0, 40.0, 10.0 * 1.609344 / 3.6)
        assert apparent_temp(sample, UnitSystem.IMPERIAL) == pytest.approx(celsius * 9 / 5 + 32)
        assert apparent_temp(sample, UnitSystem.METRIC) == pytest.approx(celsius)
