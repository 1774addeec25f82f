# ABOUTME: Pydantic BaseModels for NWS forecast periods and the summaries derived from them.
# ABOUTME: Defines the icon union, per-period samples, aggregates, moments and the final result.

from datetime import datetime
from enum import Enum
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UnitSystem(str, Enum):
    """Unit system the caller wants readings reported in."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class LocationInfo(BaseModel):
    """Resolved hourly forecast URL and a human-readable place name."""

    model_config = ConfigDict(frozen=True)

    query: str
    name: str


class _Icon(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: ClassVar[str]


class _DayNightIcon(_Icon):
    is_night: bool = False


class Clear(_DayNightIcon):
    kind: Literal["clear"] = "clear"
    word: ClassVar[str] = "Clear"


class Clouds(_DayNightIcon):
    kind: Literal["clouds"] = "clouds"
    word: ClassVar[str] = "Clouds"


class Fog(_DayNightIcon):
    kind: Literal["fog"] = "fog"
    word: ClassVar[str] = "Fog"


class Thunder(_DayNightIcon):
    kind: Literal["thunder"] = "thunder"
    word: ClassVar[str] = "Thunder"


class Rain(_DayNightIcon):
    kind: Literal["rain"] = "rain"
    word: ClassVar[str] = "Rain"


class Snow(_Icon):
    kind: Literal["snow"] = "snow"
    word: ClassVar[str] = "Snow"


class Default(_Icon):
    kind: Literal["default"] = "default"
    word: ClassVar[str] = "Unknown"


WeatherIcon = Annotated[
    Clear | Clouds | Fog | Thunder | Rain | Snow | Default,
    Field(discriminator="kind"),
]


class QuantitativeValue(BaseModel):
    """An NWS reading with its WMO unit code, e.g. ``wmoUnit:degC``."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    value: float
    unit_code: str


class ForecastSample(BaseModel):
    """One hourly period from the NWS forecastHourly endpoint."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    is_daytime: bool
    temperature: QuantitativeValue
    relative_humidity: QuantitativeValue
    wind_speed: QuantitativeValue
    wind_direction: str | None = None
    short_forecast: str
    start_time: datetime | None = None


class ForecastAggregate(BaseModel):
    """Normalized numeric readings of one period, or an avg/min/max over many."""

    model_config = ConfigDict(frozen=True)

    temp: float
    apparent: float
    humidity: float
    wind: float
    wind_kmh: float
    wind_direction: float | None = None


class WeatherMoment(BaseModel):
    """Display-ready conditions at a single point in time."""

    model_config = ConfigDict(frozen=True)

    icon: WeatherIcon
    weather: str
    weather_verbose: str
    temp: float
    apparent: float
    humidity: float
    wind: float
    wind_kmh: float
    wind_direction: float | None = None


class Forecast(BaseModel):
    """Summary of a forecast window plus the conditions at its end."""

    model_config = ConfigDict(frozen=True)

    avg: ForecastAggregate
    min: ForecastAggregate
    max: ForecastAggregate
    fin: WeatherMoment


class WeatherResult(BaseModel):
    """Everything one weather request produces for the caller."""

    model_config = ConfigDict(frozen=True)

    location: str
    current_weather: WeatherMoment
    forecast: Forecast | None = None
