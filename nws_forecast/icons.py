# ABOUTME: Maps NWS short forecast phrases to weather icons by ordered keyword matching.
# ABOUTME: The rule order resolves overlapping phrases, e.g. "snow showers" is Snow and not Rain.

from nws_forecast.models import Clear, Clouds, Default, Fog, Rain, Snow, Thunder, WeatherIcon

# First matching rule wins. The official icon field is deprecated and the short
# forecast text cannot be fully enumerated, so substrings are all we have.
_RULES: list[tuple[tuple[str, ...], type]] = [
    (("snow", "flurr", "blizzard"), Snow),
    (("thunder",), Thunder),
    (("fog", "mist"), Fog),
    (("rain", "shower", "drizzle"), Rain),
    (("cloud", "overcast"), Clouds),
    (("clear", "sunny"), Clear),
]


def classify(text: str, is_night: bool) -> WeatherIcon:
    """Turn a short forecast such as "Mostly Cloudy" into an icon."""
    text = text.lower()
    for keywords, icon in _RULES:
        if any(keyword in text for keyword in keywords):
            if icon is Snow:
                return Snow()
            return icon(is_night=is_night)
    return Default()


def icon_word(icon: WeatherIcon) -> str:
    return icon.word
