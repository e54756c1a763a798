import aiohttp
import asyncio
import logging
from typing import Dict, Optional

from config import settings
from models import WeatherData

logger = logging.getLogger(__name__)

DEFAULT_TEMP = 18
DEFAULT_CONDITION = "Partly Cloudy"

# WMO weather interpretation codes used by Open-Meteo
WMO_CONDITIONS: Dict[int, str] = {
    0: "Clear",
    1: "Mainly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Fog",
    51: "Light Drizzle",
    53: "Drizzle",
    55: "Heavy Drizzle",
    56: "Freezing Drizzle",
    57: "Freezing Drizzle",
    61: "Light Rain",
    63: "Rain",
    65: "Heavy Rain",
    66: "Freezing Rain",
    67: "Freezing Rain",
    71: "Light Snow",
    73: "Snow",
    75: "Heavy Snow",
    77: "Snow Grains",
    80: "Rain Showers",
    81: "Rain Showers",
    82: "Violent Rain Showers",
    85: "Snow Showers",
    86: "Snow Showers",
    95: "Thunderstorm",
    96: "Thunderstorm with Hail",
    99: "Thunderstorm with Hail",
}


def describe_weather_code(code: Optional[int]) -> str:
    if code is None:
        return DEFAULT_CONDITION
    return WMO_CONDITIONS.get(int(code), DEFAULT_CONDITION)


def default_weather(location: str) -> WeatherData:
    return WeatherData(temp=DEFAULT_TEMP, condition=DEFAULT_CONDITION, location=location)


class WeatherClient:
    def __init__(
        self,
        geocoding_url: Optional[str] = None,
        forecast_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.geocoding_url = geocoding_url or settings.WEATHER_GEOCODING_URL
        self.forecast_url = forecast_url or settings.WEATHER_FORECAST_URL
        self.timeout = timeout if timeout is not None else settings.WEATHER_TIMEOUT

    async def get_weather_async(self, location: str) -> WeatherData:
        """
        Current weather for a free-text location.

        Falls back to the default forecast when the location cannot be
        resolved or the service is unreachable.
        """
        if not location or not location.strip():
            return default_weather(location or "")

        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                async with session.get(
                    self.geocoding_url, params={"name": location, "count": 1}
                ) as response:
                    geo = await response.json()

                results = geo.get("results") or []
                if not results:
                    logger.warning(f"Weather lookup: no match for location '{location}'")
                    return default_weather(location)
                place = results[0]

                params = {
                    "latitude": place["latitude"],
                    "longitude": place["longitude"],
                    "current": "temperature_2m,weather_code",
                }
                async with session.get(self.forecast_url, params=params) as response:
                    forecast = await response.json()

            current = forecast.get("current") or {}
            return WeatherData(
                temp=round(float(current["temperature_2m"]), 1),
                condition=describe_weather_code(current.get("weather_code")),
                location=location,
            )

        except asyncio.TimeoutError:
            logger.warning(f"Weather lookup timeout for location: {location}")
            return default_weather(location)
        except Exception as e:
            logger.error(f"Weather lookup error: {e}")
            return default_weather(location)
