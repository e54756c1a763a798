"""
Configuration management for the Ixora styling API
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings and configuration"""

    # Google Gemini configuration
    GOOGLE_GENAI_API_KEY: str = os.getenv("GOOGLE_GENAI_API_KEY") or os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # Weather lookup (Open-Meteo, no key required)
    WEATHER_GEOCODING_URL: str = os.getenv(
        "WEATHER_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search"
    )
    WEATHER_FORECAST_URL: str = os.getenv(
        "WEATHER_FORECAST_URL", "https://api.open-meteo.com/v1/forecast"
    )
    WEATHER_TIMEOUT: float = float(os.getenv("WEATHER_TIMEOUT", "5"))

    # Comma-separated list of allowed front-end origins
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def cors_origins(self) -> list:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()] or ["*"]

    @property
    def gemini_configured(self) -> bool:
        return bool(self.GOOGLE_GENAI_API_KEY)


settings = Settings()
