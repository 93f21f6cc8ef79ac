"""Repository interfaces."""

from .weather_repository import WeatherRepository
from .detection_repository import DetectionRepository
from .forecast_repository import ForecastRepository

__all__ = [
    "WeatherRepository",
    "DetectionRepository",
    "ForecastRepository",
]
