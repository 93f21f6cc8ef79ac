"""Concrete repository implementations."""

from .file_weather_repository import FileWeatherRepository
from .synthetic_weather_repository import SyntheticWeatherRepository
from .json_detection_repository import JsonDetectionRepository
from .file_forecast_repository import FileForecastRepository

__all__ = [
    "FileWeatherRepository",
    "SyntheticWeatherRepository",
    "JsonDetectionRepository",
    "FileForecastRepository",
]
