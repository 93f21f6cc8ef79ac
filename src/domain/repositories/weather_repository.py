"""Weather repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List
from ..entities.weather_data import DailyWeather


class WeatherRepository(ABC):
    """Abstract repository for daily temperature forecasts."""

    @abstractmethod
    def get_forecast(
        self,
        district: str,
        start_date: date,
        days: int,
    ) -> List[DailyWeather]:
        """
        Retrieve a daily forecast for a district.

        Args:
            district: District name
            start_date: First forecast day (inclusive)
            days: Number of days requested

        Returns:
            DailyWeather entities ordered by date; may be shorter than ``days``
        """
        pass

    @abstractmethod
    def save_weather_data(self, data: List[DailyWeather]) -> None:
        """
        Save weather data.

        Args:
            data: List of DailyWeather entities to save
        """
        pass
