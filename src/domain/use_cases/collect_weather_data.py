"""Use case for collecting weather data."""

import logging
from datetime import date
from typing import List
from ..entities.weather_data import DailyWeather
from ..exceptions import InvalidInputError
from ..repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


class CollectWeatherDataUseCase:
    """Use case to collect a daily forecast from repository."""

    def __init__(self, repository: WeatherRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for weather data access
        """
        self.repository = repository

    def execute(
        self,
        district: str,
        start_date: date,
        days: int,
    ) -> List[DailyWeather]:
        """
        Execute the use case.

        Args:
            district: District name
            start_date: First forecast day (inclusive)
            days: Number of days requested

        Returns:
            List of DailyWeather entities ordered by date
        """
        logger.info(
            f"Collecting weather data: district={district}, "
            f"start={start_date}, days={days}"
        )
        data = self.repository.get_forecast(district, start_date, days)
        if not data:
            raise InvalidInputError(f"No weather data for {district} from {start_date}")
        data = sorted(data, key=lambda w: w.date)
        logger.info(f"Collected {len(data)} weather records")
        return data
