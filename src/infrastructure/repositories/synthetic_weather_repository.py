"""Synthetic weather repository for demos and offline runs."""

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

import numpy as np

from ...domain.entities.weather_data import DailyWeather
from ...domain.repositories.weather_repository import WeatherRepository

from config.settings import SYNTHETIC_WEATHER_SETTINGS

logger = logging.getLogger(__name__)


class SyntheticWeatherRepository(WeatherRepository):
    """
    Generates a plausible warm-season forecast.

    A base max/min temperature is drawn once per request, then every day
    fluctuates uniformly by ``daily_fluctuation`` degrees around it. Values
    are rounded to 0.1 °C. The generator is seeded so runs are repeatable.
    """

    def __init__(self, seed: Optional[int] = 42, settings: Optional[Dict[str, Any]] = None):
        self.seed = seed
        self.settings = {**SYNTHETIC_WEATHER_SETTINGS, **(settings or {})}

    def get_forecast(
        self,
        district: str,
        start_date: date,
        days: int,
    ) -> List[DailyWeather]:
        """Generate ``days`` days of forecast starting at ``start_date``."""
        days = min(days, self.settings["max_days"])
        logger.info(f"Generating synthetic forecast for {district}: {days} days from {start_date}")

        rng = np.random.default_rng(self.seed)
        s = self.settings
        base_max = rng.uniform(s["base_max_low"], s["base_max_high"])
        base_min = rng.uniform(s["base_min_low"], s["base_min_high"])
        spread = s["daily_fluctuation"]

        result = []
        for i in range(days):
            temp_max = base_max + rng.uniform(-spread, spread)
            temp_min = base_min + rng.uniform(-spread, spread)
            result.append(
                DailyWeather(
                    date=start_date + timedelta(days=i),
                    temp_max_c=round(float(temp_max), 1),
                    temp_min_c=round(float(temp_min), 1),
                    district=district,
                )
            )
        return result

    def save_weather_data(self, data: List[DailyWeather]) -> None:
        raise NotImplementedError("Synthetic weather has no backing store")
