"""File-based (CSV/XLSX) weather forecast repository implementation."""

import logging
from datetime import date, timedelta
from typing import List
import pandas as pd
from pathlib import Path
from ...domain.entities.weather_data import DailyWeather
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["district", "date", "temp_max_c", "temp_min_c"]


class FileWeatherRepository(WeatherRepository):
    """Repository for daily forecasts stored in a CSV or Excel file."""

    def __init__(self, data_file: str, must_exist: bool = True):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV/XLSX file with district, date, temp_max_c, temp_min_c
            must_exist: Fail early if the file is missing (set False for a save target)
        """
        self.data_file = Path(data_file)
        if must_exist and not self.data_file.exists():
            raise FileNotFoundError(f"Weather data file not found: {data_file}")

    def _read(self) -> pd.DataFrame:
        if self.data_file.suffix == ".xlsx":
            df = pd.read_excel(self.data_file, engine="openpyxl")
        else:
            df = pd.read_csv(self.data_file)

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"Weather file {self.data_file} is missing columns: {missing}")

        df["date"] = pd.to_datetime(df["date"])
        return df

    def get_forecast(
        self,
        district: str,
        start_date: date,
        days: int,
    ) -> List[DailyWeather]:
        """Load forecast rows for a district from file."""
        end_date = start_date + timedelta(days=days - 1)
        logger.info(
            f"Loading weather data from {self.data_file} "
            f"for {district} from {start_date} to {end_date}"
        )

        try:
            df = self._read()
        except Exception as e:
            logger.error(f"Error loading weather data: {e}")
            raise

        df_filtered = df[
            (df["district"] == district)
            & (df["date"] >= pd.to_datetime(start_date))
            & (df["date"] <= pd.to_datetime(end_date))
        ].copy()

        # Drop incomplete rows rather than guessing temperatures
        before = len(df_filtered)
        df_filtered = df_filtered.dropna(subset=["temp_max_c", "temp_min_c"])
        if len(df_filtered) < before:
            logger.warning(f"Dropped {before - len(df_filtered)} rows with missing temperatures")

        df_filtered = df_filtered.sort_values("date")

        result = [
            DailyWeather(
                date=row["date"].date(),
                temp_max_c=float(row["temp_max_c"]),
                temp_min_c=float(row["temp_min_c"]),
                district=row["district"],
            )
            for _, row in df_filtered.iterrows()
        ]

        logger.info(f"Loaded {len(result)} weather records")
        return result

    def save_weather_data(self, data: List[DailyWeather]) -> None:
        """Save weather data to file."""
        logger.info(f"Saving {len(data)} weather records to {self.data_file}")

        records = [
            {
                "district": d.district,
                "date": d.date,
                "temp_max_c": d.temp_max_c,
                "temp_min_c": d.temp_min_c,
            }
            for d in data
        ]

        df = pd.DataFrame(records, columns=REQUIRED_COLUMNS)
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        if self.data_file.suffix == ".xlsx":
            df.to_excel(self.data_file, index=False, engine="openpyxl")
        else:
            df.to_csv(self.data_file, index=False)

        logger.info("Weather data saved successfully")
