"""File-based forecast repository implementation."""

import datetime
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd

from ...domain.entities.forecast import ForecastResult
from ...domain.repositories.forecast_repository import ForecastRepository

logger = logging.getLogger(__name__)


class FileForecastRepository(ForecastRepository):
    """Repository for saving/loading forecasts as JSON with CSV side tables."""

    def __init__(self, export_dir: str = "output/forecasts"):
        """
        Initialize repository.

        Args:
            export_dir: Directory to store forecasts
        """
        self.export_dir = Path(export_dir)
        self.export_dir.mkdir(parents=True, exist_ok=True)

    def save_forecast(
        self, result: ForecastResult, metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        """Save forecast JSON plus daily and harvest plan CSVs."""
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        forecast_file = self.export_dir / f"forecast_{timestamp}.json"
        daily_file = self.export_dir / f"forecast_{timestamp}_daily.csv"
        plan_file = self.export_dir / f"forecast_{timestamp}_harvest_plan.csv"

        logger.info(f"Saving forecast to {forecast_file}")

        payload = result.to_dict()
        if metadata:
            payload["metadata"] = metadata
        with open(forecast_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, default=str)

        pd.DataFrame(
            [p.to_dict() for p in result.daily],
            columns=["date", "ready_kg", "gdd_cum", "gdd_day", "mature_count"],
        ).to_csv(daily_file, index=False)
        pd.DataFrame(
            [t.to_dict() for t in result.harvest_plan], columns=["date", "harvest_kg"]
        ).to_csv(plan_file, index=False)

        logger.info(f"Forecast saved successfully: {forecast_file}")
        return str(forecast_file)

    def load_forecast(self, forecast_id: str) -> ForecastResult:
        """Load forecast from JSON file."""
        forecast_file = Path(forecast_id)
        if not forecast_file.exists():
            raise FileNotFoundError(f"Forecast file not found: {forecast_id}")

        logger.info(f"Loading forecast from {forecast_file}")

        with open(forecast_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        result = ForecastResult.from_dict(data)
        logger.info("Forecast loaded successfully")
        return result

    def forecast_exists(self, forecast_id: str) -> bool:
        """Check if forecast file exists."""
        return Path(forecast_id).exists()
