"""Forecast repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from ..entities.forecast import ForecastResult


class ForecastRepository(ABC):
    """Abstract repository for forecast result persistence."""

    @abstractmethod
    def save_forecast(
        self, result: ForecastResult, metadata: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Save a forecast result.

        Args:
            result: The forecast to save
            metadata: Optional metadata about the run (controls, source, ...)

        Returns:
            Path or identifier where the forecast was saved
        """
        pass

    @abstractmethod
    def load_forecast(self, forecast_id: str) -> ForecastResult:
        """
        Load a saved forecast.

        Args:
            forecast_id: Forecast identifier or path

        Returns:
            The loaded ForecastResult
        """
        pass

    @abstractmethod
    def forecast_exists(self, forecast_id: str) -> bool:
        """
        Check if a forecast exists.

        Args:
            forecast_id: Forecast identifier or path

        Returns:
            True if forecast exists, False otherwise
        """
        pass
