"""Example usage of the harvest forecast system."""

import logging
from datetime import date

from src.application.services.harvest_forecast_service import (
    HarvestForecastService,
    format_forecast_report,
)
from src.domain.entities.controls import Controls
from src.infrastructure.repositories.file_weather_repository import FileWeatherRepository
from src.infrastructure.repositories.json_detection_repository import JsonDetectionRepository
from config.settings import (
    DATA_DIR,
    WEATHER_DATA_FILE,
    STAGE_PIPELINE_DEFINITIONS,
    HARVEST_EMISSION_THRESHOLD_KG,
    DEFAULT_CONTROLS,
    LOG_FORMAT,
)

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    # Initialize repositories
    weather_repo = FileWeatherRepository(str(WEATHER_DATA_FILE))
    detection_repo = JsonDetectionRepository(str(DATA_DIR))

    # Initialize service
    service = HarvestForecastService(
        weather_repo=weather_repo,
        pipeline_definitions=STAGE_PIPELINE_DEFINITIONS,
        emission_threshold_kg=HARVEST_EMISSION_THRESHOLD_KG,
    )
    controls = Controls.from_dict(DEFAULT_CONTROLS)

    # Example 1: Forecast with the default capacity
    print("=" * 60)
    print("Example 1: Forecast from a saved detection")
    print("=" * 60)
    try:
        detection = detection_repo.get_detection("sample_detection.json")
        result = service.forecast_detection(detection, controls, start_date=date(2025, 6, 1))
        print(format_forecast_report(result))
    except Exception as e:
        logger.error(f"Forecast failed: {e}", exc_info=True)
        return

    # Example 2: Same snapshot with a tight picking capacity
    print("\n" + "=" * 60)
    print("Example 2: Capacity of 1 kg/day")
    print("=" * 60)
    try:
        tight = controls.with_overrides(harvest_capacity_kg_day=1.0)
        result = service.forecast_detection(detection, tight, start_date=date(2025, 6, 1))
        print(f"  Harvest days: {len(result.harvest_plan)}")
        print(f"  Total planned: {result.total_harvest_kg:.2f} kg")
        if result.harvest_window:
            print(f"  Window: {result.harvest_window.start} to {result.harvest_window.end}")
    except Exception as e:
        logger.error(f"Forecast failed: {e}", exc_info=True)


if __name__ == "__main__":
    main()
