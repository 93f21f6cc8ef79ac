"""Main service orchestrating one harvest forecast run."""

import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...domain.entities.controls import Controls
from ...domain.entities.detection_result import DetectionResult
from ...domain.entities.forecast import ForecastResult
from ...domain.entities.stage import Stage, StagePipeline
from ...domain.entities.stage_counts import StageCounts
from ...domain.entities.weather_data import DailyWeather
from ...domain.exceptions import InvalidInputError
from ...domain.repositories.forecast_repository import ForecastRepository
from ...domain.repositories.weather_repository import WeatherRepository

# Use cases
from ...domain.use_cases.collect_weather_data import CollectWeatherDataUseCase
from ...domain.use_cases.simulate_ripening import SimulateRipeningUseCase
from ...domain.use_cases.schedule_harvest import ScheduleHarvestUseCase
from ...domain.use_cases.compute_yield_metrics import ComputeYieldMetricsUseCase

logger = logging.getLogger(__name__)


class HarvestForecastService:
    """Orchestrates weather collection, ripening simulation and harvest scheduling."""

    def __init__(
        self,
        weather_repo: Optional[WeatherRepository],
        pipeline_definitions: Dict[str, Sequence[Tuple[str, str, float]]],
        forecast_repo: Optional[ForecastRepository] = None,
        emission_threshold_kg: float = 0.1,
    ):
        self.weather_repo = weather_repo
        self.forecast_repo = forecast_repo

        # Convert definitions to domain entities
        self.pipelines = {
            name: StagePipeline.from_definition(name, definition)
            for name, definition in pipeline_definitions.items()
        }

        self.collect_weather_uc = (
            CollectWeatherDataUseCase(weather_repo) if weather_repo is not None else None
        )
        self.schedule_uc = ScheduleHarvestUseCase(emission_threshold_kg=emission_threshold_kg)
        self.metrics_uc = ComputeYieldMetricsUseCase()

    def get_pipeline(self, stage_model: str) -> StagePipeline:
        if stage_model not in self.pipelines:
            raise InvalidInputError(
                f"Unknown stage model: {stage_model} (known: {', '.join(sorted(self.pipelines))})"
            )
        return self.pipelines[stage_model]

    def validate_inputs(
        self,
        stage_counts: StageCounts,
        controls: Controls,
        weather: Optional[Sequence[DailyWeather]] = None,
    ) -> StagePipeline:
        """Validate everything the core kernels take on trust; return the pipeline to use."""
        controls.validate()
        stage_counts.validate()
        pipeline = self.get_pipeline(controls.stage_model)

        on_pipeline = set(pipeline.stages)
        stray = [
            s.value
            for s, count in stage_counts.counts.items()
            if s.is_fruit and s not in on_pipeline and count > 0
        ]
        if stray:
            raise InvalidInputError(
                f"Stages {', '.join(stray)} are not part of the '{pipeline}' model"
            )

        if weather is not None:
            if not weather:
                raise InvalidInputError("Weather series is empty")
            for day in weather:
                day.validate()
        return pipeline

    def forecast(
        self,
        stage_counts: StageCounts,
        controls: Controls,
        weather: Optional[Sequence[DailyWeather]] = None,
        start_date: Optional[date] = None,
        price_per_kg: Optional[float] = None,
    ) -> ForecastResult:
        """
        Run one forecast.

        Args:
            stage_counts: Classifier snapshot
            controls: Farm and model parameters
            weather: Daily forecast; fetched from the weather repository when omitted
            start_date: First forecast day when fetching weather (default: today)
            price_per_kg: Optional market price for a revenue estimate

        Returns:
            ForecastResult
        """
        pipeline = self.validate_inputs(stage_counts, controls, weather)

        if weather is None:
            weather = self._collect_weather(controls, start_date or date.today())
            for day in weather:
                day.validate()
        weather = list(weather)

        logger.info(
            f"=== Forecast for {controls.district}: {stage_counts.total_fruit:g} fruit, "
            f"{controls.forecast_days} days, model {pipeline} ==="
        )

        metrics = self.metrics_uc.execute(stage_counts, controls, price_per_kg=price_per_kg)
        daily = SimulateRipeningUseCase(pipeline).execute(stage_counts, weather, controls)
        schedule = self.schedule_uc.execute(daily, controls.harvest_capacity_kg_day)

        notes = self._build_notes(controls, stage_counts, weather, len(daily), schedule.clamped_days)

        result = ForecastResult(
            yield_now_kg=metrics.yield_now_kg,
            sellable_kg=metrics.sellable_kg,
            daily=daily,
            harvest_plan=schedule.harvest_plan,
            harvest_window=schedule.harvest_window,
            notes=notes,
            growth_stage=metrics.growth_stage,
            revenue=metrics.revenue,
            detections=metrics.detections,
            mature_share=metrics.mature_share,
        )
        logger.info(
            f"Forecast complete: {len(result.harvest_plan)} harvest days, "
            f"{result.total_harvest_kg:.2f} kg planned"
        )
        return result

    def forecast_detection(
        self,
        detection: DetectionResult,
        controls: Controls,
        weather: Optional[Sequence[DailyWeather]] = None,
        start_date: Optional[date] = None,
        price_per_kg: Optional[float] = None,
    ) -> ForecastResult:
        """Run a forecast from a classifier detection result."""
        logger.info(f"Forecasting from detection: {detection}")
        return self.forecast(
            detection.stage_counts,
            controls,
            weather=weather,
            start_date=start_date,
            price_per_kg=price_per_kg,
        )

    def export(self, result: ForecastResult, metadata: Optional[Dict[str, Any]] = None) -> str:
        """Persist a forecast with the configured forecast repository."""
        if self.forecast_repo is None:
            raise RuntimeError("No forecast repository configured")
        return self.forecast_repo.save_forecast(result, metadata=metadata)

    def _collect_weather(self, controls: Controls, start_date: date) -> List[DailyWeather]:
        if self.collect_weather_uc is None:
            raise InvalidInputError("No weather supplied and no weather repository configured")
        return self.collect_weather_uc.execute(controls.district, start_date, controls.forecast_days)

    def _build_notes(
        self,
        controls: Controls,
        stage_counts: StageCounts,
        weather: Sequence[DailyWeather],
        simulated_days: int,
        clamped_days: int,
    ) -> List[str]:
        notes = [
            f"Forecast is based on a weather prediction for {controls.district}.",
            f"Harvest plan is optimized for a capacity of {controls.harvest_capacity_kg_day:g} kg/day.",
        ]
        if len(weather) < controls.forecast_days:
            notes.append(
                f"Weather data covers {len(weather)} of {controls.forecast_days} requested days; "
                f"forecast truncated to {simulated_days} days."
            )
        if stage_counts.ignored:
            notes.append(f"Ignored unrecognised stages: {', '.join(stage_counts.ignored)}.")
        if stage_counts.get(Stage.FLOWER) > 0:
            notes.append(
                f"{stage_counts.get(Stage.FLOWER):g} flowers detected; flowers are not counted as fruit."
            )
        if clamped_days:
            notes.append(
                f"Ready mass decreased on {clamped_days} day(s); those days added no new harvestable mass."
            )
        return notes


def format_forecast_report(result: ForecastResult) -> str:
    """Render a forecast as plain text, figures to two decimals with units."""
    lines = [
        f"Current yield:     {result.yield_now_kg:.2f} kg",
        f"Sellable yield:    {result.sellable_kg:.2f} kg",
        f"Total forecasted:  {result.total_harvest_kg:.2f} kg",
    ]
    if result.growth_stage is not None:
        lines.append(f"Growth stage:      {result.growth_stage.value}")
    lines.append(
        f"Fruit detected:    {result.detections:g} ({result.mature_share:.0%} mature)"
    )
    if result.revenue is not None:
        lines.append(f"Expected revenue:  {result.revenue:.2f}")
    if result.harvest_window:
        lines.append(
            f"Harvest window:    {result.harvest_window.start.isoformat()} to "
            f"{result.harvest_window.end.isoformat()}"
        )
    else:
        lines.append("Harvest window:    none scheduled")

    lines.append("")
    lines.append("Daily ready-to-harvest:")
    for point in result.daily:
        lines.append(
            f"  {point.date.isoformat()}  {point.ready_kg:8.2f} kg  (GDD {point.gdd_cum:.2f})"
        )

    lines.append("")
    lines.append("Harvest plan:")
    if result.harvest_plan:
        for task in result.harvest_plan:
            lines.append(f"  {task.date.isoformat()}  {task.harvest_kg:8.2f} kg")
    else:
        lines.append("  No harvest in this period")

    if result.notes:
        lines.append("")
        lines.append("Notes:")
        lines.extend(f"  - {note}" for note in result.notes)
    return "\n".join(lines)
