"""Use cases - core business operations."""

from .collect_weather_data import CollectWeatherDataUseCase
from .simulate_ripening import SimulateRipeningUseCase, advance_populations
from .schedule_harvest import ScheduleHarvestUseCase, SchedulerState, HarvestSchedule
from .compute_yield_metrics import ComputeYieldMetricsUseCase, YieldMetrics

__all__ = [
    "CollectWeatherDataUseCase",
    "SimulateRipeningUseCase",
    "advance_populations",
    "ScheduleHarvestUseCase",
    "SchedulerState",
    "HarvestSchedule",
    "ComputeYieldMetricsUseCase",
    "YieldMetrics",
]
