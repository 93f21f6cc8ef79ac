"""Domain entities."""

from .stage import Stage, StageTransition, StagePipeline, FRUIT_STAGES
from .stage_counts import StageCounts
from .weather_data import DailyWeather
from .controls import Controls
from .growth_stage import GrowthStage
from .forecast import DailyForecastPoint, HarvestTask, HarvestWindow, ForecastResult
from .detection_result import DetectionResult

__all__ = [
    "Stage",
    "StageTransition",
    "StagePipeline",
    "FRUIT_STAGES",
    "StageCounts",
    "DailyWeather",
    "Controls",
    "GrowthStage",
    "DailyForecastPoint",
    "HarvestTask",
    "HarvestWindow",
    "ForecastResult",
    "DetectionResult",
]
