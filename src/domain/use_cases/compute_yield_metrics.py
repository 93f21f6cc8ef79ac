"""Use case for point-in-time yield metrics."""

import logging
from dataclasses import dataclass
from typing import Optional

from ..entities.controls import Controls
from ..entities.growth_stage import GrowthStage
from ..entities.stage import Stage
from ..entities.stage_counts import StageCounts

logger = logging.getLogger(__name__)


def yield_now_kg(stage_counts: StageCounts, controls: Controls) -> float:
    """Mass already ripe at capture time."""
    return stage_counts.mature * controls.avg_weight_g / 1000 * controls.num_plants


def sellable_kg(current_yield_kg: float, post_harvest_loss_pct: float) -> float:
    return current_yield_kg * (1 - post_harvest_loss_pct / 100)


def stage_share(stage_counts: StageCounts, stage: Stage) -> float:
    """Fraction of detected fruit in ``stage``; 0.0 when nothing was detected."""
    detections = stage_counts.total_fruit
    if detections <= 0:
        return 0.0
    return stage_counts.get(stage) / detections


def classify_growth_stage(stage_counts: StageCounts) -> GrowthStage:
    """Majority-style label: Mature above 1/2 mature, Ripening above 1/3 ripening."""
    detections = stage_counts.total_fruit
    if stage_counts.mature > detections / 2:
        return GrowthStage.MATURE
    if stage_counts.get(Stage.RIPENING) > detections / 3:
        return GrowthStage.RIPENING
    return GrowthStage.IMMATURE


def estimate_revenue(sellable: float, price_per_kg: Optional[float]) -> Optional[float]:
    if price_per_kg is None:
        return None
    return sellable * price_per_kg


@dataclass(frozen=True)
class YieldMetrics:
    """Summary figures for the dashboard."""

    yield_now_kg: float
    sellable_kg: float
    growth_stage: GrowthStage
    mature_share: float
    detections: float
    revenue: Optional[float] = None


class ComputeYieldMetricsUseCase:
    """Use case to derive current and sellable yield from a stage snapshot."""

    def execute(
        self,
        stage_counts: StageCounts,
        controls: Controls,
        price_per_kg: Optional[float] = None,
    ) -> YieldMetrics:
        """
        Execute the use case.

        Args:
            stage_counts: Snapshot populations per stage
            controls: Farm parameters (weight, plants, loss)
            price_per_kg: Optional market price for a revenue estimate

        Returns:
            YieldMetrics
        """
        current = yield_now_kg(stage_counts, controls)
        sellable = sellable_kg(current, controls.post_harvest_loss_pct)
        metrics = YieldMetrics(
            yield_now_kg=current,
            sellable_kg=sellable,
            growth_stage=classify_growth_stage(stage_counts),
            mature_share=stage_share(stage_counts, Stage.MATURE),
            detections=stage_counts.total_fruit,
            revenue=estimate_revenue(sellable, price_per_kg),
        )
        logger.info(
            f"Current yield {metrics.yield_now_kg:.2f} kg, sellable {metrics.sellable_kg:.2f} kg, "
            f"stage {metrics.growth_stage.value}"
        )
        return metrics
