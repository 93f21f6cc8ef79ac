"""Use case for simulating thermal-time driven ripening."""

import logging
from typing import Dict, Iterator, List, Sequence, Tuple

import numpy as np

from ..entities.controls import Controls
from ..entities.forecast import DailyForecastPoint
from ..entities.stage import Stage, StagePipeline
from ..entities.stage_counts import StageCounts
from ..entities.weather_data import DailyWeather

logger = logging.getLogger(__name__)


def advance_populations(
    populations: np.ndarray, gdd_day: float, thresholds: np.ndarray
) -> np.ndarray:
    """
    Advance non-terminal stage populations by one day.

    Every transition is computed from the pre-update populations, so fruit
    moves at most one stage per day. The last entry's outflow leaves the
    array (it becomes terminal-stage fruit).

    Args:
        populations: Non-terminal populations in pipeline order
        gdd_day: Thermal units accumulated on this day (>= 0)
        thresholds: Thermal units needed for each transition

    Returns:
        New population array
    """
    fractions = np.minimum(1.0, gdd_day / thresholds)
    moved = populations * fractions
    updated = populations - moved
    updated[1:] += moved[:-1]
    return updated


class SimulateRipeningUseCase:
    """Use case to turn a stage snapshot into a daily ready-mass series."""

    def __init__(self, pipeline: StagePipeline):
        """
        Initialize use case.

        Args:
            pipeline: Ordered stage transitions with their GDD thresholds
        """
        self.pipeline = pipeline
        self.thresholds = np.asarray(pipeline.thresholds, dtype=float)

    def simulate_populations(
        self,
        stage_counts: StageCounts,
        weather: Sequence[DailyWeather],
        controls: Controls,
    ) -> Iterator[Tuple[DailyWeather, float, float, Dict[Stage, float]]]:
        """
        Yield ``(day, gdd_day, gdd_cum, populations)`` for each simulated day.

        Only stages on the pipeline take part; the terminal population is
        recovered as ``total - sum(non-terminal)`` so the total is conserved.
        """
        stages = self.pipeline.non_terminal_stages
        terminal = self.pipeline.terminal_stage
        populations = np.array([stage_counts.get(s) for s in stages], dtype=float)
        total = float(populations.sum()) + stage_counts.get(terminal)

        n_days = min(controls.forecast_days, len(weather))
        gdd_cum = 0.0
        for day in weather[:n_days]:
            gdd_day = day.growing_degree_days(controls.gdd_base_c)
            gdd_cum += gdd_day
            populations = advance_populations(populations, gdd_day, self.thresholds)

            snapshot = {stage: float(value) for stage, value in zip(stages, populations)}
            snapshot[terminal] = total - float(populations.sum())
            yield day, gdd_day, gdd_cum, snapshot

    def execute(
        self,
        stage_counts: StageCounts,
        weather: Sequence[DailyWeather],
        controls: Controls,
    ) -> List[DailyForecastPoint]:
        """
        Execute the simulation.

        Args:
            stage_counts: Snapshot populations per stage
            weather: Daily forecast ordered by date; extra days beyond
                ``controls.forecast_days`` are ignored and a shorter series
                truncates the horizon
            controls: Farm and model parameters

        Returns:
            One DailyForecastPoint per simulated day
        """
        logger.info(
            f"Simulating ripening: pipeline={self.pipeline}, "
            f"fruit={stage_counts.total_fruit:g}, days={min(controls.forecast_days, len(weather))}"
        )
        terminal = self.pipeline.terminal_stage

        daily = []
        for day, gdd_day, gdd_cum, populations in self.simulate_populations(
            stage_counts, weather, controls
        ):
            mature_count = populations[terminal]
            daily.append(
                DailyForecastPoint(
                    date=day.date,
                    ready_kg=mature_count * controls.avg_weight_g / 1000 * controls.num_plants,
                    gdd_cum=gdd_cum,
                    gdd_day=gdd_day,
                    mature_count=mature_count,
                )
            )

        logger.info(f"Simulated {len(daily)} days")
        return daily
