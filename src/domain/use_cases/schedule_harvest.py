"""Use case for greedy capacity-bounded harvest scheduling."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..entities.forecast import DailyForecastPoint, HarvestTask, HarvestWindow
from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchedulerState:
    """Carry-over between scheduling days."""

    backlog_kg: float = 0.0
    last_ready_kg: float = 0.0
    clamped_days: int = 0


@dataclass
class HarvestSchedule:
    """Result of scheduling a daily ready-mass series."""

    harvest_plan: List[HarvestTask] = field(default_factory=list)
    harvest_window: Optional[HarvestWindow] = None
    unharvested_kg: float = 0.0
    clamped_days: int = 0


class ScheduleHarvestUseCase:
    """Use case to pick as much of the backlog as capacity allows, every day."""

    def __init__(self, emission_threshold_kg: float = 0.1):
        """
        Initialize use case.

        Args:
            emission_threshold_kg: Days whose harvest would not exceed this
                mass get no task; their backlog carries forward
        """
        self.emission_threshold_kg = emission_threshold_kg

    def step(
        self,
        state: SchedulerState,
        point: DailyForecastPoint,
        capacity_kg_day: float,
    ) -> Tuple[SchedulerState, Optional[HarvestTask]]:
        """
        Schedule a single day.

        A drop in ``ready_kg`` against the previous day is treated as no new
        ripe mass; the backlog is only ever reduced by harvesting.

        Returns:
            Updated state and the task emitted for the day, if any
        """
        increment = point.ready_kg - state.last_ready_kg
        clamped_days = state.clamped_days
        if increment < 0:
            logger.warning(
                f"ready_kg decreased on {point.date.isoformat()} "
                f"({state.last_ready_kg:.3f} -> {point.ready_kg:.3f}); treating as no new mass"
            )
            increment = 0.0
            clamped_days += 1

        backlog = state.backlog_kg + increment
        can_harvest = min(backlog, capacity_kg_day)

        task = None
        if can_harvest > self.emission_threshold_kg:
            task = HarvestTask(date=point.date, harvest_kg=can_harvest)
            backlog -= can_harvest

        new_state = SchedulerState(
            backlog_kg=backlog,
            last_ready_kg=point.ready_kg,
            clamped_days=clamped_days,
        )
        return new_state, task

    def execute(
        self, daily: Sequence[DailyForecastPoint], capacity_kg_day: float
    ) -> HarvestSchedule:
        """
        Execute scheduling over a chronological series.

        Args:
            daily: Daily forecast points in chronological order
            capacity_kg_day: Maximum mass harvested per day

        Returns:
            HarvestSchedule with plan, window and leftover backlog
        """
        if not capacity_kg_day > 0:
            raise InvalidInputError(f"Harvest capacity must be positive, got {capacity_kg_day}")

        logger.info(f"Scheduling harvest over {len(daily)} days at {capacity_kg_day} kg/day")

        state = SchedulerState()
        plan: List[HarvestTask] = []
        for point in daily:
            state, task = self.step(state, point, capacity_kg_day)
            if task is not None:
                plan.append(task)

        window = HarvestWindow(start=plan[0].date, end=plan[-1].date) if plan else None

        logger.info(f"Scheduled {len(plan)} harvest days, {state.backlog_kg:.2f} kg left over")
        return HarvestSchedule(
            harvest_plan=plan,
            harvest_window=window,
            unharvested_kg=state.backlog_kg,
            clamped_days=state.clamped_days,
        )
