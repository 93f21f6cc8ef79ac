"""Tests for ScheduleHarvestUseCase."""

from datetime import date, timedelta

import pytest
from src.domain.entities.controls import Controls
from src.domain.entities.forecast import DailyForecastPoint
from src.domain.entities.stage_counts import StageCounts
from src.domain.exceptions import InvalidInputError
from src.domain.use_cases.schedule_harvest import ScheduleHarvestUseCase, SchedulerState
from src.domain.use_cases.simulate_ripening import SimulateRipeningUseCase

START = date(2025, 6, 1)


def series(ready):
    return [
        DailyForecastPoint(date=START + timedelta(days=i), ready_kg=kg, gdd_cum=0.0)
        for i, kg in enumerate(ready)
    ]


def test_greedy_plan_carries_backlog():
    """Test capacity-bounded harvesting with carried backlog."""
    schedule = ScheduleHarvestUseCase().execute(series([0, 5, 5, 30]), capacity_kg_day=10)

    assert [(t.date.day, t.harvest_kg) for t in schedule.harvest_plan] == [(2, 5), (4, 10)]
    assert schedule.harvest_window.start == date(2025, 6, 2)
    assert schedule.harvest_window.end == date(2025, 6, 4)
    assert schedule.unharvested_kg == 15


def test_backlog_drains_after_ripening_stops():
    """Backlog left on a busy day is picked on the following days."""
    schedule = ScheduleHarvestUseCase().execute(series([25, 25, 25]), capacity_kg_day=10)
    assert [t.harvest_kg for t in schedule.harvest_plan] == [10, 10, 5]
    assert schedule.unharvested_kg == 0


def test_small_amounts_are_not_scheduled():
    """Harvests at or below the emission threshold are skipped but carried."""
    schedule = ScheduleHarvestUseCase().execute(series([0.05, 0.08, 0.5]), capacity_kg_day=10)
    assert len(schedule.harvest_plan) == 1
    assert schedule.harvest_plan[0].date == date(2025, 6, 3)
    assert schedule.harvest_plan[0].harvest_kg == pytest.approx(0.5)


def test_custom_emission_threshold():
    """The emission threshold is configurable."""
    schedule = ScheduleHarvestUseCase(emission_threshold_kg=1.0).execute(
        series([0.5, 0.9, 1.5]), capacity_kg_day=10
    )
    assert [t.harvest_kg for t in schedule.harvest_plan] == [pytest.approx(1.5)]


def test_empty_series():
    """No days means no plan and no window."""
    schedule = ScheduleHarvestUseCase().execute([], capacity_kg_day=10)
    assert schedule.harvest_plan == []
    assert schedule.harvest_window is None


def test_decrease_is_clamped():
    """A drop in ready mass adds nothing and never eats into the backlog."""
    schedule = ScheduleHarvestUseCase().execute(series([5, 3, 6]), capacity_kg_day=10)
    assert [t.harvest_kg for t in schedule.harvest_plan] == [5, 3]
    assert schedule.clamped_days == 1


def test_step_is_pure():
    """The step function returns a new state and leaves the old one untouched."""
    use_case = ScheduleHarvestUseCase()
    state = SchedulerState()
    point = series([12])[0]

    new_state, task = use_case.step(state, point, capacity_kg_day=10)

    assert state == SchedulerState()
    assert task.harvest_kg == 10
    assert new_state.backlog_kg == 2
    assert new_state.last_ready_kg == 12


def test_invalid_capacity():
    """Non-positive capacity is rejected."""
    with pytest.raises(InvalidInputError):
        ScheduleHarvestUseCase().execute(series([1]), capacity_kg_day=0)


def test_plan_invariants_on_simulated_series(six_stage, warm_weather):
    """Capacity bound, non-negative backlog and no invented mass."""
    counts = StageCounts.from_mapping({"immature": 40, "breaker": 20, "ripening": 15, "pink": 10})
    controls = Controls(avg_weight_g=120, num_plants=25, forecast_days=14, harvest_capacity_kg_day=8)
    daily = SimulateRipeningUseCase(six_stage).execute(counts, warm_weather, controls)

    use_case = ScheduleHarvestUseCase()
    state = SchedulerState()
    plan = []
    for point in daily:
        state, task = use_case.step(state, point, controls.harvest_capacity_kg_day)
        assert state.backlog_kg >= -1e-9
        if task:
            plan.append(task)

    assert plan
    assert all(t.harvest_kg <= controls.harvest_capacity_kg_day for t in plan)
    assert sum(t.harvest_kg for t in plan) <= daily[-1].ready_kg + 1e-9
    assert state.clamped_days == 0
