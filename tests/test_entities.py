"""Tests for domain entities."""

import math
import pytest
from datetime import date
from src.domain.entities.controls import Controls
from src.domain.entities.detection_result import DetectionResult
from src.domain.entities.forecast import HarvestWindow
from src.domain.entities.growth_stage import GrowthStage
from src.domain.entities.stage import Stage, StagePipeline
from src.domain.entities.stage_counts import StageCounts
from src.domain.entities.weather_data import DailyWeather
from src.domain.exceptions import InvalidInputError


def test_stage_enum():
    """Test Stage enum."""
    assert Stage("pink") is Stage.PINK
    assert not Stage.FLOWER.is_fruit
    assert Stage.MATURE.is_fruit


def test_pipeline_from_definition(six_stage):
    """Test StagePipeline built from configuration rows."""
    assert six_stage.stages == [
        Stage.IMMATURE,
        Stage.BREAKER,
        Stage.RIPENING,
        Stage.PINK,
        Stage.MATURE,
    ]
    assert six_stage.terminal_stage is Stage.MATURE
    assert six_stage.thresholds == [70.0, 80.0, 40.0, 55.0]


def test_pipeline_must_chain():
    """Test that a broken chain is rejected."""
    with pytest.raises(InvalidInputError):
        StagePipeline.from_definition(
            "broken", [("immature", "breaker", 70), ("ripening", "mature", 55)]
        )


def test_pipeline_rejects_bad_threshold_and_stage():
    """Test non-positive thresholds and unknown stages."""
    with pytest.raises(InvalidInputError):
        StagePipeline.from_definition("zero", [("immature", "mature", 0)])
    with pytest.raises(InvalidInputError):
        StagePipeline.from_definition("unknown", [("green", "mature", 10)])


def test_stage_counts_from_mapping_ignores_unknown():
    """Test unknown stage names are dropped and remembered."""
    counts = StageCounts.from_mapping({"immature": 4, "Mature": 2, "fruitlet": 5})
    assert counts.get(Stage.IMMATURE) == 4
    assert counts.mature == 2
    assert counts.get(Stage.PINK) == 0
    assert counts.ignored == ("fruitlet",)


def test_stage_counts_strict_rejects_unknown():
    """Test strict parsing."""
    with pytest.raises(InvalidInputError):
        StageCounts.from_mapping({"fruitlet": 1}, strict=True)


def test_stage_counts_from_stage_list_sums_repeats():
    """Test classifier rows with repeated stages."""
    counts = StageCounts.from_stage_list(
        [
            {"stage": "immature", "count": 3},
            {"stage": "immature", "count": 2},
            {"stage": "flower", "count": 7},
        ]
    )
    assert counts.get(Stage.IMMATURE) == 5
    assert counts.get(Stage.FLOWER) == 7
    assert counts.total_fruit == 5


def test_stage_counts_validate():
    """Test negative and non-finite counts are rejected."""
    with pytest.raises(InvalidInputError):
        StageCounts.from_mapping({"immature": -1}).validate()
    with pytest.raises(InvalidInputError):
        StageCounts.from_mapping({"immature": math.nan}).validate()
    with pytest.raises(InvalidInputError):
        StageCounts.from_mapping({"immature": "many"})


def test_daily_weather():
    """Test DailyWeather entity."""
    weather = DailyWeather.from_dict({"date": "2025-06-01", "temp_max_c": 30, "temp_min_c": 20})
    assert weather.date == date(2025, 6, 1)
    assert weather.mean_temp == 25.0
    assert weather.growing_degree_days(10) == 15.0
    assert weather.growing_degree_days(30) == 0.0


def test_daily_weather_invalid():
    """Test malformed weather entries."""
    with pytest.raises(InvalidInputError):
        DailyWeather.from_dict({"date": "06/01/2025", "temp_max_c": 30, "temp_min_c": 20})
    with pytest.raises(InvalidInputError):
        DailyWeather.from_dict({"date": "2025-06-01", "temp_max_c": 30})
    with pytest.raises(InvalidInputError):
        DailyWeather(date(2025, 6, 1), math.inf, 20).validate()


def test_controls_validate():
    """Test Controls validation."""
    Controls().validate()
    with pytest.raises(InvalidInputError):
        Controls(harvest_capacity_kg_day=0).validate()
    with pytest.raises(InvalidInputError):
        Controls(avg_weight_g=0).validate()
    with pytest.raises(InvalidInputError):
        Controls(post_harvest_loss_pct=120).validate()
    with pytest.raises(InvalidInputError):
        Controls(forecast_days=0).validate()
    with pytest.raises(InvalidInputError):
        Controls(forecast_days=2.5).validate()
    with pytest.raises(InvalidInputError):
        Controls(num_plants=2.0).validate()


def test_controls_from_dict_and_overrides():
    """Test Controls construction helpers."""
    controls = Controls.from_dict({"num_plants": 3, "unused": True})
    assert controls.num_plants == 3
    updated = controls.with_overrides(num_plants=None, forecast_days=7)
    assert updated.num_plants == 3
    assert updated.forecast_days == 7


def test_growth_stage():
    """Test GrowthStage enum."""
    assert GrowthStage.MATURE.value == "Mature"
    assert "harvest now" in GrowthStage.MATURE.describe()


def test_harvest_window_days():
    """Test HarvestWindow span."""
    window = HarvestWindow(start=date(2025, 6, 2), end=date(2025, 6, 5))
    assert window.days == 4
    assert window.to_dict() == {"start": "2025-06-02", "end": "2025-06-05"}


def test_detection_result_from_classifier_payload():
    """Test DetectionResult parsing."""
    detection = DetectionResult.from_dict(
        {
            "plantType": "Tomato",
            "summary": "A few ripe fruits",
            "stages": [{"stage": "mature", "count": 2}, {"stage": "immature", "count": 6}],
        }
    )
    assert detection.plant_type == "Tomato"
    assert detection.stage_counts.total_fruit == 8

    with pytest.raises(InvalidInputError):
        DetectionResult.from_dict({"plantType": "Tomato"})
