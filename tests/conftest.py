"""Shared fixtures."""

from datetime import date, timedelta

import pytest

from config.settings import STAGE_PIPELINE_DEFINITIONS
from src.application.services.harvest_forecast_service import HarvestForecastService
from src.domain.entities.controls import Controls
from src.domain.entities.stage import StagePipeline
from src.domain.entities.weather_data import DailyWeather
from src.infrastructure.repositories.synthetic_weather_repository import SyntheticWeatherRepository

START = date(2025, 6, 1)


def _build_weather(pairs, start=START, district="Coimbatore"):
    return [
        DailyWeather(date=start + timedelta(days=i), temp_max_c=hi, temp_min_c=lo, district=district)
        for i, (hi, lo) in enumerate(pairs)
    ]


@pytest.fixture
def make_weather():
    """Factory building a DailyWeather series from (temp_max, temp_min) pairs."""
    return _build_weather


@pytest.fixture
def example_weather():
    """Five days with daily GDD 15, 17, 13, 15, 16 at base 10."""
    return _build_weather([(30, 20), (32, 22), (28, 18), (30, 20), (31, 21)])


@pytest.fixture
def warm_weather():
    return _build_weather([(31, 21)] * 14)


@pytest.fixture
def six_stage():
    return StagePipeline.from_definition("six_stage", STAGE_PIPELINE_DEFINITIONS["six_stage"])


@pytest.fixture
def three_stage():
    return StagePipeline.from_definition("three_stage", STAGE_PIPELINE_DEFINITIONS["three_stage"])


@pytest.fixture
def example_controls():
    return Controls(
        avg_weight_g=100,
        num_plants=1,
        gdd_base_c=10,
        forecast_days=5,
        post_harvest_loss_pct=0,
        harvest_capacity_kg_day=20,
        district="Coimbatore",
        stage_model="three_stage",
    )


@pytest.fixture
def service():
    return HarvestForecastService(
        weather_repo=SyntheticWeatherRepository(seed=7),
        pipeline_definitions=STAGE_PIPELINE_DEFINITIONS,
    )
