"""FastAPI main application."""

import logging
from typing import Dict, Any, List, Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from ...application.services.harvest_forecast_service import HarvestForecastService
from ...domain.entities.controls import Controls
from ...domain.entities.stage_counts import StageCounts
from ...domain.entities.weather_data import DailyWeather, parse_date
from ...domain.exceptions import InvalidInputError
from ...infrastructure.repositories.file_weather_repository import FileWeatherRepository
from ...infrastructure.repositories.synthetic_weather_repository import SyntheticWeatherRepository
from config.settings import (
    WEATHER_DATA_FILE,
    WEATHER_SOURCE,
    WEATHER_SEED,
    STAGE_PIPELINE_DEFINITIONS,
    HARVEST_EMISSION_THRESHOLD_KG,
    DEFAULT_CONTROLS,
    API_SETTINGS,
    LOG_FORMAT,
)

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# Initialize repositories and service
if WEATHER_SOURCE == "file":
    weather_repo = FileWeatherRepository(str(WEATHER_DATA_FILE))
else:
    weather_repo = SyntheticWeatherRepository(seed=WEATHER_SEED)

service = HarvestForecastService(
    weather_repo=weather_repo,
    pipeline_definitions=STAGE_PIPELINE_DEFINITIONS,
    emission_threshold_kg=HARVEST_EMISSION_THRESHOLD_KG,
)


# Request/Response models
class StageCountItem(BaseModel):
    stage: str
    count: float


class WeatherItem(BaseModel):
    date: str = Field(..., description="Forecast day, YYYY-MM-DD")
    temp_max_c: float
    temp_min_c: float


class ControlsModel(BaseModel):
    avg_weight_g: float = DEFAULT_CONTROLS["avg_weight_g"]
    post_harvest_loss_pct: float = DEFAULT_CONTROLS["post_harvest_loss_pct"]
    num_plants: int = DEFAULT_CONTROLS["num_plants"]
    forecast_days: int = DEFAULT_CONTROLS["forecast_days"]
    gdd_base_c: float = DEFAULT_CONTROLS["gdd_base_c"]
    harvest_capacity_kg_day: float = DEFAULT_CONTROLS["harvest_capacity_kg_day"]
    district: str = DEFAULT_CONTROLS["district"]
    stage_model: str = DEFAULT_CONTROLS["stage_model"]


class ForecastRequest(BaseModel):
    """Request model for a forecast run."""

    stage_counts: Optional[Dict[str, float]] = Field(
        None, description="Stage name to count, e.g. {'immature': 10, 'mature': 2}"
    )
    stages: Optional[List[StageCountItem]] = Field(
        None, description="Classifier output rows [{'stage': ..., 'count': ...}]"
    )
    weather: Optional[List[WeatherItem]] = Field(
        None, description="Inline forecast; the configured weather source is used when omitted"
    )
    start_date: Optional[str] = Field(None, description="First forecast day (defaults to today)")
    price_per_kg: Optional[float] = None
    strict_stages: bool = False
    controls: ControlsModel = Field(default_factory=ControlsModel)


class DailyPointModel(BaseModel):
    date: str
    ready_kg: float
    gdd_cum: float
    gdd_day: float
    mature_count: float


class HarvestTaskModel(BaseModel):
    date: str
    harvest_kg: float


class HarvestWindowModel(BaseModel):
    start: str
    end: str


class ForecastResponse(BaseModel):
    """Response model for a forecast run."""

    yield_now_kg: float
    sellable_kg: float
    daily: List[DailyPointModel]
    harvest_plan: List[HarvestTaskModel]
    harvest_window: Optional[HarvestWindowModel] = None
    notes: List[str]
    growth_stage: Optional[str] = None
    revenue: Optional[float] = None
    detections: float
    mature_share: float
    total_harvest_kg: float


def _to_domain(request: ForecastRequest):
    if request.stages is not None:
        counts = StageCounts.from_stage_list(
            [{"stage": s.stage, "count": s.count} for s in request.stages],
            strict=request.strict_stages,
        )
    elif request.stage_counts is not None:
        counts = StageCounts.from_mapping(request.stage_counts, strict=request.strict_stages)
    else:
        raise InvalidInputError("Provide either 'stage_counts' or 'stages'")

    c = request.controls
    controls = Controls(
        avg_weight_g=c.avg_weight_g,
        post_harvest_loss_pct=c.post_harvest_loss_pct,
        num_plants=c.num_plants,
        forecast_days=c.forecast_days,
        gdd_base_c=c.gdd_base_c,
        harvest_capacity_kg_day=c.harvest_capacity_kg_day,
        district=c.district,
        stage_model=c.stage_model,
    )

    weather = None
    if request.weather is not None:
        weather = [
            DailyWeather(
                date=parse_date(w.date),
                temp_max_c=w.temp_max_c,
                temp_min_c=w.temp_min_c,
                district=c.district,
            )
            for w in request.weather
        ]
    start_date = parse_date(request.start_date) if request.start_date else None
    return counts, controls, weather, start_date


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": API_SETTINGS["title"],
        "version": API_SETTINGS["version"],
        "endpoints": {
            "forecast": "/forecast",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/forecast", response_model=ForecastResponse)
async def forecast(request: ForecastRequest) -> ForecastResponse:
    """
    Simulate ripening and schedule the harvest for a stage snapshot.

    Args:
        request: Stage counts, controls and optional inline weather

    Returns:
        Forecast with daily ready mass, harvest plan and window
    """
    try:
        counts, controls, weather, start_date = _to_domain(request)
        result = service.forecast(
            counts,
            controls,
            weather=weather,
            start_date=start_date,
            price_per_kg=request.price_per_kg,
        )
        return ForecastResponse(**result.to_dict())

    except InvalidInputError as e:
        logger.warning(f"Rejected forecast request: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Forecast error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
