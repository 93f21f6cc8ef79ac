"""Application settings and configuration."""

import os
from pathlib import Path
from typing import Dict, Any, List, Tuple

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
WEATHER_DATA_FILE = Path(os.getenv("HARVEST_WEATHER_FILE", str(DATA_DIR / "weather_forecast.csv")))

# Forecast export directory
EXPORT_DIR = Path(os.getenv("HARVEST_EXPORT_DIR", str(BASE_DIR / "output" / "forecasts")))

# Weather source: "synthetic" or "file"
WEATHER_SOURCE = os.getenv("HARVEST_WEATHER_SOURCE", "synthetic").lower()
WEATHER_SEED = int(os.getenv("HARVEST_WEATHER_SEED", "42"))

# Synthetic weather generator (mirrors the mock forecast tool)
SYNTHETIC_WEATHER_SETTINGS = {
    "base_max_low": 30.0,
    "base_max_high": 35.0,
    "base_min_low": 20.0,
    "base_min_high": 25.0,
    "daily_fluctuation": 2.0,
    "max_days": 30,
}

# Stage pipelines: (from_stage, to_stage, gdd_threshold)
STAGE_PIPELINE_DEFINITIONS: Dict[str, List[Tuple[str, str, float]]] = {
    "six_stage": [
        ("immature", "breaker", 70.0),
        ("breaker", "ripening", 80.0),
        ("ripening", "pink", 40.0),
        ("pink", "mature", 55.0),
    ],
    "three_stage": [
        ("immature", "ripening", 80.0),
        ("ripening", "mature", 55.0),
    ],
}

DEFAULT_STAGE_MODEL = os.getenv("HARVEST_STAGE_MODEL", "six_stage")

# Minimum daily harvest (kg) worth scheduling
HARVEST_EMISSION_THRESHOLD_KG = 0.1

# Farm/model controls
DEFAULT_CONTROLS: Dict[str, Any] = {
    "avg_weight_g": 85.0,
    "post_harvest_loss_pct": 7.0,
    "num_plants": 10,
    "forecast_days": 14,
    "gdd_base_c": 10.0,
    "harvest_capacity_kg_day": 20.0,
    "district": "Coimbatore",
    "stage_model": DEFAULT_STAGE_MODEL,
}

# API settings
API_SETTINGS = {
    "title": "Tomato Harvest Forecast API",
    "description": "Ripening simulation and harvest scheduling from fruit stage counts",
    "version": "1.0.0",
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
