"""CLI interface for harvest forecasting."""

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from ...application.services.harvest_forecast_service import (
    HarvestForecastService,
    format_forecast_report,
)
from ...domain.entities.controls import Controls
from ...domain.entities.weather_data import parse_date
from ...infrastructure.repositories.file_forecast_repository import FileForecastRepository
from ...infrastructure.repositories.file_weather_repository import FileWeatherRepository
from ...infrastructure.repositories.json_detection_repository import JsonDetectionRepository
from ...infrastructure.repositories.synthetic_weather_repository import SyntheticWeatherRepository

from config.settings import (
    WEATHER_SEED,
    STAGE_PIPELINE_DEFINITIONS,
    HARVEST_EMISSION_THRESHOLD_KG,
    DEFAULT_CONTROLS,
    LOG_FORMAT,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tomato Harvest Forecast")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === forecast: detection JSON + weather -> report ===
    forecast_parser = subparsers.add_parser(
        "forecast", help="Simulate ripening and plan the harvest for a detection result"
    )
    forecast_parser.add_argument(
        "--detection", type=str, required=True, help="Classifier output JSON file"
    )
    forecast_parser.add_argument(
        "--weather-file",
        type=str,
        default=None,
        help="CSV/XLSX forecast (district,date,temp_max_c,temp_min_c); synthetic if omitted",
    )
    forecast_parser.add_argument("--seed", type=int, default=WEATHER_SEED, help="Synthetic weather seed")
    forecast_parser.add_argument("--start-date", type=str, default=None, help="YYYY-MM-DD (default: today)")
    forecast_parser.add_argument("--district", type=str, default=None)
    forecast_parser.add_argument("--avg-weight-g", type=float, default=None)
    forecast_parser.add_argument("--num-plants", type=int, default=None)
    forecast_parser.add_argument("--loss-pct", type=float, default=None, help="Post-harvest loss %%")
    forecast_parser.add_argument("--forecast-days", type=int, default=None)
    forecast_parser.add_argument("--gdd-base", type=float, default=None, help="GDD base temperature (C)")
    forecast_parser.add_argument("--capacity", type=float, default=None, help="Harvest capacity (kg/day)")
    forecast_parser.add_argument(
        "--stage-model", type=str, default=None, choices=sorted(STAGE_PIPELINE_DEFINITIONS)
    )
    forecast_parser.add_argument("--price-per-kg", type=float, default=None)
    forecast_parser.add_argument(
        "--strict-stages", action="store_true", help="Reject unknown stage names"
    )
    forecast_parser.add_argument(
        "--export-dir", type=str, default=None, help="Save forecast JSON/CSVs to this directory"
    )

    # === weather: synthetic forecast -> CSV ===
    weather_parser = subparsers.add_parser("weather", help="Generate a synthetic weather CSV")
    weather_parser.add_argument("--output", type=str, required=True, help="CSV/XLSX output path")
    weather_parser.add_argument("--district", type=str, default=DEFAULT_CONTROLS["district"])
    weather_parser.add_argument("--days", type=int, default=DEFAULT_CONTROLS["forecast_days"])
    weather_parser.add_argument("--start-date", type=str, default=None)
    weather_parser.add_argument("--seed", type=int, default=WEATHER_SEED)

    return parser


def run_forecast(args: argparse.Namespace) -> int:
    controls = Controls.from_dict(DEFAULT_CONTROLS).with_overrides(
        district=args.district,
        avg_weight_g=args.avg_weight_g,
        num_plants=args.num_plants,
        post_harvest_loss_pct=args.loss_pct,
        forecast_days=args.forecast_days,
        gdd_base_c=args.gdd_base,
        harvest_capacity_kg_day=args.capacity,
        stage_model=args.stage_model,
    )

    if args.weather_file:
        weather_repo = FileWeatherRepository(args.weather_file)
    else:
        weather_repo = SyntheticWeatherRepository(seed=args.seed)

    forecast_repo = FileForecastRepository(args.export_dir) if args.export_dir else None
    service = HarvestForecastService(
        weather_repo=weather_repo,
        pipeline_definitions=STAGE_PIPELINE_DEFINITIONS,
        forecast_repo=forecast_repo,
        emission_threshold_kg=HARVEST_EMISSION_THRESHOLD_KG,
    )

    detection = JsonDetectionRepository(strict=args.strict_stages).get_detection(args.detection)
    start = parse_date(args.start_date) if args.start_date else date.today()

    result = service.forecast_detection(
        detection, controls, start_date=start, price_per_kg=args.price_per_kg
    )

    print("\n" + "=" * 50)
    print(" HARVEST FORECAST ")
    print("=" * 50)
    print(f" Plant:    {detection.plant_type} | {controls.district} | {controls.num_plants} plants")
    if detection.summary:
        print(f" Summary:  {detection.summary}")
    print("-" * 50)
    print(format_forecast_report(result))
    print("=" * 50)

    if forecast_repo is not None:
        path = service.export(
            result,
            metadata={
                "controls": controls.to_dict(),
                "detection": args.detection,
                "plant_type": detection.plant_type,
            },
        )
        print(f" Forecast saved to: {path}")
    return 0


def run_weather(args: argparse.Namespace) -> int:
    start = parse_date(args.start_date) if args.start_date else date.today()
    source = SyntheticWeatherRepository(seed=args.seed)
    data = source.get_forecast(args.district, start, args.days)

    FileWeatherRepository(args.output, must_exist=False).save_weather_data(data)
    print(f"Wrote {len(data)} days of weather for {args.district} to {args.output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    args = build_parser().parse_args(argv)

    try:
        if args.command == "forecast":
            return run_forecast(args)
        if args.command == "weather":
            return run_weather(args)
    except Exception as e:
        logger.error(f"Command '{args.command}' failed: {e}", exc_info=True)
        return 1
    return 1


if __name__ == "__main__":
    sys.exit(main())
