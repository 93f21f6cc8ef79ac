"""Tests for the command line interface."""

from datetime import date

import pandas as pd
from config.settings import DATA_DIR
from src.infrastructure.repositories.file_weather_repository import FileWeatherRepository
from src.presentation.cli.main import main

DETECTION_FILE = str(DATA_DIR / "sample_detection.json")
WEATHER_FILE = str(DATA_DIR / "weather_forecast.csv")


def forecast_args(*extra):
    return [
        "forecast",
        "--detection",
        DETECTION_FILE,
        "--weather-file",
        WEATHER_FILE,
        "--start-date",
        "2025-06-01",
        "--forecast-days",
        "10",
        *extra,
    ]


def test_forecast_prints_report(capsys):
    """Test a forecast from the sample detection and weather file."""
    assert main(forecast_args()) == 0

    out = capsys.readouterr().out
    assert "HARVEST FORECAST" in out
    assert "Plant:    Tomato | Coimbatore" in out
    assert "Fruit detected:    19 (16% mature)" in out
    assert "Harvest plan:" in out
    assert "2025-06-10" in out


def test_forecast_export_dir(tmp_path, capsys):
    """Test --export-dir writes the JSON and CSV files."""
    assert main(forecast_args("--export-dir", str(tmp_path))) == 0

    assert "Forecast saved to:" in capsys.readouterr().out
    assert len(list(tmp_path.glob("forecast_*.json"))) == 1
    daily = pd.read_csv(next(tmp_path.glob("*_daily.csv")))
    assert len(daily) == 10


def test_forecast_missing_detection_fails(tmp_path):
    """Test a missing detection file exits with status 1."""
    args = forecast_args()
    args[2] = str(tmp_path / "missing.json")
    assert main(args) == 1


def test_forecast_invalid_controls_fail():
    """Test rejected controls exit with status 1."""
    assert main(forecast_args("--capacity", "0")) == 1


def test_weather_writes_readable_csv(tmp_path, capsys):
    """Test the generated weather CSV can be read back."""
    output = tmp_path / "weather.csv"
    code = main(
        [
            "weather",
            "--output",
            str(output),
            "--district",
            "Madurai",
            "--days",
            "5",
            "--start-date",
            "2025-06-01",
            "--seed",
            "3",
        ]
    )

    assert code == 0
    assert "Wrote 5 days of weather for Madurai" in capsys.readouterr().out
    data = FileWeatherRepository(str(output)).get_forecast("Madurai", date(2025, 6, 1), 5)
    assert [d.date for d in data] == [date(2025, 6, i) for i in range(1, 6)]
