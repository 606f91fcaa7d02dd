import csv
import importlib.util
import pytest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock
from src.prediction.application.predictor import BatchPredictor, HeuristicClassifier
from src.prediction.application.service import PredictionService
from src.prediction.application.time_resolver import TimeResolver

SCRIPT = Path(__file__).resolve().parents[3] / "scripts" / "export_week.py"
LABELS = {"0": "Low", "1": "Moderate", "2": "High"}

def load_export_module():
    spec = importlib.util.spec_from_file_location("export_week", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

@pytest.fixture
def weather_source(mild_weather):
    source = MagicMock()
    source.fetch_weather = AsyncMock(return_value=mild_weather)
    return source

@pytest.fixture
def service(locations, fixed_clock, fixed_random, weather_source):
    return PredictionService(
        locations=locations,
        resolver=TimeResolver(clock=fixed_clock),
        weather_source=weather_source,
        predictor=BatchPredictor(HeuristicClassifier(
            random_source=fixed_random(0.9, 0.5, 0.6, 0.1, 0.05, 0.3)
        )),
        timestamp_fn=lambda: "2025-01-15T16:00:00+00:00",
    )

@pytest.mark.asyncio
async def test_export_writes_full_week_grid(service, locations, weather_source, tmp_path):
    export_week = load_export_module()
    output_file = tmp_path / "grid" / "week.csv"

    await export_week.export(service, str(output_file))

    with open(output_file, newline='') as f:
        rows = list(csv.reader(f))

    header, data = rows[0], rows[1:]
    assert header == [
        "day", "hour", "location", "latitude", "longitude", "congestion",
        "congestion_label", "probability", "temperature_2m", "precipitation",
        "rain", "wind_speed_10m", "timestamp"
    ]
    assert len(data) == 7 * 24 * len(locations)
    assert data[0][:3] == ["1", "0", locations[0].name]
    assert data[-1][:3] == ["7", "23", locations[-1].name]
    assert weather_source.fetch_weather.await_count == 7 * 24

@pytest.mark.asyncio
async def test_export_rows_are_consistent(service, locations, tmp_path):
    export_week = load_export_module()
    output_file = tmp_path / "week.csv"

    await export_week.export(service, str(output_file))

    with open(output_file, newline='') as f:
        rows = list(csv.DictReader(f))

    names = [loc.name for loc in locations]
    for i, row in enumerate(rows):
        assert row["congestion_label"] == LABELS[row["congestion"]]
        assert 0.5 <= float(row["probability"]) < 0.9
        assert row["location"] == names[i % len(names)]
        assert float(row["temperature_2m"]) == 15.0
        assert row["timestamp"] == "2025-01-15T16:00:00+00:00"
    slots = {(row["day"], row["hour"]) for row in rows}
    assert len(slots) == 7 * 24
