import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from src.prediction.application.predictor import BatchPredictor, HeuristicClassifier
from src.prediction.application.service import PredictionService
from src.prediction.application.time_resolver import TimeResolver
from src.prediction.domain import CongestionLevel, BatchResponse

@pytest.fixture
def weather_source(mild_weather):
    source = MagicMock()
    source.fetch_weather = AsyncMock(return_value=mild_weather)
    return source

@pytest.fixture
def make_service(locations, fixed_clock, fixed_random, weather_source):
    def make(*draws):
        return PredictionService(
            locations=locations,
            resolver=TimeResolver(clock=fixed_clock),
            weather_source=weather_source,
            predictor=BatchPredictor(HeuristicClassifier(random_source=fixed_random(*draws))),
            timestamp_fn=lambda: "2025-01-15T16:00:00+00:00",
        )
    return make

@pytest.mark.asyncio
async def test_peak_wednesday_scenario(make_service, weather_source, mild_weather):
    service = make_service(0.9, 0.5)
    response = await service.predict(hour=8, day=3)

    assert isinstance(response, BatchResponse)
    assert response.hour == 8
    assert response.day == 3
    assert response.weather == mild_weather
    assert response.timestamp == "2025-01-15T16:00:00+00:00"
    assert len(response.predictions) == 3
    for p in response.predictions:
        assert p.level == CongestionLevel.HIGH
        assert p.label == "High"
        assert p.confidence == pytest.approx(0.70)

@pytest.mark.asyncio
async def test_weather_fetched_once_at_network_center(make_service, weather_source):
    service = make_service(0.5)
    await service.predict(hour=8, day=3)

    weather_source.fetch_weather.assert_awaited_once()
    lat, lon, hour, offset = weather_source.fetch_weather.await_args.args
    assert (lat, lon) == pytest.approx(service.center)
    assert hour == 8
    assert offset == 0  # clock is a Wednesday

@pytest.mark.asyncio
async def test_future_day_passes_offset(make_service, weather_source):
    await make_service(0.5).predict(hour=17, day=5)
    assert weather_source.fetch_weather.await_args.args[2:] == (17, 2)

@pytest.mark.asyncio
async def test_defaults_to_current_time(make_service):
    response = await make_service(0.5).predict()
    assert (response.hour, response.day) == (10, 3)

@pytest.mark.asyncio
async def test_inputs_are_normalized(make_service):
    response = await make_service(0.5).predict(hour=25, day=9)
    assert (response.hour, response.day) == (1, 2)

@pytest.mark.asyncio
async def test_records_metrics(make_service):
    service = make_service(0.5)
    await service.predict(hour=8, day=3)
    await service.predict(hour=9, day=3)
    assert service.metrics.get_metrics().requests_served == 2

@pytest.mark.asyncio
async def test_summarize(make_service):
    # Off-peak: 0.9 -> High, 0.6 -> Moderate, 0.2 -> Low (confidence draws interleaved)
    service = make_service(0.9, 0.5, 0.6, 0.5, 0.2, 0.5)
    response = await service.predict(hour=13, day=3)
    summary = service.summarize(response)

    assert summary.total == 3
    assert summary.counts == {
        CongestionLevel.LOW: 1, CongestionLevel.MODERATE: 1, CongestionLevel.HIGH: 1
    }
    assert summary.percentage(CongestionLevel.HIGH) == 33

def test_summarize_empty_batch(mild_weather):
    summary = PredictionService.summarize(
        BatchResponse(predictions=[], weather=mild_weather, timestamp="t", hour=0, day=1)
    )
    assert summary.total == 0
    assert summary.percentage(CongestionLevel.LOW) == 0
