import pytest
import httpx
from datetime import datetime
from omegaconf import OmegaConf
from src.prediction.domain import Location, WeatherReading
from src.prediction.infrastructure.open_meteo import OpenMeteoClient

# Wednesday, 2025-01-15 10:00 local time
WEDNESDAY_10AM = datetime(2025, 1, 15, 10, 0)


class FixedRandom:
    """Cycles through the given draws."""
    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class FixedClock:
    """Returns the same local wall-clock time in whatever timezone is asked."""
    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self, tz):
        return self.moment.replace(tzinfo=tz)


class FakeOpenMeteo:
    """
    Mock transport for the Open-Meteo forecast endpoint.
    Payloads can be dicts, Exceptions to raise, or (status, body) tuples.
    """
    def __init__(self, current=None, hourly=None):
        self.current = current
        self.hourly = hourly
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.hourly if "hourly" in request.url.params else self.current
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, tuple):
            status, body = reply
            return httpx.Response(status, text=body)
        return httpx.Response(200, json=reply)

    def calls(self, variant: str) -> int:
        return sum(1 for r in self.requests if variant in r.url.params)

    def client(self) -> OpenMeteoClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return OpenMeteoClient(client=http)


def hourly_payload(hours: int = 192, **overrides):
    """Hourly block whose value at index i is distinct per field."""
    hourly = {
        "time": [f"t{i}" for i in range(hours)],
        "temperature_2m": [round(i * 0.1, 1) for i in range(hours)],
        "precipitation": [round(i * 0.01, 2) for i in range(hours)],
        "rain": [round(i * 0.001, 3) for i in range(hours)],
        "wind_speed_10m": [float(i) for i in range(hours)],
    }
    hourly.update(overrides)
    return {"hourly": hourly}


def current_payload(temperature_2m=15.0, precipitation=0.0, rain=0.0, wind_speed_10m=5.0):
    return {"current": {
        "temperature_2m": temperature_2m,
        "precipitation": precipitation,
        "rain": rain,
        "wind_speed_10m": wind_speed_10m,
    }}


@pytest.fixture
def fixed_clock():
    return FixedClock(WEDNESDAY_10AM)


@pytest.fixture
def locations():
    return (
        Location(name="US-41 & Half Day Rd", latitude=42.1928, longitude=-87.8887),
        Location(name="IL-22 & Milwaukee Ave", latitude=42.1918, longitude=-87.9312),
        Location(name="Grand Ave & Green Bay Rd", latitude=42.3636, longitude=-87.8750),
    )


@pytest.fixture
def mild_weather():
    return WeatherReading(temperature_2m=15.0, precipitation=0.0, rain=0.0, wind_speed_10m=5.0)


@pytest.fixture
def prediction_config():
    return OmegaConf.create({
        'prediction': {
            'timezone': 'America/Chicago',
            'weather': {
                'base_url': 'https://api.open-meteo.com/v1/forecast',
                'timeout_seconds': 1.0,
                'forecast_days': 8,
                'defaults': {
                    'temperature_2m': 20.0, 'precipitation': 0.0,
                    'rain': 0.0, 'wind_speed_10m': 10.0
                }
            },
            'cache': {'enabled': False},
            'heuristic': {
                'peak_windows': [[7, 9], [16, 18]],
                'peak_thresholds': {'high': 0.3, 'moderate': 0.1},
                'offpeak_thresholds': {'high': 0.8, 'moderate': 0.5},
                'confidence_min': 0.5,
                'confidence_span': 0.4,
                'seed': None
            },
            'locations': [
                {'name': 'US-41 & Half Day Rd', 'latitude': 42.1928, 'longitude': -87.8887},
                {'name': 'IL-22 & Milwaukee Ave', 'latitude': 42.1918, 'longitude': -87.9312},
                {'name': 'Grand Ave & Green Bay Rd', 'latitude': 42.3636, 'longitude': -87.8750},
            ]
        }
    })


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def fake_api():
    return FakeOpenMeteo


@pytest.fixture
def payloads():
    class Payloads:
        current = staticmethod(current_payload)
        hourly = staticmethod(hourly_payload)
    return Payloads
