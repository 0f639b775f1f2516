import os
import sys
import asyncio
import inspect

import httpx
import pytest

# Ensure project root is on sys.path so `import flightradar` works in tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from flightradar.aviationstack.client import AviationStackClient  # noqa: E402
from flightradar.obs.context import clear_context  # noqa: E402
from flightradar.obs.metrics import reset_metrics  # noqa: E402
from flightradar.router import ToolRouter  # noqa: E402

TEST_BASE_URL = "https://api.aviationstack.test/v1"


def pytest_pyfunc_call(pyfuncitem):
    """Allow running async tests without pytest-asyncio.

    If the test function is a coroutine, run it in a fresh event loop.
    """
    testfunction = pyfuncitem.obj
    if inspect.iscoroutinefunction(testfunction):
        funcargs = pyfuncitem.funcargs
        sig = inspect.signature(testfunction)
        # Filter only the parameters that the test function expects
        allowed = {name: funcargs[name] for name in sig.parameters.keys() if name in funcargs}
        asyncio.run(testfunction(**allowed))
        return True
    return None


def make_record(**overrides):
    record = {
        "flight_date": "2024-03-15",
        "flight_status": "active",
        "departure": {
            "airport": "Heathrow",
            "timezone": "Europe/London",
            "iata": "LHR",
            "icao": "EGLL",
            "terminal": "5",
            "gate": "A10",
            "delay": 15,
            "scheduled": "2024-03-15T14:30:00+00:00",
            "estimated": "2024-03-15T14:45:00+00:00",
            "actual": "2024-03-15T14:47:00+00:00",
            "estimated_runway": "2024-03-15T14:55:00+00:00",
            "actual_runway": "2024-03-15T14:55:00+00:00",
        },
        "arrival": {
            "airport": "John F Kennedy International",
            "timezone": "America/New_York",
            "iata": "JFK",
            "icao": "KJFK",
            "terminal": "7",
            "gate": None,
            "baggage": "3",
            "delay": None,
            "scheduled": "2024-03-15T22:30:00+00:00",
            "estimated": "2024-03-15T22:40:00+00:00",
            "actual": None,
            "estimated_runway": None,
            "actual_runway": None,
        },
        "airline": {"name": "British Airways", "iata": "BA", "icao": "BAW"},
        "flight": {
            "number": "117",
            "iata": "BA117",
            "icao": "BAW117",
            "codeshared": {
                "airline_name": "american airlines",
                "airline_iata": "aa",
                "flight_number": "6135",
            },
        },
        "aircraft": {"registration": "G-XWBA", "iata": "A35K", "icao": "A35K", "icao24": "407A7C"},
        "live": {
            "updated": "2024-03-15T16:00:00+00:00",
            "latitude": 51.47,
            "longitude": -30.25,
            "altitude": 10668.72,
            "direction": 270,
            "heading": 271,
            "speed_horizontal": 905.2,
            "speed_vertical": 0,
            "is_ground": False,
        },
    }
    record.update(overrides)
    return record


class FakeUpstream:
    """httpx.MockTransport handler that records every request it serves."""

    def __init__(self, status_code=200, json_data=None, exc=None, text=None):
        self.status_code = status_code
        self.json_data = json_data if json_data is not None else {"pagination": {"total": 0}, "data": []}
        self.exc = exc
        self.text = text
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_data)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_params(self) -> dict:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def record():
    return make_record()


@pytest.fixture
def make_client():
    def _make(upstream, api_key="test-key"):
        return AviationStackClient(
            api_key=api_key,
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(upstream),
        )
    return _make


@pytest.fixture
def make_router(make_client):
    def _make(upstream, api_key="test-key", tz="UTC"):
        return ToolRouter(make_client(upstream, api_key=api_key), tz=tz)
    return _make


@pytest.fixture(autouse=True)
def _fresh_observability():
    reset_metrics()
    clear_context()
    yield
    reset_metrics()
    clear_context()
