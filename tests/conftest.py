"""Pytest fixtures for all tests."""

import io

import pytest
from httpx import AsyncClient, ASGITransport

import idgen.default as default_module
import internal.logging as logging_module
from config import AuthConfig, Config, GeneratorConfig
from idgen.quickid import QuickId
from idgen.timebase import Timebase
from internal.logging import LogLevel, StructuredLogger
from service.app import create_app


class ManualClock:
    """Clock callable whose reading is set by the test; `step` advances it after each read."""

    def __init__(self, now=1000, step=0):
        self.now = now
        self.step = step
        self.reads = 0

    def __call__(self):
        reading = self.now
        self.now += self.step
        self.reads += 1
        return reading


class ScriptedClock:
    """Clock callable returning readings in order, then repeating the last one."""

    def __init__(self, *readings):
        self.readings = list(readings)
        self.reads = 0

    def __call__(self):
        index = min(self.reads, len(self.readings) - 1)
        self.reads += 1
        return self.readings[index]


@pytest.fixture
def clock():
    """Frozen test clock."""
    return ManualClock(now=1_700_000_000_000)


@pytest.fixture
def timebase(clock):
    """Timebase driven by the frozen clock."""
    return Timebase(clock=clock)


@pytest.fixture
def generator():
    """Generator on the real clock."""
    return QuickId("-test-")


@pytest.fixture
def log_stream(monkeypatch):
    """Capture structured log output at DEBUG level."""
    stream = io.StringIO()
    monkeypatch.setattr(logging_module, "_logger", StructuredLogger(LogLevel.DEBUG, stream))
    return stream


@pytest.fixture
def app_config(tmp_path):
    """Service config with a fixed tag and a throwaway crash log."""
    config = Config(generator=GeneratorConfig("-svc-"), auth=AuthConfig("operator", "s3cret"))
    config.logging.crash_file = str(tmp_path / "crash.log")
    return config


@pytest.fixture
def no_default(monkeypatch):
    """Start without a process-wide generator and restore the previous one afterwards."""
    monkeypatch.setattr(default_module, "_default", None)


@pytest.fixture
async def app(app_config, no_default):
    """Create test FastAPI app."""
    return create_app(app_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
