"""Root conftest — shared test configuration.

Invariants:
    - Every test gets its own storage file under tmp_path
    - get_settings and get_clock dependencies overridden per client
    - The clock advances one second per call, so stamped timestamps differ
"""

import itertools
import os

import pytest
from httpx import ASGITransport, AsyncClient

# Human-readable log lines in captured test output
os.environ.setdefault("GLITCH_LOG_FORMAT", "text")

from glitchstore.api.routes.glitch import get_clock  # noqa: E402
from glitchstore.config import Settings, get_settings  # noqa: E402
from glitchstore.infrastructure.glitch_store import GlitchStore  # noqa: E402
from glitchstore.main import app  # noqa: E402

CLOCK_START = 1_700_000_000


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "glitch_data.json"


@pytest.fixture
def settings(storage_path):
    return Settings(storage_path=str(storage_path), _env_file=None)


@pytest.fixture
def store(storage_path):
    return GlitchStore(storage_path)


@pytest.fixture
def clock():
    """Deterministic clock: CLOCK_START, CLOCK_START + 1, ..."""
    ticks = itertools.count(CLOCK_START)
    return lambda: float(next(ticks))


@pytest.fixture
async def client(settings, clock):
    """FastAPI test client with settings and clock overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_clock] = lambda: clock

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
