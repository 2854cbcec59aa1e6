"""Pytest configuration and fixtures for tile-synth tests."""

import random

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tile_synth.config import Settings
from tile_synth.dependencies import get_tile_service
from tile_synth.geometry import BoundingBox
from tile_synth.main import app
from tile_synth.service import TileService


@pytest.fixture
def rng():
    """Seeded random source for reproducible synthesis."""
    return random.Random(1234)


@pytest.fixture
def square_bbox():
    """A 10x10 degree box anchored at the origin."""
    return BoundingBox(min_lon=0.0, min_lat=0.0, max_lon=10.0, max_lat=10.0)


@pytest.fixture
def test_settings():
    """Settings with a fixed seed so tiles are reproducible."""
    return Settings(random_seed=42, tile_cache_size=16)


@pytest.fixture
def service(test_settings):
    """A fresh tile service per test."""
    return TileService(test_settings)


@pytest_asyncio.fixture
async def client(service):
    """Async test client for the FastAPI app backed by a fresh service."""
    app.dependency_overrides[get_tile_service] = lambda: service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
