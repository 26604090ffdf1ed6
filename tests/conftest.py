"""
Shared fixtures for the geotagger test suite.

Everything runs against an in-memory folder store and a zero-latency
simulator, so no file, clock or network dependency leaks into the tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from geotagger.core.config import Settings
from geotagger.core.context import AppContext, build_context, get_context
from geotagger.main import app
from geotagger.schemas.common import Coordinate
from geotagger.services.satellite import SyntheticGridSource
from geotagger.services.storage import InMemoryFolderStore

PARIS = (48.8566, 2.3522)
PARIS_NEAR = (48.8567, 2.3523)
SAINT_DENIS = (48.9000, 2.4000)


def coord(lat: float, lon: float, **kw) -> Coordinate:
    return Coordinate(latitude=lat, longitude=lon, **kw)


@pytest.fixture()
def paris() -> Coordinate:
    return coord(*PARIS)


@pytest.fixture()
def store() -> InMemoryFolderStore:
    return InMemoryFolderStore()


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        GEOTAGGER_DATA_FILE=str(tmp_path / "data.json"),
        FETCH_LATENCY_S=0,
        FETCH_FAILURE_RATE=0,
        RASTER_PROVIDER_URL=None,
    )


@pytest.fixture()
def ctx(settings: Settings, store: InMemoryFolderStore) -> AppContext:
    source = SyntheticGridSource(latency_s=0, failure_rate=0, span_deg=settings.grid_span_deg)
    return build_context(settings, store=store, source=source)


@pytest.fixture()
def client(ctx: AppContext):
    app.dependency_overrides[get_context] = lambda: ctx
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
