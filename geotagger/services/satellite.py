# geotagger/services/satellite.py
"""
"Satellite" layers for a coordinate.

By default every layer comes from the deterministic simulator, behind an
artificial network delay (cancellable, it is just ``asyncio.sleep``) and an
optional simulated failure rate. When ``RASTER_PROVIDER_URL`` is set the grids
are fetched from that service instead; it must answer with the DataGrid shape.
"""
import asyncio
import logging
import random
from typing import Optional, Protocol

import httpx
import numpy as np
from pydantic import ValidationError

from ..core.config import Settings
from ..core.errors import SatelliteFetchError
from ..schemas.common import Coordinate
from ..schemas.folders import SatelliteSummary
from ..schemas.raster import DataGrid, Layer, SatelliteSummaryOut
from ..utils.http import get_json
from .synthetic import GRID_SPAN_DEG, generate_layer

logger = logging.getLogger(__name__)

class GridSource(Protocol):
    name: str
    async def fetch(self, anchor: Coordinate, layer: Layer, grid_size: int) -> DataGrid: ...

class SyntheticGridSource:
    name = "synthetic"

    def __init__(self, latency_s: float = 0.5, failure_rate: float = 0.0, span_deg: float = GRID_SPAN_DEG, rng: Optional[random.Random] = None):
        self.latency_s = latency_s
        self.failure_rate = failure_rate
        self.span_deg = span_deg
        self._rng = rng or random.Random()

    async def fetch(self, anchor: Coordinate, layer: Layer, grid_size: int) -> DataGrid:
        # Simula latencia de red
        if self.latency_s > 0:
            await asyncio.sleep(self.latency_s)
        if self.failure_rate > 0 and self._rng.random() < self.failure_rate:
            raise SatelliteFetchError(f"Simulated fetch failure for layer '{Layer(layer).value}'")
        return generate_layer(anchor, layer, grid_size=grid_size, span_deg=self.span_deg)

class RemoteGridSource:
    name = "remote"

    def __init__(self, base_url: str, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, anchor: Coordinate, layer: Layer, grid_size: int) -> DataGrid:
        url = f"{self.base_url}/grid"
        params = {"lat": anchor.latitude, "lon": anchor.longitude, "layer": Layer(layer).value, "size": grid_size}
        try:
            payload = await get_json(url, params=params, timeout=self.timeout, transport=self.transport)
        except httpx.HTTPStatusError as e:
            raise SatelliteFetchError(f"Raster provider answered {e.response.status_code} for {Layer(layer).value}") from e
        except httpx.HTTPError as e:
            raise SatelliteFetchError(f"Raster provider unreachable: {e}") from e
        try:
            return DataGrid.model_validate(payload)
        except ValidationError as e:
            raise SatelliteFetchError(f"Raster provider returned an invalid grid: {e.error_count()} error(s)") from e

def source_from_settings(settings: Settings) -> GridSource:
    if settings.raster_provider_url:
        return RemoteGridSource(settings.raster_provider_url, timeout=settings.http_timeout_s)
    return SyntheticGridSource(
        latency_s=settings.fetch_latency_s,
        failure_rate=settings.fetch_failure_rate,
        span_deg=settings.grid_span_deg,
    )

# ----------------- etiquetas legibles -----------------
def ndvi_label(ndvi: float) -> str:
    if ndvi < 0.3: return "Poor vegetation"
    if ndvi < 0.5: return "Moderate vegetation"
    if ndvi < 0.7: return "Good vegetation"
    return "Excellent vegetation"

def moisture_label(moisture: float) -> str:
    if moisture < 30: return "Dry"
    if moisture < 50: return "Moderate"
    return "Moist"

def temperature_label(celsius: float) -> str:
    if celsius < 15: return "Cool"
    if celsius < 25: return "Mild"
    return "Warm"

class SatelliteService:
    def __init__(self, source: GridSource, grid_size: int = 20):
        self.source = source
        self.grid_size = grid_size

    async def fetch_grid(self, anchor: Coordinate, layer: Layer, grid_size: Optional[int] = None) -> DataGrid:
        try:
            return await self.source.fetch(anchor, Layer(layer), grid_size or self.grid_size)
        except SatelliteFetchError as ex:
            logger.warning("%s fetch of %s failed: %s", self.source.name, Layer(layer).value, ex.message)
            raise

    async def fetch_summary(self, anchor: Coordinate) -> SatelliteSummary:
        """Mean of each layer over its grid; the three fetches run concurrently."""
        ndvi, moisture, temp = await asyncio.gather(
            self.fetch_grid(anchor, Layer.VEGETATION),
            self.fetch_grid(anchor, Layer.SOIL_MOISTURE),
            self.fetch_grid(anchor, Layer.TEMPERATURE),
        )
        def mean(g: DataGrid) -> float:
            return round(float(np.mean(g.values)), 3)
        return SatelliteSummary(
            ndvi=mean(ndvi),
            soil_moisture=mean(moisture),
            temperature_celsius=mean(temp),
        )

    def describe(self, summary: SatelliteSummary) -> SatelliteSummaryOut:
        return SatelliteSummaryOut(
            ndvi=summary.ndvi,
            ndvi_label=ndvi_label(summary.ndvi),
            soil_moisture=summary.soil_moisture,
            soil_moisture_label=moisture_label(summary.soil_moisture),
            temperature_celsius=summary.temperature_celsius,
            temperature_label=temperature_label(summary.temperature_celsius),
            fetched_at=summary.fetched_at,
            source=self.source.name,
        )
