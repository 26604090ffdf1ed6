# geotagger/services/synthetic.py
"""
Deterministic synthetic rasters.

Stand-in for a real satellite provider: every grid is a function of the
anchor coordinate and the distribution parameters only, so asking twice for
the same folder gives the same picture.
"""
import hashlib
from dataclasses import dataclass

import numpy as np

from ..core.errors import InputValidationError
from ..schemas.common import Bounds, Coordinate
from ..schemas.raster import DataGrid, Layer
from ..utils.geo import point_bbox

GRID_SPAN_DEG = 0.01  # ~1 km

@dataclass(frozen=True)
class RasterPreset:
    mean: float
    std_dev: float
    min: float
    max: float
    unit: str

PRESETS: dict[Layer, RasterPreset] = {
    Layer.VEGETATION: RasterPreset(mean=0.65, std_dev=0.12, min=0.0, max=1.0, unit="NDVI"),
    Layer.SOIL_MOISTURE: RasterPreset(mean=35.0, std_dev=8.0, min=0.0, max=100.0, unit="%"),
    Layer.TEMPERATURE: RasterPreset(mean=18.0, std_dev=3.0, min=-10.0, max=40.0, unit="°C"),
}

def seed_from(lat: float, lon: float) -> int:
    # Semilla estable por lugar; hash() de Python cambia entre procesos
    key = f"{lat:.6f},{lon:.6f}".encode("ascii")
    return int.from_bytes(hashlib.blake2b(key, digest_size=8).digest(), "big")

def generate(
    anchor: Coordinate,
    mean: float,
    std_dev: float,
    min_value: float,
    max_value: float,
    grid_size: int = 20,
    span_deg: float = GRID_SPAN_DEG,
) -> DataGrid:
    if grid_size < 1:
        raise InputValidationError(f"grid_size must be >= 1, got {grid_size}")
    if max_value < min_value:
        raise InputValidationError(f"max_value ({max_value}) must not be below min_value ({min_value})")

    rng = np.random.Generator(np.random.PCG64(seed_from(anchor.latitude, anchor.longitude)))
    # two uniforms per cell, row-major; u1 in (0, 1] keeps log() finite
    draws = rng.random((grid_size, grid_size, 2))
    u1 = 1.0 - draws[..., 0]
    u2 = draws[..., 1]
    z = np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)
    values = np.clip(mean + z * std_dev, min_value, max_value)

    bbox = point_bbox(anchor.latitude, anchor.longitude, span_deg / 2)
    return DataGrid(
        anchor=anchor,
        values=values.tolist(),
        bounds=Bounds(north=bbox.north, south=bbox.south, east=bbox.east, west=bbox.west),
    )

def generate_layer(anchor: Coordinate, layer: Layer, grid_size: int = 20, span_deg: float = GRID_SPAN_DEG) -> DataGrid:
    p = PRESETS[Layer(layer)]
    return generate(anchor, p.mean, p.std_dev, p.min, p.max, grid_size=grid_size, span_deg=span_deg)
