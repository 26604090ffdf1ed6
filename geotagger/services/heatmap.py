# geotagger/services/heatmap.py
"""
Heatmap rasterization of a DataGrid.

Each grid cell becomes a solid ``scale`` x ``scale`` pixel block; grid row 0
is the northern edge of the image, column 0 the western edge, so the image
can be draped onto a map with the four corners from :attr:`RasterImage.quad`.
"""
import base64
import io
import logging
from dataclasses import dataclass

import numpy as np
from PIL import Image

from ..core.errors import InputValidationError
from ..schemas.raster import ColorScheme, DataGrid
from ..utils.geo import BBox
from .colormap import RGB, color_for, gradient_for

logger = logging.getLogger(__name__)

PIXELS_PER_CELL = 10

@dataclass
class RasterImage:
    pixels: np.ndarray  # (height, width, 3) uint8
    bounds: BBox
    value_min: float
    value_max: float

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def quad(self) -> list[tuple[float, float]]:
        return self.bounds.quad()

    def to_png(self) -> bytes:
        buf = io.BytesIO()
        Image.fromarray(self.pixels).save(buf, format="PNG")
        return buf.getvalue()

    def to_data_url(self) -> str:
        return "data:image/png;base64," + base64.b64encode(self.to_png()).decode("ascii")

def _cell_colors(values: np.ndarray, vmin: float, vmax: float, scheme: ColorScheme) -> np.ndarray:
    size = values.shape[0]
    cells = np.empty((size, size, 3), dtype=np.uint8)
    if vmax > vmin:
        for i in range(size):
            for j in range(size):
                cells[i, j] = color_for(float(values[i, j]), vmin, vmax, scheme)
    else:
        # grilla constante (p. ej. todo recortado al mismo límite): color medio
        mid: RGB = gradient_for(scheme)(0.5)
        cells[:, :] = mid
    return cells

def rasterize(
    grid: DataGrid,
    scheme: ColorScheme | str,
    min_override: float | None = None,
    max_override: float | None = None,
    scale: int = PIXELS_PER_CELL,
) -> RasterImage:
    """
    Turn ``grid`` into an RGB raster of ``size * scale`` pixels per side.

    The color range comes from the grid itself unless overridden. Overrides
    that leave ``max <= min`` are rejected; a grid whose own values are all
    equal is painted with the scheme's mid-range color.
    """
    scheme = ColorScheme(scheme)
    if scale < 1:
        raise InputValidationError(f"scale must be >= 1, got {scale}")

    n = len(grid.values)
    if n == 0 or any(len(row) != n for row in grid.values):
        raise InputValidationError(f"grid values must be a non-empty N x N array, got {n} rows")
    values = np.asarray(grid.values, dtype=float)

    vmin = float(values.min()) if min_override is None else float(min_override)
    vmax = float(values.max()) if max_override is None else float(max_override)
    if (min_override is not None or max_override is not None) and not vmax > vmin:
        raise InputValidationError(f"color range overrides must satisfy max > min, got [{vmin}, {vmax}]")

    cells = _cell_colors(values, vmin, vmax, scheme)
    pixels = np.repeat(np.repeat(cells, scale, axis=0), scale, axis=1)
    logger.debug(
        "rasterized %dx%d grid with %s into %dx%d px",
        values.shape[0], values.shape[1], scheme.value, pixels.shape[1], pixels.shape[0],
    )

    b = grid.bounds
    return RasterImage(
        pixels=pixels,
        bounds=BBox(west=b.west, south=b.south, east=b.east, north=b.north),
        value_min=vmin,
        value_max=vmax,
    )
