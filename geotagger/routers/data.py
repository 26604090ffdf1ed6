# geotagger/routers/data.py
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from ..core.context import AppContext, get_context
from ..schemas.data_requests import GridQuery, HeatmapQuery
from ..schemas.raster import ColorScheme, DataGrid, HeatmapResponse, Layer, SatelliteReport
from ..services.colormap import gradient_for, to_css
from ..services.heatmap import rasterize

router = APIRouter(prefix="/data", tags=["data"])

# -------- helpers comunes --------
_DEFAULT_SCHEME = {
    Layer.VEGETATION: ColorScheme.VEGETATION,
    Layer.SOIL_MOISTURE: ColorScheme.MOISTURE,
    Layer.TEMPERATURE: ColorScheme.TEMPERATURE,
}

def _legend(scheme: ColorScheme) -> list[str]:
    g = gradient_for(scheme)
    return [to_css(g(t)) for t in (0.0, 0.5, 1.0)]


# =========================
# GRID
# =========================
@router.post("/grid", response_model=DataGrid)
async def data_grid(q: GridQuery, ctx: AppContext = Depends(get_context)):
    return await ctx.satellite.fetch_grid(q.coordinate, q.layer, q.grid_size)


# =========================
# HEATMAP
# =========================
@router.post("/heatmap", response_model=HeatmapResponse)
async def heatmap(q: HeatmapQuery, ctx: AppContext = Depends(get_context)):
    grid = await ctx.satellite.fetch_grid(q.coordinate, q.layer, q.grid_size)
    scheme = q.scheme or _DEFAULT_SCHEME[q.layer]
    img = rasterize(grid, scheme, q.min_value, q.max_value, scale=ctx.settings.pixels_per_cell)
    return HeatmapResponse(
        layer=q.layer,
        scheme=scheme,
        width=img.width,
        height=img.height,
        value_min=img.value_min,
        value_max=img.value_max,
        coordinates=img.quad,
        legend=_legend(scheme),
        image=img.to_data_url(),
    )


# =========================
# SATELLITE SUMMARY (folder)
# =========================
@router.post("/folders/{folder_id}/satellite", response_model=SatelliteReport)
async def folder_satellite(folder_id: str, ctx: AppContext = Depends(get_context)):
    # el store es síncrono y toma un lock: fuera del event loop
    folder = await run_in_threadpool(ctx.folders.get, folder_id)
    summary = await ctx.satellite.fetch_summary(folder.anchor)
    await run_in_threadpool(ctx.folders.set_satellite_data, folder_id, summary)
    return SatelliteReport(folder_id=folder_id, summary=ctx.satellite.describe(summary))
