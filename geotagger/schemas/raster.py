from enum import Enum
from pydantic import BaseModel, Field, model_validator

from .common import Bounds, Coordinate

class Layer(str, Enum):
    VEGETATION = "vegetation"
    SOIL_MOISTURE = "soil_moisture"
    TEMPERATURE = "temperature"

class ColorScheme(str, Enum):
    VEGETATION = "vegetation"
    MOISTURE = "moisture"
    TEMPERATURE = "temperature"

class DataGrid(BaseModel):
    """Square grid of samples around an anchor. Transient, never persisted."""
    anchor: Coordinate
    values: list[list[float]]
    bounds: Bounds

    @model_validator(mode="after")
    def _square(self):
        n = len(self.values)
        if n == 0 or any(len(row) != n for row in self.values):
            raise ValueError("values must be a non-empty N x N array")
        return self

class HeatmapResponse(BaseModel):
    layer: Layer
    scheme: ColorScheme
    width: int
    height: int
    value_min: float
    value_max: float
    # NW, NE, SE, SW as [lon, lat]
    coordinates: list[tuple[float, float]] = Field(..., min_length=4, max_length=4)
    legend: list[str] = Field(default_factory=list, description="CSS colors at low, mid and high end")
    image: str = Field(..., description="PNG as a data: URL")

class SatelliteSummaryOut(BaseModel):
    ndvi: float
    ndvi_label: str
    soil_moisture: float
    soil_moisture_label: str
    temperature_celsius: float
    temperature_label: str
    fetched_at: int
    source: str

class SatelliteReport(BaseModel):
    folder_id: str
    summary: SatelliteSummaryOut
