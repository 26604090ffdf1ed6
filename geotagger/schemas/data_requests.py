# geotagger/schemas/data_requests.py
from pydantic import BaseModel, Field, model_validator
from typing import Optional
from .common import Coordinate
from .raster import ColorScheme, Layer
from ..core.errors import LocationErrorKind

class NoteHere(BaseModel):
    coordinate: Coordinate
    text: str = Field(..., min_length=1)
    threshold_m: float | None = Field(None, gt=0)

class NoteCreate(BaseModel):
    text: str = Field(..., min_length=1)

class FolderRename(BaseModel):
    name: str = Field(..., min_length=1)

class GridQuery(BaseModel):
    coordinate: Coordinate
    layer: Layer = Layer.VEGETATION
    grid_size: int | None = Field(None, ge=1, le=200)

class HeatmapQuery(GridQuery):
    scheme: Optional[ColorScheme] = None
    min_value: float | None = None
    max_value: float | None = None

class MissionStart(BaseModel):
    objective_count: int | None = Field(None, ge=1)
    required_distance_m: float | None = Field(None, gt=0)

class LocationUpdate(BaseModel):
    """Either a coordinate or an error from the location source, never both."""
    coordinate: Coordinate | None = None
    error: LocationErrorKind | None = None
    message: str | None = None

    @model_validator(mode="after")
    def _one_of(self):
        if (self.coordinate is None) == (self.error is None):
            raise ValueError("provide exactly one of 'coordinate' or 'error'")
        return self
