from pydantic import BaseModel, ConfigDict, Field

from ..utils.time import now_ms

class Coordinate(BaseModel):
    """A captured position. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    altitude: float | None = None
    accuracy: float = Field(0.0, ge=0, description="Horizontal accuracy in meters")
    timestamp: int = Field(default_factory=now_ms, description="Epoch milliseconds")

class Bounds(BaseModel):
    north: float
    south: float
    east: float
    west: float

class ErrorBody(BaseModel):
    """Body of every error the API maps from a GeoTaggerError."""
    error: str
    detail: str
