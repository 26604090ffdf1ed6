from pydantic import BaseModel, Field
from uuid import uuid4

from .common import Coordinate
from ..utils.time import now_ms

def new_id() -> str:
    return uuid4().hex

class Note(BaseModel):
    id: str = Field(default_factory=new_id)
    folder_id: str
    text: str = Field(..., min_length=1)
    created_at: int = Field(default_factory=now_ms)

class SatelliteSummary(BaseModel):
    """Scalar snapshot of the three synthetic layers at a folder's anchor."""
    ndvi: float
    soil_moisture: float
    temperature_celsius: float
    fetched_at: int = Field(default_factory=now_ms)

class Folder(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str
    anchor: Coordinate
    notes: list[Note] = Field(default_factory=list)
    satellite_data: SatelliteSummary | None = None
    created_at: int = Field(default_factory=now_ms)
    updated_at: int = Field(default_factory=now_ms)

class NearbySummary(BaseModel):
    folder_count: int
    note_count: int
