from pydantic import BaseModel, Field

from .common import Coordinate
from .folders import NearbySummary, new_id

class Objective(BaseModel):
    id: str = Field(default_factory=new_id)
    description: str
    target: Coordinate | None = None
    required_distance_m: float = Field(50.0, gt=0)
    completed: bool = False

class Mission(BaseModel):
    id: str = Field(default_factory=new_id)
    title: str
    description: str
    objectives: list[Objective]
    reward: int = 0
    completed: bool = False

class ObjectiveCompleted(BaseModel):
    mission_id: str
    objective_id: str
    description: str
    distance_m: float
    reward: int

class ObjectiveStatus(BaseModel):
    objective_id: str
    description: str
    completed: bool
    distance_m: float | None = None

class MissionProgress(BaseModel):
    mission: Mission
    completed_count: int
    total_count: int
    progress: float
    is_complete: bool
    objectives: list[ObjectiveStatus] = []

class LocationUpdateResult(BaseModel):
    coordinate: Coordinate
    nearby: NearbySummary
    nearby_folder_ids: list[str]
    completed: list[ObjectiveCompleted] = []
    progress: float | None = None
