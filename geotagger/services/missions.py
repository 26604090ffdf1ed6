# geotagger/services/missions.py
"""
Mission objectives completed by physically visiting target coordinates.

Each objective goes pending -> completed exactly once; nothing ever moves it
back. The tracker keeps no state other than those completion flags.
"""
import logging
from typing import Sequence

from ..core.errors import ConflictError
from ..schemas.common import Coordinate
from ..schemas.folders import Folder
from ..schemas.missions import Mission, MissionProgress, Objective, ObjectiveCompleted, ObjectiveStatus
from ..utils.geo import distance

logger = logging.getLogger(__name__)

def build_mission(
    folders: Sequence[Folder],
    count: int = 3,
    required_distance_m: float = 50.0,
    reward: int = 100,
) -> Mission | None:
    """Field data-collection mission over the first ``count`` folders; None if there are none."""
    if not folders:
        return None
    objectives = [
        Objective(
            id=f"obj-{idx}",
            description=f"Visit {folder.name} and add a new observation",
            target=folder.anchor,
            required_distance_m=required_distance_m,
        )
        for idx, folder in enumerate(folders[:count])
    ]
    return Mission(
        title="Field Data Collection",
        description="Visit your tagged locations and verify the current conditions",
        objectives=objectives,
        reward=reward,
    )

class MissionProgressTracker:
    def __init__(self, mission: Mission):
        self.mission = mission

    @property
    def objectives(self) -> list[Objective]:
        return self.mission.objectives

    @property
    def completed_count(self) -> int:
        return sum(1 for o in self.objectives if o.completed)

    @property
    def total_count(self) -> int:
        return len(self.objectives)

    @property
    def progress(self) -> float:
        # sin objetivos no hay progreso que medir
        if not self.objectives:
            return 0.0
        return self.completed_count / self.total_count * 100.0

    @property
    def is_complete(self) -> bool:
        return bool(self.objectives) and all(o.completed for o in self.objectives)

    @property
    def objective_reward(self) -> int:
        if not self.objectives:
            return 0
        return self.mission.reward // self.total_count

    def update(self, coordinate: Coordinate) -> list[ObjectiveCompleted]:
        """Evaluate one location sample; return events for objectives completed by it."""
        events: list[ObjectiveCompleted] = []
        for obj in self.objectives:
            if obj.completed or obj.target is None:
                continue
            d = distance(coordinate, obj.target)
            if d <= obj.required_distance_m:
                obj.completed = True
                events.append(ObjectiveCompleted(
                    mission_id=self.mission.id,
                    objective_id=obj.id,
                    description=obj.description,
                    distance_m=d,
                    reward=self.objective_reward,
                ))
                logger.info("objective %s completed at %.1f m", obj.id, d)
        if events and self.is_complete:
            logger.info("mission %s: all %d objectives completed", self.mission.id, self.total_count)
        return events

    def distances(self, coordinate: Coordinate | None) -> list[ObjectiveStatus]:
        return [
            ObjectiveStatus(
                objective_id=o.id,
                description=o.description,
                completed=o.completed,
                distance_m=(distance(coordinate, o.target) if coordinate is not None and o.target is not None else None),
            )
            for o in self.objectives
        ]

    def claim(self) -> Mission:
        """Mark the mission as finished; only allowed once every objective is done."""
        if not self.is_complete:
            raise ConflictError(
                f"Mission {self.mission.id} is {self.progress:.0f}% complete; cannot claim reward yet."
            )
        self.mission.completed = True
        logger.info("mission %s claimed, reward %d", self.mission.id, self.mission.reward)
        return self.mission

    def snapshot(self, coordinate: Coordinate | None = None) -> MissionProgress:
        return MissionProgress(
            mission=self.mission,
            completed_count=self.completed_count,
            total_count=self.total_count,
            progress=self.progress,
            is_complete=self.is_complete,
            objectives=self.distances(coordinate),
        )

class MissionBoard:
    """Holds the single active mission."""

    def __init__(self):
        self.tracker: MissionProgressTracker | None = None

    def start(self, folders: Sequence[Folder], count: int = 3, required_distance_m: float = 50.0, reward: int = 100) -> MissionProgressTracker:
        if self.tracker is not None and not self.tracker.mission.completed:
            raise ConflictError(f"Mission {self.tracker.mission.id} is still active")
        mission = build_mission(folders, count=count, required_distance_m=required_distance_m, reward=reward)
        if mission is None:
            raise ConflictError("Create location folders first to unlock missions")
        self.tracker = MissionProgressTracker(mission)
        logger.info("mission %s started with %d objectives", mission.id, len(mission.objectives))
        return self.tracker

    def active(self) -> MissionProgressTracker | None:
        return self.tracker

    def claim(self) -> Mission:
        if self.tracker is None:
            raise ConflictError("No active mission")
        mission = self.tracker.claim()
        self.tracker = None
        return mission
