# geotagger/services/proximity.py
"""
Proximity resolution: which location folder does a coordinate belong to?

A linear scan over the folders in insertion order. Anchors are fixed at
creation and folders are never merged after the fact, so two folders created
independently may end up closer than the threshold to each other; the resolver
only guarantees the rule at the moment a new coordinate is resolved.
"""
from typing import Iterable, Sequence

from ..schemas.common import Coordinate
from ..schemas.folders import Folder, NearbySummary
from ..utils.geo import is_within
from ..utils.time import now_ms

PROXIMITY_THRESHOLD_M = 50.0

def default_folder_name(coordinate: Coordinate) -> str:
    return f"Location {coordinate.latitude:.5f}, {coordinate.longitude:.5f}"

def resolve_or_create(
    coordinate: Coordinate,
    existing_folders: Iterable[Folder],
    threshold_m: float = PROXIMITY_THRESHOLD_M,
) -> Folder:
    """
    Devuelve la primera carpeta cuyo ancla esté a <= threshold_m, o una nueva.
    La carpeta nueva NO se persiste aquí: el llamador decide si guardarla
    (ver FolderService.add_note_here).
    """
    for folder in existing_folders:
        if is_within(coordinate, folder.anchor, threshold_m):
            return folder

    ts = now_ms()
    return Folder(
        name=default_folder_name(coordinate),
        anchor=coordinate,
        notes=[],
        created_at=ts,
        updated_at=ts,
    )

def nearby(
    coordinate: Coordinate,
    all_folders: Iterable[Folder],
    threshold_m: float = PROXIMITY_THRESHOLD_M,
) -> list[Folder]:
    return [f for f in all_folders if is_within(coordinate, f.anchor, threshold_m)]

def nearby_summary(folders: Sequence[Folder]) -> NearbySummary:
    return NearbySummary(
        folder_count=len(folders),
        note_count=sum(len(f.notes) for f in folders),
    )
