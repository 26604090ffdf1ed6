# geotagger/core/context.py
from dataclasses import dataclass
from functools import lru_cache

from .config import Settings, settings
from ..services.folders import FolderService
from ..services.location import LocationConsumer, LocationFeed
from ..services.missions import MissionBoard
from ..services.satellite import GridSource, SatelliteService, source_from_settings
from ..services.storage import FolderStore, JsonFolderStore

@dataclass
class AppContext:
    settings: Settings
    folders: FolderService
    satellite: SatelliteService
    missions: MissionBoard
    feed: LocationFeed
    consumer: LocationConsumer

def build_context(cfg: Settings, store: FolderStore | None = None, source: GridSource | None = None) -> AppContext:
    folders = FolderService(store or JsonFolderStore(cfg.data_file), threshold_m=cfg.proximity_threshold_m)
    satellite = SatelliteService(source or source_from_settings(cfg), grid_size=cfg.grid_size)
    missions = MissionBoard()
    feed = LocationFeed()
    consumer = LocationConsumer(folders, missions)
    consumer.attach(feed)
    return AppContext(
        settings=cfg,
        folders=folders,
        satellite=satellite,
        missions=missions,
        feed=feed,
        consumer=consumer,
    )

@lru_cache
def get_context() -> AppContext:
    return build_context(settings)
