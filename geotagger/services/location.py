# geotagger/services/location.py
"""
Location feed: one live subscription, latest-only delivery.

Updates are handed to the subscriber one at a time and never queued; if
nobody is subscribed the update only refreshes :attr:`LocationFeed.latest`.
Errors from the location source are passed to the subscriber unchanged and
skip that update; they never tear the feed down.
"""
import logging
import threading
from typing import Any, Callable, Optional

from ..core.errors import LocationError
from ..schemas.common import Coordinate
from ..schemas.missions import LocationUpdateResult
from .folders import FolderService
from .missions import MissionBoard
from .proximity import nearby_summary

logger = logging.getLogger(__name__)

OnCoordinate = Callable[[Coordinate], Any]
OnError = Callable[[LocationError], Any]

class Subscription:
    def __init__(self, feed: "LocationFeed", on_coordinate: OnCoordinate, on_error: Optional[OnError]):
        self._feed = feed
        self.on_coordinate = on_coordinate
        self.on_error = on_error
        self.active = True

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._feed._release(self)

class LocationFeed:
    def __init__(self):
        self._sub: Subscription | None = None
        self._lock = threading.Lock()
        self.latest: Coordinate | None = None

    def subscribe(self, on_coordinate: OnCoordinate, on_error: Optional[OnError] = None) -> Subscription:
        """Start watching; an existing subscription is cancelled first."""
        if self._sub is not None:
            logger.debug("replacing active location subscription")
            self._sub.cancel()
        self._sub = Subscription(self, on_coordinate, on_error)
        return self._sub

    def _release(self, sub: Subscription) -> None:
        if self._sub is sub:
            self._sub = None

    @property
    def subscribed(self) -> bool:
        return self._sub is not None

    def publish(self, coordinate: Coordinate) -> Any:
        """Deliver ``coordinate``; returns what the subscriber returned (None if nobody listens)."""
        with self._lock:
            self.latest = coordinate
            sub = self._sub
            if sub is None:
                return None
            return sub.on_coordinate(coordinate)

    def publish_error(self, error: LocationError) -> None:
        with self._lock:
            sub = self._sub
            if sub is not None and sub.on_error is not None:
                sub.on_error(error)

class LocationConsumer:
    """Reacts to each coordinate: nearby folders and mission progress."""

    def __init__(self, folders: FolderService, missions: MissionBoard):
        self.folders = folders
        self.missions = missions
        self.last_error: LocationError | None = None

    def on_coordinate(self, coordinate: Coordinate) -> LocationUpdateResult:
        close = self.folders.nearby(coordinate)
        result = LocationUpdateResult(
            coordinate=coordinate,
            nearby=nearby_summary(close),
            nearby_folder_ids=[f.id for f in close],
        )
        tracker = self.missions.active()
        if tracker is not None:
            result.completed = tracker.update(coordinate)
            result.progress = tracker.progress
        return result

    def on_error(self, error: LocationError) -> None:
        self.last_error = error
        logger.warning("location update skipped (%s): %s", error.kind.value, error.message)

    def attach(self, feed: LocationFeed) -> Subscription:
        return feed.subscribe(self.on_coordinate, self.on_error)
