"""
Tests - location feed delivery and the consumer that reacts to it.
"""

from __future__ import annotations

from geotagger.core.errors import LocationError, LocationErrorKind
from geotagger.services.folders import FolderService
from geotagger.services.location import LocationConsumer, LocationFeed
from geotagger.services.missions import MissionBoard

from conftest import PARIS, PARIS_NEAR, SAINT_DENIS, coord


class TestLocationFeed:
    def test_delivers_to_subscriber(self) -> None:
        feed = LocationFeed()
        seen = []
        here = coord(*PARIS)
        feed.subscribe(lambda c: seen.append(c) or len(seen))
        assert feed.publish(here) == 1
        assert seen == [here]

    def test_no_subscriber_only_updates_latest(self) -> None:
        feed = LocationFeed()
        here = coord(*PARIS)
        assert feed.publish(here) is None
        assert feed.latest is here
        assert not feed.subscribed

    def test_new_subscription_replaces_old(self) -> None:
        feed = LocationFeed()
        first, second = [], []
        old = feed.subscribe(first.append)
        feed.subscribe(second.append)
        feed.publish(coord(*PARIS))
        assert not old.active
        assert first == [] and len(second) == 1

    def test_cancelled_subscription_receives_nothing(self) -> None:
        feed = LocationFeed()
        seen = []
        sub = feed.subscribe(seen.append)
        sub.cancel()
        sub.cancel()
        feed.publish(coord(*PARIS))
        assert seen == []
        assert not feed.subscribed

    def test_errors_reach_subscriber_without_ending_feed(self) -> None:
        feed = LocationFeed()
        seen, errors = [], []
        feed.subscribe(seen.append, errors.append)
        feed.publish_error(LocationError(LocationErrorKind.TIMEOUT))
        feed.publish(coord(*PARIS))
        assert [e.kind for e in errors] == [LocationErrorKind.TIMEOUT]
        assert len(seen) == 1
        assert feed.subscribed

    def test_error_kind_accepts_wire_value(self) -> None:
        err = LocationError("permission-denied")
        assert err.kind is LocationErrorKind.PERMISSION_DENIED
        assert "permission-denied" in err.message


class TestLocationConsumer:
    def _wire(self, store):
        folders = FolderService(store)
        board = MissionBoard()
        feed = LocationFeed()
        consumer = LocationConsumer(folders, board)
        consumer.attach(feed)
        return folders, board, feed, consumer

    def test_reports_nearby_folders(self, store) -> None:
        folders, _, feed, _ = self._wire(store)
        folder, _, _ = folders.add_note_here(coord(*PARIS), "a")
        folders.add_note(folder.id, "b")

        result = feed.publish(coord(*PARIS_NEAR))
        assert result.nearby.folder_count == 1
        assert result.nearby.note_count == 2
        assert result.nearby_folder_ids == [folder.id]
        assert result.progress is None

        far = feed.publish(coord(*SAINT_DENIS))
        assert far.nearby.folder_count == 0

    def test_advances_active_mission(self, store) -> None:
        folders, board, feed, _ = self._wire(store)
        folders.add_note_here(coord(*PARIS), "a")
        folders.add_note_here(coord(*SAINT_DENIS), "b")
        board.start(folders.all_folders())

        result = feed.publish(coord(*PARIS_NEAR))
        assert len(result.completed) == 1
        assert result.progress == 50.0
        assert feed.publish(coord(*PARIS)).completed == []

    def test_error_is_recorded(self, store) -> None:
        _, _, feed, consumer = self._wire(store)
        feed.publish_error(LocationError(LocationErrorKind.UNAVAILABLE, "gps off"))
        assert consumer.last_error.kind is LocationErrorKind.UNAVAILABLE
        assert consumer.last_error.message == "gps off"
