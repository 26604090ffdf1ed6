"""
Tests - proximity resolution of coordinates into location folders.
"""

from __future__ import annotations

from geotagger.schemas.folders import Folder, Note
from geotagger.services.proximity import nearby, nearby_summary, resolve_or_create

from conftest import PARIS, PARIS_NEAR, SAINT_DENIS, coord


def _folder(lat: float, lon: float, name: str = "f", notes: int = 0) -> Folder:
    f = Folder(name=name, anchor=coord(lat, lon))
    f.notes = [Note(folder_id=f.id, text=f"note {i}") for i in range(notes)]
    return f


class TestResolveOrCreate:
    def test_creates_folder_when_collection_empty(self) -> None:
        c = coord(*PARIS)
        folder = resolve_or_create(c, [])
        assert folder.anchor == c
        assert folder.notes == []
        assert folder.id
        assert folder.created_at == folder.updated_at
        assert "48.85660" in folder.name

    def test_does_not_insert_into_collection(self) -> None:
        folders: list[Folder] = []
        resolve_or_create(coord(*PARIS), folders)
        assert folders == []

    def test_scenario_same_place_resolves_to_existing(self) -> None:
        existing = _folder(*PARIS)
        assert resolve_or_create(coord(*PARIS_NEAR), [existing], 50).id == existing.id

    def test_scenario_far_place_creates_new(self) -> None:
        existing = _folder(*PARIS)
        folder = resolve_or_create(coord(*SAINT_DENIS), [existing], 50)
        assert folder.id != existing.id
        assert folder.anchor.latitude == SAINT_DENIS[0]

    def test_first_match_in_insertion_order_wins(self) -> None:
        first = _folder(*PARIS, name="first")
        second = _folder(*PARIS_NEAR, name="second")
        assert resolve_or_create(coord(*PARIS_NEAR), [first, second]).name == "first"
        assert resolve_or_create(coord(*PARIS_NEAR), [second, first]).name == "second"

    def test_identity_is_stable_only_after_persisting(self) -> None:
        folders: list[Folder] = []
        c = coord(*PARIS)

        a = resolve_or_create(c, folders)
        b = resolve_or_create(c, folders)
        assert a.id != b.id  # nothing persisted in between

        folders.append(a)
        assert resolve_or_create(c, folders).id == a.id

    def test_anchor_not_moved_by_new_members(self) -> None:
        existing = _folder(*PARIS)
        resolve_or_create(coord(*PARIS_NEAR), [existing])
        assert (existing.anchor.latitude, existing.anchor.longitude) == PARIS

    def test_existing_close_folders_are_not_merged(self) -> None:
        a, b = _folder(*PARIS), _folder(*PARIS_NEAR)
        folders = [a, b]
        resolve_or_create(coord(*PARIS), folders)
        assert [f.id for f in folders] == [a.id, b.id]


class TestNearby:
    def test_returns_all_within_threshold_in_order(self) -> None:
        a, b, far = _folder(*PARIS), _folder(*PARIS_NEAR), _folder(*SAINT_DENIS)
        assert [f.id for f in nearby(coord(*PARIS), [a, far, b])] == [a.id, b.id]

    def test_empty_when_nothing_close(self) -> None:
        assert nearby(coord(*SAINT_DENIS), [_folder(*PARIS)]) == []

    def test_summary_counts_notes(self) -> None:
        s = nearby_summary([_folder(*PARIS, notes=2), _folder(*PARIS_NEAR, notes=3)])
        assert (s.folder_count, s.note_count) == (2, 5)
