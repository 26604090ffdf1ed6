# geotagger/services/folders.py
"""
Folder and note mutations on top of a :class:`FolderStore`.

Every mutation is load -> change -> save of the whole collection under one
lock, so two requests for the same spot can never both see "no folder here"
and create two folders.
"""
import logging
import threading

from ..core.errors import FolderNotFoundError, InputValidationError, NoteNotFoundError
from ..schemas.common import Coordinate
from ..schemas.folders import Folder, Note, SatelliteSummary
from ..utils.time import now_ms
from .proximity import PROXIMITY_THRESHOLD_M, nearby, resolve_or_create
from .storage import FolderStore, load_all_notes

logger = logging.getLogger(__name__)

def _clean(text: str, what: str) -> str:
    text = (text or "").strip()
    if not text:
        raise InputValidationError(f"{what} must not be blank")
    return text

def _find(folders: list[Folder], folder_id: str) -> Folder:
    for f in folders:
        if f.id == folder_id:
            return f
    raise FolderNotFoundError(folder_id)

class FolderService:
    def __init__(self, store: FolderStore, threshold_m: float = PROXIMITY_THRESHOLD_M):
        self.store = store
        self.threshold_m = threshold_m
        self._lock = threading.Lock()

    def _threshold(self, threshold_m: float | None) -> float:
        # 0 es un umbral válido (solo coincidencia exacta)
        return self.threshold_m if threshold_m is None else threshold_m

    # ---------- lecturas ----------
    def list_folders(self) -> list[Folder]:
        """Most recently updated first."""
        return sorted(self.store.load_all_folders(), key=lambda f: f.updated_at, reverse=True)

    def all_folders(self) -> list[Folder]:
        """Insertion order, oldest first."""
        return self.store.load_all_folders()

    def get(self, folder_id: str) -> Folder:
        return _find(self.store.load_all_folders(), folder_id)

    def nearby(self, coordinate: Coordinate, threshold_m: float | None = None) -> list[Folder]:
        return nearby(coordinate, self.store.load_all_folders(), self._threshold(threshold_m))

    def all_notes(self) -> list[Note]:
        notes = load_all_notes(self.store)
        return sorted(notes, key=lambda n: n.created_at, reverse=True)

    # ---------- escrituras ----------
    def add_note_here(self, coordinate: Coordinate, text: str, threshold_m: float | None = None) -> tuple[Folder, Note, bool]:
        """
        Attach a note to the folder covering ``coordinate``, creating the
        folder when none is within the threshold.

        Returns ``(folder, note, created)``.
        """
        text = _clean(text, "note text")
        with self._lock:
            folders = self.store.load_all_folders()
            folder = resolve_or_create(coordinate, folders, self._threshold(threshold_m))
            created = all(f.id != folder.id for f in folders)
            if created:
                folders.append(folder)
            note = Note(folder_id=folder.id, text=text)
            folder.notes.append(note)
            folder.updated_at = note.created_at
            self.store.save_all_folders(folders)

        if created:
            logger.info("created folder %s at %.6f, %.6f", folder.id, coordinate.latitude, coordinate.longitude)
        logger.info("note %s added to folder %s", note.id, folder.id)
        return folder, note, created

    def add_note(self, folder_id: str, text: str) -> Note:
        text = _clean(text, "note text")
        with self._lock:
            folders = self.store.load_all_folders()
            folder = _find(folders, folder_id)
            note = Note(folder_id=folder.id, text=text)
            folder.notes.append(note)
            folder.updated_at = note.created_at
            self.store.save_all_folders(folders)
        logger.info("note %s added to folder %s", note.id, folder_id)
        return note

    def delete_note(self, folder_id: str, note_id: str) -> Folder:
        with self._lock:
            folders = self.store.load_all_folders()
            folder = _find(folders, folder_id)
            remaining = [n for n in folder.notes if n.id != note_id]
            if len(remaining) == len(folder.notes):
                raise NoteNotFoundError(folder_id, note_id)
            folder.notes = remaining
            folder.updated_at = now_ms()
            self.store.save_all_folders(folders)
        logger.info("note %s deleted from folder %s", note_id, folder_id)
        return folder

    def rename(self, folder_id: str, name: str) -> Folder:
        name = _clean(name, "folder name")
        with self._lock:
            folders = self.store.load_all_folders()
            folder = _find(folders, folder_id)
            folder.name = name
            folder.updated_at = now_ms()
            self.store.save_all_folders(folders)
        return folder

    def delete_folder(self, folder_id: str) -> None:
        with self._lock:
            folders = self.store.load_all_folders()
            folder = _find(folders, folder_id)
            self.store.save_all_folders([f for f in folders if f.id != folder_id])
        logger.info("folder %s deleted with %d notes", folder_id, len(folder.notes))

    def set_satellite_data(self, folder_id: str, summary: SatelliteSummary) -> Folder:
        with self._lock:
            folders = self.store.load_all_folders()
            folder = _find(folders, folder_id)
            folder.satellite_data = summary
            folder.updated_at = now_ms()
            self.store.save_all_folders(folders)
        return folder
