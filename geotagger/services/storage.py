# geotagger/services/storage.py
"""
Folder persistence port.

The source of truth is a whole document: callers load every folder, work on
the in-memory snapshot and save the full collection back. Notes live inside
their folder, so deleting a folder deletes its notes.
"""
import json
import logging
import os
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from ..core.errors import PersistenceError
from ..schemas.folders import Folder, Note

logger = logging.getLogger(__name__)

_folders_adapter = TypeAdapter(list[Folder])

class FolderStore(Protocol):
    def load_all_folders(self) -> list[Folder]: ...
    def save_all_folders(self, folders: list[Folder]) -> None: ...

def load_all_notes(store: FolderStore) -> list[Note]:
    return [note for folder in store.load_all_folders() for note in folder.notes]

class InMemoryFolderStore:
    """Keeps a serialized copy so callers never share objects with the store."""

    def __init__(self, folders: list[Folder] | None = None):
        self._doc = _folders_adapter.dump_python(folders or [], mode="json")

    def load_all_folders(self) -> list[Folder]:
        return _folders_adapter.validate_python(self._doc)

    def save_all_folders(self, folders: list[Folder]) -> None:
        self._doc = _folders_adapter.dump_python(folders, mode="json")

class JsonFolderStore:
    """Folders in a single JSON file: ``{"folders": [...]}``."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load_all_folders(self) -> list[Folder]:
        if not self.path.exists():
            return []
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8"))
            return _folders_adapter.validate_python(doc.get("folders", []))
        except (OSError, ValueError, AttributeError, ValidationError) as ex:
            raise PersistenceError(f"Cannot read folders from {self.path}: {ex}") from ex

    def save_all_folders(self, folders: list[Folder]) -> None:
        payload = {"folders": _folders_adapter.dump_python(folders, mode="json")}
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as ex:
            raise PersistenceError(f"Cannot write folders to {self.path}: {ex}") from ex
        logger.debug("saved %d folders to %s", len(folders), self.path)
