# geotagger/routers/folders.py
from fastapi import APIRouter, Depends, Query, Response

from ..core.context import AppContext, get_context
from ..schemas.common import Coordinate
from ..schemas.data_requests import FolderRename, NoteCreate, NoteHere
from ..schemas.folders import Folder, Note
from ..services.proximity import nearby_summary

router = APIRouter(prefix="/folders", tags=["folders"])

# Rutas síncronas: FastAPI las ejecuta en el threadpool y FolderService
# serializa las escrituras con su lock.

@router.get("", response_model=list[Folder])
def list_folders(ctx: AppContext = Depends(get_context)):
    return ctx.folders.list_folders()

@router.get("/nearby")
def nearby_folders(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    threshold_m: float | None = Query(None, gt=0),
    ctx: AppContext = Depends(get_context),
):
    # reciente primero, como la lista principal
    close = sorted(
        ctx.folders.nearby(Coordinate(latitude=lat, longitude=lon), threshold_m),
        key=lambda f: f.updated_at,
        reverse=True,
    )
    return {"summary": nearby_summary(close), "folders": close}

@router.get("/notes", response_model=list[Note])
def all_notes(ctx: AppContext = Depends(get_context)):
    return ctx.folders.all_notes()

@router.post("/notes", status_code=201)
def add_note_here(q: NoteHere, response: Response, ctx: AppContext = Depends(get_context)):
    folder, note, created = ctx.folders.add_note_here(q.coordinate, q.text, q.threshold_m)
    if not created:
        response.status_code = 200
    return {"folder": folder, "note": note, "created_folder": created}

@router.get("/{folder_id}", response_model=Folder)
def get_folder(folder_id: str, ctx: AppContext = Depends(get_context)):
    return ctx.folders.get(folder_id)

@router.patch("/{folder_id}", response_model=Folder)
def rename_folder(folder_id: str, body: FolderRename, ctx: AppContext = Depends(get_context)):
    return ctx.folders.rename(folder_id, body.name)

@router.delete("/{folder_id}", status_code=204)
def delete_folder(folder_id: str, ctx: AppContext = Depends(get_context)):
    ctx.folders.delete_folder(folder_id)
    return Response(status_code=204)

@router.post("/{folder_id}/notes", response_model=Note, status_code=201)
def add_note(folder_id: str, body: NoteCreate, ctx: AppContext = Depends(get_context)):
    return ctx.folders.add_note(folder_id, body.text)

@router.delete("/{folder_id}/notes/{note_id}", response_model=Folder)
def delete_note(folder_id: str, note_id: str, ctx: AppContext = Depends(get_context)):
    return ctx.folders.delete_note(folder_id, note_id)
