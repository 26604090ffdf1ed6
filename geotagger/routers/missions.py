# geotagger/routers/missions.py
from fastapi import APIRouter, Depends, HTTPException

from ..core.context import AppContext, get_context
from ..core.errors import LocationError
from ..schemas.data_requests import LocationUpdate, MissionStart
from ..schemas.missions import LocationUpdateResult, Mission, MissionProgress

router = APIRouter(tags=["missions"])

@router.post("/missions", response_model=MissionProgress, status_code=201)
def start_mission(q: MissionStart | None = None, ctx: AppContext = Depends(get_context)):
    q = q or MissionStart()
    cfg = ctx.settings
    tracker = ctx.missions.start(
        ctx.folders.all_folders(),
        count=q.objective_count or cfg.mission_objective_count,
        required_distance_m=q.required_distance_m or cfg.mission_required_distance_m,
        reward=cfg.mission_reward,
    )
    return tracker.snapshot(ctx.feed.latest)

@router.get("/missions/active", response_model=MissionProgress)
def active_mission(ctx: AppContext = Depends(get_context)):
    tracker = ctx.missions.active()
    if tracker is None:
        raise HTTPException(status_code=404, detail="No active mission")
    return tracker.snapshot(ctx.feed.latest)

@router.post("/missions/active/claim", response_model=Mission)
def claim_mission(ctx: AppContext = Depends(get_context)):
    return ctx.missions.claim()

@router.post("/location", response_model=LocationUpdateResult)
def push_location(update: LocationUpdate, ctx: AppContext = Depends(get_context)):
    if update.error is not None:
        err = LocationError(update.error, update.message)
        ctx.feed.publish_error(err)
        raise err
    result = ctx.feed.publish(update.coordinate)
    if result is None:
        raise HTTPException(status_code=503, detail="Location feed has no subscriber")
    return result
