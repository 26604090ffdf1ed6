import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.errors import GeoTaggerError
from .core.logging_config import configure_logging
from .schemas.common import ErrorBody
from .routers import data, folders, missions

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],      # ajusta para producción
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(GeoTaggerError)
async def geotagger_error_handler(request: Request, exc: GeoTaggerError):
    level = logging.ERROR if exc.status_code >= 500 and exc.status_code != 503 else logging.WARNING
    logger.log(level, "%s %s -> %s: %s", request.method, request.url.path, exc.__class__.__name__, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorBody(error=exc.__class__.__name__, detail=exc.message).model_dump(),
    )

app.include_router(folders.router)
app.include_router(data.router)
app.include_router(missions.router)

@app.get("/")
def root():
    return {"name": settings.app_name, "env": settings.app_env, "message": "OK"}
