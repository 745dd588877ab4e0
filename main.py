# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Team Scheduler
==============
Keeps a small team's weekly work schedules, recurring availability and
date-specific availability overrides in memory, reports per-member and
total hours, and serves a browser client for the weekly summary.

Port: 3001
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from team_scheduler.controllers import (
    availability_controller,
    schedule_controller,
    summary_controller,
    system_controller,
    ui_controller,
    user_controller,
)
from team_scheduler.core.config import settings
from team_scheduler.core.dependencies import get_store
from team_scheduler.core.errors import InternalError, SchedulerError
from team_scheduler.core.logging import get_logger
from team_scheduler.middleware import MetricsMiddleware, RequestIDMiddleware
from team_scheduler.schemas.scheduler import ErrorResponse
from team_scheduler.services.directory_service import DirectoryService

logger = get_logger(settings.SERVICE_NAME)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Seed the default team on startup and log shutdown."""
    store = get_store()
    if settings.SEED_DEFAULT_USERS and store.users.count() == 0:
        DirectoryService(store).seed_defaults()
    logger.info(
        "%s v%s starting on port %d",
        settings.SERVICE_NAME, settings.SERVICE_VERSION, settings.SERVICE_PORT,
    )
    yield
    logger.info("%s shutting down, %d users in memory", settings.SERVICE_NAME, store.users.count())


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Team Scheduler",
    description="Weekly team schedules, availability and hour summaries.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        404: {"model": ErrorResponse, "description": "Not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Exception handlers ────────────────────────────────────────────────────
def _request_id(request: Request):
    return getattr(request.state, "request_id", None)


@app.exception_handler(SchedulerError)
async def scheduler_error_handler(request: Request, exc: SchedulerError):
    if isinstance(exc, InternalError):
        logger.error(
            "Internal error", exc_info=exc, extra={"request_id": _request_id(request)}
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "Internal server error",
                "message": GENERIC_ERROR_MESSAGE,
                "request_id": _request_id(request),
            },
        )
    logger.info(
        "Request rejected: status=%d, error=%s", exc.status_code, exc.message,
        extra={"request_id": _request_id(request)},
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"] if part != "body")
    message = f"{field}: {error['msg']}" if field else error["msg"]
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        message = (
            "API endpoint not found"
            if request.url.path.startswith("/api")
            else "Endpoint not found"
        )
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = _request_id(request)
    logger.error("Unhandled exception", exc_info=exc, extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": GENERIC_ERROR_MESSAGE,
            "request_id": req_id,
        },
    )


# ── Routers ───────────────────────────────────────────────────────────────
app.include_router(system_controller.router)
app.include_router(user_controller.router)
app.include_router(schedule_controller.router)
app.include_router(availability_controller.router)
app.include_router(summary_controller.router)
app.include_router(ui_controller.router)


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.SERVICE_HOST, port=settings.SERVICE_PORT, log_level="info")
