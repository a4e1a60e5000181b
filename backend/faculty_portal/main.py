import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from faculty_portal.api.routes import (
    activity,
    faculty,
    health,
    invigilation,
    leaves,
    lecture_templates,
    schedule,
)
from faculty_portal.core.config import get_settings
from faculty_portal.core.exceptions import AppError
from faculty_portal.core.middleware import (
    RequestLoggingMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from faculty_portal.db.bootstrap import ensure_runtime_schema

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    ensure_runtime_schema()
    yield


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "details": exc.details},
    )


app = FastAPI(title=settings.project_name, lifespan=lifespan)
app.add_exception_handler(AppError, app_error_handler)

app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_request_size_bytes)
app.add_middleware(SecurityHeadersMiddleware, settings=settings)
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(
    lecture_templates.router,
    prefix=f"{settings.api_prefix}/lecture-templates",
    tags=["lecture-templates"],
)
app.include_router(invigilation.router, prefix=f"{settings.api_prefix}/invigilation", tags=["invigilation"])
app.include_router(faculty.router, prefix=f"{settings.api_prefix}/faculty", tags=["faculty"])
app.include_router(leaves.router, prefix=settings.api_prefix, tags=["leaves"])
app.include_router(schedule.router, prefix=settings.api_prefix, tags=["schedule"])
app.include_router(activity.router, prefix=settings.api_prefix, tags=["activity"])
