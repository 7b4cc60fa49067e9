"""Root API router: health checks, service info and the /api/v1 mount."""

from typing import Any

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from resume_api import __version__
from resume_api.api.dependencies import DBSession
from resume_api.config import settings
from resume_api.core.database import Base
from resume_api.modules import discover_modules


logger = structlog.get_logger()

# Routers are discovered once, at import, so the mounted set is fixed
MODULE_ROUTERS = discover_modules()


class HealthResponse(BaseModel):
    status: str


class ReadinessResponse(BaseModel):
    """Per-check results; a check passes when its value is ``ok``."""

    status: str
    checks: dict[str, str]


class InfoResponse(BaseModel):
    app: str
    version: str
    environment: str
    modules: list[str]


def _existing_tables(session: Session) -> set[str]:
    return set(inspect(session.connection()).get_table_names())


api_router = APIRouter()

# Health and info endpoints sit outside /api/v1
health_router = APIRouter(tags=["health"])


@health_router.get(
    "/health/live",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Returns 200 while the process is serving requests.",
)
async def liveness() -> HealthResponse:
    return HealthResponse(status="alive")


@health_router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
    description="Checks that the database answers and every mapped table exists.",
)
async def readiness(db: DBSession) -> JSONResponse:
    """Report 503 until the database is reachable and migrated."""
    checks: dict[str, str] = {}

    try:
        existing = await db.run_sync(_existing_tables)
    except (OSError, SQLAlchemyError) as e:
        logger.warning("readiness_database_failed", error=str(e))
        checks["database"] = "unavailable"
        checks["schema"] = "unknown"
    else:
        checks["database"] = "ok"
        missing = sorted(set(Base.metadata.tables) - existing)
        checks["schema"] = "ok" if not missing else f"missing tables: {', '.join(missing)}"

    all_ok = all(v == "ok" for v in checks.values())

    return JSONResponse(
        status_code=status.HTTP_200_OK if all_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if all_ok else "degraded",
            "checks": checks,
        },
    )


@health_router.get(
    "/info",
    response_model=InfoResponse,
    summary="Service info",
    description="Returns the running version and the feature modules mounted under /api/v1.",
)
async def info() -> dict[str, Any]:
    return {
        "app": settings.app_name,
        "version": __version__,
        "environment": settings.environment,
        "modules": sorted(MODULE_ROUTERS),
    }


v1_router = APIRouter(prefix="/api/v1")

for module_router in MODULE_ROUTERS.values():
    v1_router.include_router(module_router)

api_router.include_router(health_router)
api_router.include_router(v1_router)
