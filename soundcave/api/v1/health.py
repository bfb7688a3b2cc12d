# 📄 File: soundcave/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Provides check-up endpoints that tell load balancers and monitoring tools whether
# SoundCave is running and can reach its database.
# 🧪 Purpose (Technical Summary):
# Liveness and readiness probes. Readiness runs a trivial query through the
# application's DatabaseConfig and reports storage configuration.
# 🔗 Dependencies:
# FastAPI, soundcave.shared.config.database
# 🔄 Connected Modules / Calls From:
# soundcave.main, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter(tags=["Health Check"])

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Liveness probe for load balancers and monitoring")
async def health_check(request: Request) -> JSONResponse:
    """
    Basic health check endpoint

    Returns a simple OK status without touching dependencies.
    """
    settings = request.app.state.settings
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "soundcave-api",
            "version": settings.APP_VERSION,
            "uptime_seconds": int((datetime.now(timezone.utc) - _app_start_time).total_seconds()),
        }
    )


@health_router.get("/health/ready",
                   summary="Readiness Probe",
                   description="Reports whether the database is reachable")
async def readiness_check(request: Request) -> JSONResponse:
    """
    Readiness probe

    Returns 503 while the database cannot be reached so orchestrators keep
    traffic away from the instance.
    """
    database = await request.app.state.database.check_health()
    storage_ready = getattr(request.app.state, "storage", None) is not None
    ready = database["status"] == "healthy"

    if not ready:
        logger.warning("Readiness check failed: database unavailable")

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "components": {
                "database": database["status"],
                "storage": "configured" if storage_ready else "not_configured",
            },
        }
    )
