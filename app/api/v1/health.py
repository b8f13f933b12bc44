# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check addresses that tell load balancers and operators whether the pack service is up
# and whether it can reach its database.
# 🧪 Purpose (Technical Summary):
# Liveness, readiness and detailed health endpoints. Readiness pings Postgres; the detailed
# check adds connection-pool information and process/system metrics from psutil.
# 🔗 Dependencies:
# FastAPI, psutil, app.shared.infrastructure.database.connection, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py, monitoring systems, load balancers

import os
import platform
import sys
from datetime import datetime, timezone
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import (
    database_health_check as db_health_check,
    get_connection_info,
)
from app.shared.utils.logging import SERVICE_NAME, get_logger, log_health_check

logger = get_logger(__name__)

health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _uptime_seconds() -> float:
    return round((datetime.now(timezone.utc) - _app_start_time).total_seconds(), 3)


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Liveness check for load balancers; does not touch the database")
async def health_check() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            "ok": True,
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
            "timestamp": _now(),
        }
    )


@health_router.get("/health/live",
                   summary="Liveness Probe",
                   description="Kubernetes liveness probe endpoint")
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready",
                   summary="Readiness Probe",
                   description="Ready when the database answers SELECT 1")
async def readiness_probe() -> JSONResponse:
    """
    Readiness probe.

    Returns 503 until the database is reachable so traffic is held back
    while Postgres is down.
    """
    db_health = await db_health_check()
    log_health_check("database", db_health["status"], extra={"probe": "readiness"})

    if db_health["status"] == "healthy":
        return JSONResponse(
            status_code=200,
            content={"status": "ready", "timestamp": _now()}
        )

    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "database_unhealthy",
            "error": db_health.get("error"),
            "timestamp": _now(),
        }
    )


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Database, connection pool and system resource status")
async def detailed_health_check() -> JSONResponse:
    """
    Comprehensive health check.

    Status is "unhealthy" (503) when the database is unreachable and
    "degraded" (200) when system resources run close to their limits.
    """
    started = datetime.now(timezone.utc)
    overall_status = "healthy"
    components: Dict[str, Any] = {}

    db_health = await db_health_check()
    db_health["pool"] = get_connection_info()
    components["database"] = db_health
    if db_health["status"] != "healthy":
        overall_status = "unhealthy"

    system_metrics = _get_system_metrics()
    components["system"] = system_metrics
    if overall_status == "healthy" and system_metrics.get("status") == "degraded":
        overall_status = "degraded"

    response_time = (datetime.now(timezone.utc) - started).total_seconds()

    return JSONResponse(
        status_code=503 if overall_status == "unhealthy" else 200,
        content={
            "status": overall_status,
            "timestamp": _now(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
            "environment": get_settings().ENVIRONMENT,
            "uptime_seconds": _uptime_seconds(),
            "response_time_seconds": round(response_time, 4),
            "components": components,
        }
    )


def _get_system_metrics() -> Dict[str, Any]:
    """Process and host resource usage. Non-blocking: cpu_percent uses the last sample."""
    try:
        memory = psutil.virtual_memory()
        disk = psutil.disk_usage("/")
        process = psutil.Process(os.getpid())

        metrics = {
            "cpu_percent": psutil.cpu_percent(interval=None),
            "memory_percent": memory.percent,
            "disk_percent": round(disk.used / disk.total * 100, 2),
            "process_memory_mb": round(process.memory_info().rss / (1024 * 1024), 2),
            "process_threads": process.num_threads(),
            "python_version": sys.version.split()[0],
            "platform": platform.system(),
        }
    except (psutil.Error, OSError) as e:
        logger.warning(f"System metrics unavailable: {e}")
        return {"status": "error", "error": str(e), "timestamp": _now()}

    degraded = (
        metrics["cpu_percent"] > 90
        or metrics["memory_percent"] > 90
        or metrics["disk_percent"] > 95
    )
    metrics["status"] = "degraded" if degraded else "healthy"
    metrics["timestamp"] = _now()
    return metrics
