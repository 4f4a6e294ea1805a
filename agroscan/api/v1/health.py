# 📄 File: agroscan/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# This file provides a health check endpoint that tells us whether AgroScan is running
# and can still reach its database.
# 🧪 Purpose (Technical Summary):
# Health endpoint returning service status plus a SELECT 1 database probe;
# responds 503 when the database is unreachable.
# 🔗 Dependencies:
# FastAPI, agroscan.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# agroscan.api.v1.router, load balancers and monitoring

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from agroscan.shared.config.settings import get_settings
from agroscan.shared.infrastructure.database.connection import database_health_check

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()


@health_router.get("/health",
                   summary="Health Check",
                   description="Service liveness plus database connectivity")
async def health_check() -> JSONResponse:
    """
    Health check endpoint

    Returns 200 when the database answers, 503 otherwise.
    """
    database = await database_health_check()
    healthy = database["status"] == "healthy"
    if not healthy:
        logger.warning(f"Health check degraded: {database.get('error')}")

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "agroscan-api",
            "version": get_settings().APP_VERSION,
            "components": {"database": database},
        }
    )
