# 📄 File: agroscan/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all version 1 requests, sending account
# requests to the account handlers and inspection requests to the inspection handlers.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines the health router and every module
# router under its prefix and tag.
# 🔗 Dependencies:
# FastAPI, agroscan.api.v1.health, module presentation routers
# 🔄 Connected Modules / Calls From:
# agroscan.main

import logging

from fastapi import APIRouter

from . import ROUTE_PREFIXES
from .health import health_router
from agroscan.modules.inspection_management.presentation.api.v1 import (
    inspection_analyses_router,
    inspection_images_router,
    inspections_router,
)
from agroscan.modules.user_management.presentation.api.v1 import auth_router, users_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])

# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

for router, prefix, tag in [
    (auth_router, ROUTE_PREFIXES["auth"], "Authentication"),
    (users_router, ROUTE_PREFIXES["users"], "Users"),
    (inspections_router, ROUTE_PREFIXES["inspections"], "Inspections"),
    (inspection_images_router, ROUTE_PREFIXES["inspection_images"], "Inspection Images"),
    (inspection_analyses_router, ROUTE_PREFIXES["inspection_analyses"], "Inspection Analyses"),
]:
    api_v1_router.include_router(router, prefix=prefix, tags=[tag])
    logger.debug(f"{tag} router mounted at {prefix}")
