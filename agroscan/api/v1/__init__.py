# 📄 File: agroscan/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists where each group of version 1 endpoints lives, like a building directory.
# 🧪 Purpose (Technical Summary):
# API v1 package constants: route prefixes and OpenAPI tag metadata shared by the
# router aggregation and the application factory.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# agroscan.api.v1.router, agroscan.main

from typing import Any, Dict, List

API_VERSION = "v1"

ROUTE_PREFIXES = {
    "auth": "/auth",
    "users": "/users",
    "inspections": "/inspections",
    "inspection_images": "/inspection-images",
    "inspection_analyses": "/inspection-analyses",
}

API_TAGS: List[Dict[str, Any]] = [
    {"name": "Health Check", "description": "Liveness and database connectivity"},
    {"name": "Authentication", "description": "Registration and login"},
    {"name": "Users", "description": "User account management"},
    {"name": "Inspections", "description": "Plant and vegetable inspection records"},
    {"name": "Inspection Images", "description": "Photos attached to inspections"},
    {"name": "Inspection Analyses", "description": "Analysis results attached to inspections"},
]
