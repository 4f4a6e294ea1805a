# 📄 File: agroscan/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a Python package so the app can load its web endpoints
# and the request handling layers that wrap them.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer: versioned routers and middleware.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# agroscan.main

"""
AgroScan API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/          # Request logging and error handling
    │   ├── logging.py
    │   └── error_handling.py
    └── v1/                  # API version 1
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoint
"""

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
