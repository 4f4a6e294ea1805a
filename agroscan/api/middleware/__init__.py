# 📄 File: agroscan/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the layers every request passes through: one keeps a log, one catches crashes
# 🧪 Purpose (Technical Summary):
# Middleware package exporting request logging and global error handling
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware
# 🔄 Connected Modules / Calls From:
# agroscan.main

from .error_handling import ErrorHandlingMiddleware
from .logging import RequestLoggingMiddleware

__all__ = ["ErrorHandlingMiddleware", "RequestLoggingMiddleware"]
